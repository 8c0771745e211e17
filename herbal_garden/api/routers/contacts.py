# herbal_garden/api/routers/contacts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from herbal_garden.data.database import get_db
from herbal_garden.domain.schemas import ApiResponse, ContactIn, ContactOut, ContactReceipt
from herbal_garden.services.contact_service import ContactService
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["contacts"])

ContactList = ApiResponse[List[ContactOut]]


def get_service(db: Session):
    return ContactService(db)


@router.post("/contact", response_model=ApiResponse[ContactReceipt], status_code=201)
def submit_contact(payload: ContactIn, db: Session = Depends(get_db)):
    """
    Zapis formularza kontaktowego, bez wysylki powiadomien.
    """
    svc = get_service(db)
    try:
        receipt = svc.submit_contact(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Error saving contact: {e}")
        raise HTTPException(status_code=500, detail="Server error. Please try again.")
    return ApiResponse[ContactReceipt](
        message="Thank you! Your message has been sent.",
        data=ContactReceipt.model_validate(receipt),
    )


@router.get("/contacts", response_model=ContactList, response_model_exclude_none=True)
def list_contacts(db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        contacts = svc.list_contacts()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching contacts: {e}")
        raise HTTPException(status_code=500, detail="Error fetching contacts")
    return ContactList(count=len(contacts), data=[ContactOut.model_validate(c) for c in contacts])
