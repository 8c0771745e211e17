# herbal_garden/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from herbal_garden.data.database import get_db
from herbal_garden.domain.schemas import ApiResponse, OrderSubmission, OrderReceipt, OrderOut
from herbal_garden.services.order_service import OrderService
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/orders", tags=["orders"])

OrderList = ApiResponse[List[OrderOut]]


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=ApiResponse[OrderReceipt], status_code=201)
def place_order(payload: OrderSubmission, db: Session = Depends(get_db)):
    """
    Sklada zamowienie z koszyka klienta.
    Zwraca orderId, date i totalAmount.
    """
    svc = get_service(db)
    try:
        receipt = svc.place_order(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (SQLAlchemyError, RuntimeError) as e:
        logger.error(f"Error creating order: {e}")
        raise HTTPException(status_code=500, detail="Error creating order")
    return ApiResponse[OrderReceipt](
        message="Order placed successfully!",
        data=OrderReceipt.model_validate(receipt),
    )


@router.get("", response_model=OrderList, response_model_exclude_none=True)
def list_orders(db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        orders = svc.list_orders()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching orders: {e}")
        raise HTTPException(status_code=500, detail="Error fetching orders")
    return OrderList(count=len(orders), data=orders)
