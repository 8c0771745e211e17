# herbal_garden/services/contact_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from herbal_garden.data.models.contact import ContactModel
from herbal_garden.domain.schemas import ContactIn
from herbal_garden.repos.contact_repo import ContactRepo
from herbal_garden.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("name", "email", "subject", "message")


class ContactService:
    def __init__(self, db: Session):
        self.repo = ContactRepo(db)

    def submit_contact(self, payload: ContactIn) -> Dict[str, Any]:
        fields = {f: (getattr(payload, f) or "").strip() for f in REQUIRED_FIELDS}
        if not all(fields.values()):
            raise ValueError("All fields are required")

        contact = self.repo.create_contact(
            ContactModel(
                name=fields["name"],
                email=fields["email"].lower(),
                subject=fields["subject"],
                message=fields["message"],
            )
        )

        logger.info(f"New contact submission {contact.id} from {contact.email}: {contact.subject}")

        return {"id": contact.id, "submitted_at": contact.created_at}

    def list_contacts(self) -> List[ContactModel]:
        return self.repo.list_contacts()
