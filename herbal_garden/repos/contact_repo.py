from typing import List

from sqlalchemy.orm import Session
from herbal_garden.data.models.contact import ContactModel


class ContactRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_contact(self, contact: ContactModel) -> ContactModel:
        self.db.add(contact)
        self.db.commit()
        self.db.refresh(contact)
        return contact

    def list_contacts(self) -> List[ContactModel]:
        return (
            self.db.query(ContactModel)
            .order_by(ContactModel.created_at.desc(), ContactModel.id.desc())
            .all()
        )
