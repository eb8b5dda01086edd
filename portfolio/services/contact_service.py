"""Contact service - messages du formulaire public"""

import logging
from sqlalchemy.orm import Session
from typing import List
from portfolio.core.errors import NotFoundError
from portfolio.models.contact_message import ContactMessage
from portfolio.services.crud_service import create_record, delete_record, list_records

logger = logging.getLogger(__name__)


def create_message(db: Session, data: dict) -> ContactMessage:
    # read est toujours False à la création, quoi qu'envoie le client
    data = {**data, "read": False}
    message = create_record(db, ContactMessage, data)
    logger.info(f"New contact message {message.id} from {message.email}")
    return message


def list_messages(db: Session, unread_only: bool = False) -> List[ContactMessage]:
    if not unread_only:
        return list_records(db, ContactMessage)
    return db.query(ContactMessage).filter(
        ContactMessage.read == False
    ).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()


def count_unread(db: Session) -> int:
    return db.query(ContactMessage).filter(ContactMessage.read == False).count()


def mark_as_read(db: Session, message_id: int) -> ContactMessage:
    message = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
    if not message:
        raise NotFoundError("Message not found")

    # transition unique : non lu -> lu
    if not message.read:
        message.read = True
        db.commit()
        db.refresh(message)
    return message


def delete_message(db: Session, message_id: int) -> bool:
    return delete_record(db, ContactMessage, message_id)
