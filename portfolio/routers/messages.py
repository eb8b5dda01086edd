from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.schemas.contact_message import ContactMessageCreate, ContactMessageResponse, UnreadCountResponse
from portfolio.services.contact_service import (
    create_message, list_messages, count_unread, mark_as_read, delete_message
)

router = APIRouter(prefix="/api", tags=["messages"])


# Seule écriture publique de l'API
@router.post("/contact", response_model=ContactMessageResponse, status_code=status.HTTP_201_CREATED)
def submit_contact(message_data: ContactMessageCreate, db: Session = Depends(get_db)):
    return create_message(db, message_data.model_dump())


@router.get("/admin/messages", response_model=List[ContactMessageResponse],
            dependencies=[Depends(get_current_user)])
def get_messages(unread: bool = Query(False), db: Session = Depends(get_db)):
    return list_messages(db, unread_only=unread)


@router.get("/admin/messages/unread-count", response_model=UnreadCountResponse,
            dependencies=[Depends(get_current_user)])
def get_unread_count(db: Session = Depends(get_db)):
    return {"unread": count_unread(db)}


@router.patch("/admin/messages/{message_id}/read", response_model=ContactMessageResponse,
              dependencies=[Depends(get_current_user)])
def read_message(message_id: int, db: Session = Depends(get_db)):
    return mark_as_read(db, message_id)


@router.delete("/admin/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def remove_message(message_id: int, db: Session = Depends(get_db)):
    delete_message(db, message_id)
