from pydantic import EmailStr, Field
from datetime import datetime
from typing import Optional

from portfolio.schemas.base import CamelModel, InputModel

# Schemas du formulaire de contact


class ContactMessageCreate(InputModel):
    name: str = Field(min_length=2, max_length=255)
    email: EmailStr
    subject: str = Field(min_length=5, max_length=255)
    message: str = Field(min_length=10)


class ContactMessageResponse(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    read: bool
    created_at: Optional[datetime]


class UnreadCountResponse(CamelModel):
    unread: int
