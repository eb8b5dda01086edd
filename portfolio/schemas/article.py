from pydantic import Field
from datetime import datetime
from typing import ClassVar, Set, Optional

from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr, LongStr


class ArticleCreate(InputModel):
    title: ShortStr
    summary: LongStr
    content: LongStr
    image: Optional[str] = Field(None, max_length=255)


class ArticleUpdate(PartialUpdate):
    nullable_fields: ClassVar[Set[str]] = {"image"}

    title: Optional[ShortStr] = None
    summary: Optional[LongStr] = None
    content: Optional[LongStr] = None
    image: Optional[str] = Field(None, max_length=255)


class ArticleResponse(CamelModel):
    id: int
    title: str
    summary: str
    content: str
    image: Optional[str]
    created_at: Optional[datetime]
