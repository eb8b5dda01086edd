from pydantic import Field
from typing import ClassVar, Set, Optional

from portfolio.schemas.base import CamelModel, PartialUpdate, ShortStr, LongStr


class SiteSettingsUpdate(PartialUpdate):
    nullable_fields: ClassVar[Set[str]] = {"profile_photo", "about_photo"}

    hero_title: Optional[ShortStr] = None
    hero_subtitle: Optional[ShortStr] = None
    about_description: Optional[LongStr] = None
    email: Optional[ShortStr] = None
    phone: Optional[ShortStr] = None
    location: Optional[ShortStr] = None
    profile_photo: Optional[str] = Field(None, max_length=255)
    about_photo: Optional[str] = Field(None, max_length=255)


class SiteSettingsResponse(CamelModel):
    id: int
    hero_title: str
    hero_subtitle: str
    about_description: str
    email: str
    phone: str
    location: str
    profile_photo: Optional[str]
    about_photo: Optional[str]
