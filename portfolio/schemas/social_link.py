from pydantic import Field
from typing import Annotated, Optional

from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr

Order = Annotated[int, Field(strict=True, ge=0)]


class SocialLinkCreate(InputModel):
    name: ShortStr
    icon: ShortStr
    url: ShortStr
    order: Order = 0


class SocialLinkUpdate(PartialUpdate):
    name: Optional[ShortStr] = None
    icon: Optional[ShortStr] = None
    url: Optional[ShortStr] = None
    order: Optional[Order] = None


class SocialLinkResponse(CamelModel):
    id: int
    name: str
    icon: str
    url: str
    order: int
