from typing import Optional

from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr, LongStr


class ActivityCreate(InputModel):
    title: ShortStr
    description: LongStr
    frequency: ShortStr
    icon: ShortStr
    active: bool = True


class ActivityUpdate(PartialUpdate):
    title: Optional[ShortStr] = None
    description: Optional[LongStr] = None
    frequency: Optional[ShortStr] = None
    icon: Optional[ShortStr] = None
    active: Optional[bool] = None


class ActivityResponse(CamelModel):
    id: int
    title: str
    description: str
    frequency: str
    icon: str
    active: bool
