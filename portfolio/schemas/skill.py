from pydantic import Field
from typing import Annotated, Optional

from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr

Level = Annotated[int, Field(strict=True, ge=0, le=100)]


class SkillCreate(InputModel):
    name: ShortStr
    category: ShortStr
    level: Level
    icon: ShortStr


class SkillUpdate(PartialUpdate):
    name: Optional[ShortStr] = None
    category: Optional[ShortStr] = None
    level: Optional[Level] = None
    icon: Optional[ShortStr] = None


class SkillResponse(CamelModel):
    id: int
    name: str
    category: str
    level: int
    icon: str
