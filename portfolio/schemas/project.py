from pydantic import Field, field_validator
from datetime import datetime
from typing import ClassVar, Set, Optional, List

from portfolio.core.serialization import decode_list
from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr, LongStr

# Schemas pour les projets


def _coerce_technologies(value):
    # le formulaire admin peut envoyer "React, Node" au lieu d'une liste
    if isinstance(value, str):
        return decode_list(value)
    return value


class ProjectCreate(InputModel):
    title: ShortStr
    description: LongStr
    image: ShortStr
    technologies: List[ShortStr]
    live_url: Optional[str] = Field(None, max_length=255)
    github_url: Optional[str] = Field(None, max_length=255)
    featured: bool = False

    @field_validator("technologies", mode="before")
    @classmethod
    def split_technologies(cls, value):
        return _coerce_technologies(value)


class ProjectUpdate(PartialUpdate):
    nullable_fields: ClassVar[Set[str]] = {"live_url", "github_url"}

    title: Optional[ShortStr] = None
    description: Optional[LongStr] = None
    image: Optional[ShortStr] = None
    technologies: Optional[List[ShortStr]] = None
    live_url: Optional[str] = Field(None, max_length=255)
    github_url: Optional[str] = Field(None, max_length=255)
    featured: Optional[bool] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def split_technologies(cls, value):
        return _coerce_technologies(value)


class ProjectResponse(CamelModel):
    id: int
    title: str
    description: str
    image: str
    technologies: List[str]
    live_url: Optional[str]
    github_url: Optional[str]
    featured: bool
    created_at: Optional[datetime]
