from pydantic import Field, model_validator
from typing import ClassVar, Set, Annotated, Optional

from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr

Year = Annotated[int, Field(strict=True, ge=1900, le=2100)]


def _check_years(start, end):
    if start is not None and end is not None and end < start:
        raise ValueError("yearEnd must be greater than or equal to yearStart")


class EducationCreate(InputModel):
    degree: ShortStr
    school: ShortStr
    year_start: Year
    year_end: Year
    description: Optional[str] = None

    @model_validator(mode="after")
    def _years_in_order(self):
        _check_years(self.year_start, self.year_end)
        return self


class EducationUpdate(PartialUpdate):
    nullable_fields: ClassVar[Set[str]] = {"description"}

    degree: Optional[ShortStr] = None
    school: Optional[ShortStr] = None
    year_start: Optional[Year] = None
    year_end: Optional[Year] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def _years_in_order(self):
        _check_years(self.year_start, self.year_end)
        return self


class EducationResponse(CamelModel):
    id: int
    degree: str
    school: str
    year_start: int
    year_end: int
    description: Optional[str]
