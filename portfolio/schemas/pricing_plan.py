from pydantic import Field, field_validator
from typing import Annotated, Optional, List

from portfolio.core.serialization import decode_list
from portfolio.schemas.base import CamelModel, InputModel, PartialUpdate, ShortStr

Price = Annotated[int, Field(strict=True, ge=0)]


def _coerce_features(value):
    if isinstance(value, str):
        return decode_list(value)
    return value


class PricingPlanCreate(InputModel):
    name: ShortStr
    price: Price
    duration: ShortStr
    features: List[ShortStr]
    popular: bool = False

    @field_validator("features", mode="before")
    @classmethod
    def split_features(cls, value):
        return _coerce_features(value)


class PricingPlanUpdate(PartialUpdate):
    name: Optional[ShortStr] = None
    price: Optional[Price] = None
    duration: Optional[ShortStr] = None
    features: Optional[List[ShortStr]] = None
    popular: Optional[bool] = None

    @field_validator("features", mode="before")
    @classmethod
    def split_features(cls, value):
        return _coerce_features(value)


class PricingPlanResponse(CamelModel):
    id: int
    name: str
    price: int
    duration: str
    features: List[str]
    popular: bool
