"""Bases communes des schémas : noms JSON en camelCase, corps stricts"""

from datetime import datetime
from typing import Annotated, ClassVar, Set

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# VARCHAR(255) côté base
ShortStr = Annotated[str, Field(min_length=1, max_length=255)]
LongStr = Annotated[str, Field(min_length=1)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class InputModel(CamelModel):
    """Corps de requête : champs inconnus refusés, chaînes nettoyées"""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class PartialUpdate(InputModel):
    """Mise à jour partielle : seuls les champs envoyés sont appliqués.

    `null` n'est accepté que pour les colonnes nullables listées dans
    `nullable_fields`.
    """

    nullable_fields: ClassVar[Set[str]] = set()

    @model_validator(mode="after")
    def _reject_null_on_required(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
