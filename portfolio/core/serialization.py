"""Encodage des champs liste (technologies, features) vers une colonne texte.

C'est le seul endroit où la représentation stockée est connue : les modèles
utilisent `StringList` et le reste du code ne manipule que des listes.
"""

import json
from typing import Any, List, Optional

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


def encode_list(values: Optional[List[str]]) -> str:
    if values is None:
        return "[]"
    return json.dumps([str(v) for v in values], ensure_ascii=False)


def decode_list(raw: Any) -> List[str]:
    """Relit une valeur stockée, quelle que soit sa forme.

    - liste déjà structurée (données de seed) -> copie
    - texte JSON -> liste
    - ancien format "a, b, c" -> découpé sur les virgules
    - None / "" -> []
    """
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(v) for v in raw]

    text = str(raw).strip()
    if not text:
        return []

    try:
        parsed = json.loads(text)
    except ValueError:
        return [part.strip() for part in text.split(",") if part.strip()]

    if isinstance(parsed, list):
        return [str(v) for v in parsed]
    # scalaire JSON ("\"React\"" ou 42)
    return [str(parsed)]


class StringList(TypeDecorator):
    """Liste de chaînes stockée en JSON dans une colonne TEXT"""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            value = decode_list(value)
        return encode_list(value)

    def process_result_value(self, value, dialect):
        return decode_list(value)
