"""Social link service - création en upsert sur le nom (insensible à la casse)"""

import logging
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Iterable, Optional, Tuple
from portfolio.core.errors import ConflictError
from portfolio.models.social_link import SocialLink, name_key_for
from portfolio.services.crud_service import get_record_or_404

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}
_ON_DUPLICATE_INSERTS = {
    "mysql": mysql.insert,
    "mariadb": mysql.insert,
}


def get_by_name(db: Session, name: str) -> Optional[SocialLink]:
    return db.query(SocialLink).filter(SocialLink.name_key == name_key_for(name)).first()


def upsert_social_link(db: Session, data: dict, update_fields: Iterable[str] = None) -> Tuple[SocialLink, bool]:
    """Crée le lien, ou met à jour celui qui porte déjà ce nom.

    Une seule écriture conditionnelle (ON CONFLICT / ON DUPLICATE KEY) sur
    `name_key` : pas de fenêtre entre la recherche et l'insertion.
    `update_fields` limite les colonnes écrasées en cas de conflit
    (par défaut toutes celles de `data`).
    Retourne `(link, created)`.
    """
    values = {**data, "name_key": name_key_for(data["name"])}
    values.setdefault("order", 0)
    columns = set(update_fields if update_fields is not None else data) | {"name"}
    columns.discard("name_key")
    columns.discard("id")

    dialect = db.get_bind().dialect.name
    if dialect not in _ON_CONFLICT_INSERTS and dialect not in _ON_DUPLICATE_INSERTS:
        return _upsert_with_lookup(db, values, columns)

    # sert seulement au code retour, l'écriture reste atomique
    created = get_by_name(db, data["name"]) is None
    if dialect in _ON_CONFLICT_INSERTS:
        stmt = _ON_CONFLICT_INSERTS[dialect](SocialLink).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["name_key"],
            set_={col: stmt.excluded[col] for col in columns},
        )
    else:
        stmt = _ON_DUPLICATE_INSERTS[dialect](SocialLink).values(**values)
        stmt = stmt.on_duplicate_key_update({col: stmt.inserted[col] for col in columns})

    db.execute(stmt)
    db.commit()
    link = db.query(SocialLink).filter(SocialLink.name_key == values["name_key"]).one()
    logger.info(f"Social link '{link.name}' {'created' if created else 'updated'} (id {link.id})")
    return link, created


def _upsert_with_lookup(db: Session, values: dict, columns: set) -> Tuple[SocialLink, bool]:
    # dialectes sans upsert natif : la contrainte unique arbitre les courses
    for _ in range(2):
        link = db.query(SocialLink).filter(SocialLink.name_key == values["name_key"]).first()
        created = link is None
        if created:
            link = SocialLink(**{k: v for k, v in values.items() if k != "name_key"})
            db.add(link)
        else:
            for col in columns:
                setattr(link, col, values[col])
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            continue
        db.refresh(link)
        return link, created
    raise ConflictError("Social link could not be saved, please retry")


def update_social_link(db: Session, link_id: int, data: dict) -> SocialLink:
    link = get_record_or_404(db, SocialLink, link_id)

    if "name" in data:
        other = get_by_name(db, data["name"])
        if other is not None and other.id != link.id:
            raise ConflictError("A social link with this name already exists")

    for field, value in data.items():
        if field in ("id", "name_key"):
            continue
        setattr(link, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("A social link with this name already exists")

    db.refresh(link)
    logger.info(f"Social link {link_id} updated")
    return link
