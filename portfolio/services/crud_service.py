"""CRUD générique partagé par toutes les entités du portfolio"""

# IMPORTS
import logging
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional, Type

from portfolio.core.database import Base
from portfolio.core.errors import NotFoundError

logger = logging.getLogger(__name__)


def _ordering(model: Type[Base]):
    # entités horodatées : plus récentes d'abord, sinon ordre de création (id)
    created_at = getattr(model, "created_at", None)
    if created_at is not None:
        return [created_at.desc(), model.id.desc()]
    return [model.id.asc()]


def _label(model: Type[Base]) -> str:
    return model.__name__


# func 1: list_records()
def list_records(db: Session, model: Type[Base]) -> List[Any]:
    return db.query(model).order_by(*_ordering(model)).all()


# func 2: get_record()
def get_record(db: Session, model: Type[Base], record_id: int) -> Optional[Any]:
    # None si absent, jamais d'exception pour un id inconnu
    return db.query(model).filter(model.id == record_id).first()


def get_record_or_404(db: Session, model: Type[Base], record_id: int) -> Any:
    record = get_record(db, model, record_id)
    if record is None:
        raise NotFoundError(f"{_label(model)} not found")
    return record


# func 3: create_record()
def create_record(db: Session, model: Type[Base], data: Dict[str, Any]) -> Any:
    record = model(**data)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(f"{_label(model)} {record.id} created")
    return record


# func 4: update_record()
def update_record(db: Session, model: Type[Base], record_id: int, data: Dict[str, Any]) -> Any:
    """Applique uniquement les champs fournis, le reste est conservé"""
    record = get_record_or_404(db, model, record_id)

    for field, value in data.items():
        if field == "id":
            continue
        setattr(record, field, value)

    db.commit()
    db.refresh(record)
    logger.info(f"{_label(model)} {record_id} updated ({', '.join(sorted(data)) or 'no changes'})")
    return record


# func 5: delete_record()
def delete_record(db: Session, model: Type[Base], record_id: int) -> bool:
    """Suppression physique, idempotente : retourne False si l'id n'existait pas"""
    deleted = db.query(model).filter(model.id == record_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info(f"{_label(model)} {record_id} deleted")
    return bool(deleted)
