"""User service - compte(s) admin"""

import logging
from sqlalchemy.orm import Session
from typing import Optional
from portfolio.core.security import hash_password, check_password
from portfolio.models.user import User

logger = logging.getLogger(__name__)

# comparé quand l'utilisateur n'existe pas, pour un temps de réponse identique
_DUMMY_HASH = hash_password("not-a-real-password")


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str) -> User:
    user = User(username=username)
    user.set_password(password)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User '{username}' created")
    return user


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    """Retourne l'utilisateur si les identifiants sont bons, sinon None.

    Utilisateur inconnu et mauvais mot de passe donnent le même résultat.
    """
    user = get_user_by_username(db, username)
    if user is None:
        check_password(password, _DUMMY_HASH)
        return None
    if not user.verify_password(password):
        return None
    return user
