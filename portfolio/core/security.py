import calendar
from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from fastapi import Depends, Header, HTTPException, status
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from portfolio.core.config import settings
from portfolio.core.database import get_db


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # hash stocké corrompu ou d'un autre format
        return False


def _timestamp(moment: datetime) -> int:
    return calendar.timegm(moment.utctimetuple())


def create_access_token(user_id: int, username: str, now: datetime = None) -> str:
    #crée un token d'accès JWT de 24h
    issued_at = now or datetime.utcnow()
    payload = {
        "user_id": user_id,
        "username": username,
        "iat": _timestamp(issued_at),
        "exp": _timestamp(issued_at + timedelta(minutes=settings.JWT_EXPIRE_MIN)),
        "type": "access",
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str, now: datetime = None) -> Optional[dict]:
    """Vérifie la signature et l'expiration, retourne le payload ou None.

    Le token est valide strictement avant `exp` ; l'expiration est contrôlée
    ici plutôt que par jose pour que `now` soit injectable.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_exp": False, "verify_iat": False},
        )
    except JWTError:
        return None

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    if _timestamp(now or datetime.utcnow()) >= exp:
        return None
    if payload.get("type") != "access":
        return None
    return payload


def decode_token(token: str) -> Optional[int]:
    payload = verify_token(token)
    if payload is None:
        return None
    return payload.get("user_id")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(db: Session = Depends(get_db), authorization: Optional[str] = Header(None)):
    """Récupère l'admin depuis le header `Authorization: Bearer <token>`.

    401 pour un token absent, invalide ou expiré ; 403 reste réservé aux
    utilisateurs authentifiés sans droit.
    """
    from portfolio.services.user_service import get_user

    if not authorization:
        raise _unauthorized("Token required")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise _unauthorized("Token required")

    user_id = decode_token(token.strip())
    if not user_id:
        raise _unauthorized("Invalid or expired token")

    user = get_user(db, user_id)
    if not user:
        raise _unauthorized("Invalid or expired token")

    return user
