import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from portfolio.core.database import get_db
from portfolio.core.security import create_access_token, get_current_user
from portfolio.models.user import User
from portfolio.schemas.base import MessageResponse
from portfolio.schemas.user import LoginRequest, TokenResponse, UserResponse
from portfolio.services.user_service import authenticate_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
@router.post("/auth/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Se connecter et recevoir un token valable 24h"""

    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        # même réponse pour un username inconnu et un mauvais mot de passe
        logger.warning(f"Failed login for '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"User '{user.username}' logged in")
    return {
        "token": create_access_token(user.id, user.username),
        "token_type": "bearer",
        "user": user,
    }


@router.post("/logout", response_model=MessageResponse)
def logout():
    # tokens sans état : le client oublie simplement le sien
    return {"message": "Logged out successfully"}


@router.get("/profile", response_model=UserResponse)
def profile(current_user: User = Depends(get_current_user)):
    """Qui suis-je ? Sert au client pour revalider un token en cache"""
    return current_user
