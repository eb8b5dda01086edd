"""User model"""

from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from portfolio.core.database import Base
from portfolio.core.security import hash_password, check_password


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def set_password(self, password: str):
        self.password_hash = hash_password(password)

    def verify_password(self, password: str) -> bool:
        return check_password(password, self.password_hash)
