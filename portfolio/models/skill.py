"""Skill model"""

from sqlalchemy import Column, Integer, String
from portfolio.core.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False, index=True)
    level = Column(Integer, nullable=False)  # 0-100
    icon = Column(String(255), nullable=False)
