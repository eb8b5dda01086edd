"""Activity model"""

from sqlalchemy import Column, Integer, String, Text, Boolean
from portfolio.core.database import Base


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    frequency = Column(String(255), nullable=False)
    icon = Column(String(255), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
