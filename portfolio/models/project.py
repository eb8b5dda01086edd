"""Project model"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean
from datetime import datetime
from portfolio.core.database import Base
from portfolio.core.serialization import StringList


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(255), nullable=False)
    technologies = Column(StringList, nullable=False, default=list)
    live_url = Column(String(255), nullable=True)
    github_url = Column(String(255), nullable=True)
    featured = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
