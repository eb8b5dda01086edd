"""Education model"""

from sqlalchemy import Column, Integer, String, Text
from portfolio.core.database import Base


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, index=True)
    degree = Column(String(255), nullable=False)
    school = Column(String(255), nullable=False)
    year_start = Column(Integer, nullable=False)
    year_end = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)
