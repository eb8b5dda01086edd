"""SocialLink model"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import validates
from portfolio.core.database import Base


def name_key_for(name: str) -> str:
    return name.strip().lower()


class SocialLink(Base):
    __tablename__ = "social_links"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # nom normalisé, cible du ON CONFLICT de l'upsert
    name_key = Column(String(255), nullable=False, unique=True)
    icon = Column(String(255), nullable=False)
    url = Column(String(255), nullable=False)
    order = Column(Integer, nullable=False, default=0)

    @validates("name")
    def _sync_name_key(self, key, value):
        self.name_key = name_key_for(value)
        return value
