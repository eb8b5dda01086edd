"""SiteSettings model (une seule ligne, clé SETTINGS_ID)"""

from sqlalchemy import Column, Integer, String, Text
from portfolio.core.database import Base

SETTINGS_ID = 1


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ID)
    hero_title = Column(String(255), nullable=False)
    hero_subtitle = Column(String(255), nullable=False)
    about_description = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    profile_photo = Column(String(255), nullable=True)
    about_photo = Column(String(255), nullable=True)
