"""Site settings service - ligne unique adressée par SETTINGS_ID"""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from portfolio.models.site_settings import SiteSettings, SETTINGS_ID

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "hero_title": "Cosmic Developer",
    "hero_subtitle": "Crafting digital experiences across the universe of web technologies",
    "about_description": (
        "As a passionate fullstack developer, I navigate through the vast cosmos of web "
        "technologies, creating stellar applications that bridge the gap between imagination "
        "and reality. My mission is to craft digital experiences that are not just functional, "
        "but truly cosmic."
    ),
    "email": "cosmic@developer.space",
    "phone": "+1 (555) 123-SPACE",
    "location": "Digital Universe",
}


def get_site_settings(db: Session) -> SiteSettings:
    """Retourne la ligne de configuration, créée avec les valeurs par défaut si absente"""
    settings_row = db.query(SiteSettings).filter(SiteSettings.id == SETTINGS_ID).first()
    if settings_row:
        return settings_row

    settings_row = SiteSettings(id=SETTINGS_ID, **DEFAULT_SETTINGS)
    db.add(settings_row)
    try:
        db.commit()
    except IntegrityError:
        # créée entre-temps par une autre requête
        db.rollback()
        return db.query(SiteSettings).filter(SiteSettings.id == SETTINGS_ID).one()

    db.refresh(settings_row)
    logger.info("Site settings initialised with defaults")
    return settings_row


def update_site_settings(db: Session, data: dict) -> SiteSettings:
    """Fusionne les champs fournis sur la ligne unique (l'id envoyé est ignoré)"""
    settings_row = get_site_settings(db)

    for field, value in data.items():
        if field == "id":
            continue
        setattr(settings_row, field, value)

    db.commit()
    db.refresh(settings_row)
    logger.info(f"Site settings updated ({', '.join(sorted(data)) or 'no changes'})")
    return settings_row
