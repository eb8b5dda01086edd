import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from portfolio.core.config import settings

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # SQLite refuse par défaut les connexions partagées entre threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=_connect_args(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> bool:
    """Crée les tables puis insère les données initiales.

    Une erreur est loggée sans être propagée : l'API continue de servir
    (mode dégradé) même si la base est indisponible au démarrage.
    """
    # import tardif : engine/SessionLocal peuvent être remplacés (tests)
    import portfolio.core.database as database
    from portfolio.models import (  # noqa: F401  (enregistre les tables)
        activity, article, contact_message, education, pricing_plan,
        project, site_settings, skill, social_link, user,
    )
    from portfolio.services.seed_service import seed_initial_data

    try:
        Base.metadata.create_all(bind=database.engine)
        db = database.SessionLocal()
        try:
            seed_initial_data(db)
        finally:
            db.close()
    except Exception:
        logger.exception("Database initialisation failed, serving in degraded mode")
        return False

    logger.info("Database ready")
    return True
