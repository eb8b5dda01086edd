import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio.core.config import settings
from portfolio.core.database import init_db
from portfolio.core.errors import register_exception_handlers
from portfolio.core.logging_config import configure_logging
from portfolio.routers import (
    health, auth, projects, skills, activities, pricing, messages,
    settings as site_settings, social_links, articles, education, uploads,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Init DB : une erreur ne bloque pas le démarrage
    init_db()
    yield


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Portfolio API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routes
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(site_settings.router)
    app.include_router(projects.router)
    app.include_router(skills.router)
    app.include_router(activities.router)
    app.include_router(pricing.router)
    app.include_router(social_links.router)
    app.include_router(articles.router)
    app.include_router(education.router)
    app.include_router(messages.router)
    app.include_router(uploads.router)

    # Fichiers envoyés via /api/upload
    try:
        os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    except OSError as e:
        # dossier non créable : l'API démarre, seuls /api/upload et /uploads échouent
        logger.warning(f"Upload directory {settings.UPLOAD_DIR} unavailable: {e}")
    app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")

    return app


app = create_app()
