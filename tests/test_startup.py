import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

import portfolio.core.database as database
from portfolio.core.config import settings
from portfolio.core.database import init_db
from portfolio.main import app
from portfolio.models.project import Project
from portfolio.models.pricing_plan import PricingPlan
from portfolio.models.site_settings import SiteSettings
from portfolio.models.skill import Skill
from portfolio.models.user import User
from portfolio.services.seed_service import seed_initial_data
from portfolio.services.user_service import authenticate_user


@pytest.fixture
def admin_password(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "seeded-password")


def test_seed_creates_admin_and_sample_content(db, admin_password):
    seed_initial_data(db, sample_data=True)

    assert authenticate_user(db, settings.ADMIN_USERNAME, "seeded-password") is not None
    assert db.query(SiteSettings).count() == 1
    assert db.query(Project).count() == 3
    assert db.query(Skill).count() == 9
    plan = db.query(PricingPlan).filter(PricingPlan.name == "Galactic Pro").one()
    assert plan.features[0] == "Full-Stack Development"
    assert plan.popular is True


def test_seed_is_idempotent(db, admin_password):
    seed_initial_data(db, sample_data=True)
    seed_initial_data(db, sample_data=True)

    assert db.query(User).count() == 1
    assert db.query(Project).count() == 3


def test_seed_without_sample_content(db, admin_password):
    seed_initial_data(db, sample_data=False)
    assert db.query(User).count() == 1
    assert db.query(Project).count() == 0


def test_init_db_runs_seed(db, admin_password):
    assert init_db() is True
    assert db.query(User).filter(User.username == settings.ADMIN_USERNAME).count() == 1


def test_init_db_failure_is_logged_not_raised(monkeypatch, caplog):
    """Test : base indisponible au démarrage -> on continue en mode dégradé"""
    broken = create_engine("sqlite:////nonexistent-dir/portfolio.db")
    monkeypatch.setattr(database, "engine", broken)

    assert init_db() is False
    assert "degraded mode" in caplog.text


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "timestamp" in response.json()


def test_unexpected_error_returns_generic_500(monkeypatch):
    import portfolio.routers.projects as projects_router

    def explode(db, model):
        raise RuntimeError("secret internal detail")

    monkeypatch.setattr(projects_router, "list_records", explode)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/projects")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "secret" not in response.text


def test_database_error_returns_500(monkeypatch):
    import portfolio.routers.projects as projects_router

    def fail(db, model):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(projects_router, "list_records", fail)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/projects")
    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}


def test_app_starts_when_upload_dir_cannot_be_created(monkeypatch, caplog):
    import portfolio.main as main

    def refuse(path, exist_ok=False):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(main.os, "makedirs", refuse)
    new_app = main.create_app()

    assert TestClient(new_app).get("/api/health").status_code == 200
    assert "Upload directory" in caplog.text


def test_configure_logging_adds_a_single_named_handler():
    import logging
    from portfolio.core.logging_config import HANDLER_NAME, configure_logging

    configure_logging()
    configure_logging("DEBUG")

    root = logging.getLogger()
    assert [h.get_name() for h in root.handlers].count(HANDLER_NAME) == 1
    assert root.level == logging.DEBUG
    configure_logging(settings.LOG_LEVEL)
