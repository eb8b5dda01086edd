import os
import sys
import tempfile
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Config de test AVANT d'importer l'app (les settings sont lus à l'import)
UPLOAD_TEST_DIR = tempfile.mkdtemp(prefix="portfolio-uploads-")
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["UPLOAD_DIR"] = UPLOAD_TEST_DIR
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SEED_SAMPLE_DATA"] = "false"

import bcrypt
import pytest

from portfolio.core.database import Base, SessionLocal, engine
from portfolio.core.security import create_access_token
from portfolio.main import app
from portfolio.models.user import User

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def admin_user(db):
    """Compte admin (bcrypt à 4 rounds pour garder des tests rapides)"""
    user = User(
        username=ADMIN_USERNAME,
        password_hash=bcrypt.hashpw(ADMIN_PASSWORD.encode(), bcrypt.gensalt(rounds=4)).decode(),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def auth_token(admin_user):
    return create_access_token(admin_user.id, admin_user.username)


@pytest.fixture
def auth_headers(auth_token):
    return {"Authorization": f"Bearer {auth_token}"}
