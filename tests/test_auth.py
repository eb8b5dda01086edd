from datetime import datetime, timedelta

from portfolio.core.config import settings
from portfolio.core.security import create_access_token, verify_token, decode_token
from portfolio.models.user import User
from portfolio.services.user_service import authenticate_user, create_user
from conftest import ADMIN_USERNAME, ADMIN_PASSWORD


def test_login_success(client, admin_user):
    """Test : se connecter avec succès"""
    response = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data["token"], str) and data["token"]
    assert data["user"]["username"] == ADMIN_USERNAME
    assert data["user"]["id"] == admin_user.id
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


def test_login_alias_route(client, admin_user):
    response = client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    assert "token" in response.json()


def test_login_then_profile_returns_same_username(client, admin_user):
    """Test : le token obtenu au login ouvre /api/profile"""
    token = client.post(
        "/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    ).json()["token"]

    response = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["username"] == ADMIN_USERNAME


def test_wrong_password_and_unknown_user_fail_identically(client, admin_user):
    """Test : pas de fuite sur l'existence du username"""
    wrong_password = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": "nope"})
    unknown_user = client.post("/api/login", json={"username": "ghost", "password": "nope"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"error": "Invalid credentials"}


def test_login_missing_fields_is_validation_error(client):
    response = client.post("/api/login", json={"username": "admin"})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_profile_without_token(client):
    response = client.get("/api/profile")
    assert response.status_code == 401
    assert response.json()["error"] == "Token required"
    assert response.headers["www-authenticate"] == "Bearer"


def test_profile_with_invalid_token(client, admin_user):
    response = client.get("/api/profile", headers={"Authorization": "Bearer invalid_token"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"


def test_profile_with_wrong_scheme(client, auth_token):
    response = client.get("/api/profile", headers={"Authorization": f"Basic {auth_token}"})
    assert response.status_code == 401


def test_profile_with_expired_token(client, admin_user):
    issued = datetime.utcnow() - timedelta(minutes=settings.JWT_EXPIRE_MIN + 1)
    token = create_access_token(admin_user.id, admin_user.username, now=issued)
    response = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_deleted_user_is_rejected(client, db, admin_user, auth_headers):
    db.delete(admin_user)
    db.commit()
    response = client.get("/api/profile", headers=auth_headers)
    assert response.status_code == 401


def test_token_expiry_boundary():
    """Test : accepté strictement avant exp, refusé à exp et après"""
    issued = datetime(2026, 1, 1, 12, 0, 0)
    token = create_access_token(7, "admin", now=issued)
    expiry = issued + timedelta(minutes=settings.JWT_EXPIRE_MIN)

    payload = verify_token(token, now=expiry - timedelta(seconds=1))
    assert payload["user_id"] == 7
    assert payload["username"] == "admin"
    assert verify_token(token, now=expiry) is None
    assert verify_token(token, now=expiry + timedelta(hours=1)) is None


def test_token_lifetime_is_24_hours_by_default():
    issued = datetime(2026, 1, 1, 12, 0, 0)
    payload = verify_token(create_access_token(1, "admin", now=issued), now=issued)
    assert payload["exp"] - payload["iat"] == settings.JWT_EXPIRE_MIN * 60 == 24 * 3600


def test_token_signed_with_other_secret_is_rejected(monkeypatch):
    token = create_access_token(1, "admin")
    monkeypatch.setattr(settings, "JWT_SECRET", "another-secret")
    assert verify_token(token) is None
    assert decode_token(token) is None


def test_logout(client):
    response = client.post("/api/logout")
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out successfully"


def test_authenticate_user_service(db):
    create_user(db, "editor", "pa55word")
    assert authenticate_user(db, "editor", "pa55word").username == "editor"
    assert authenticate_user(db, "editor", "wrong") is None
    assert authenticate_user(db, "nobody", "pa55word") is None


def test_password_is_hashed(db):
    user = create_user(db, "editor", "pa55word")
    stored = db.query(User).filter(User.id == user.id).one()
    assert stored.password_hash != "pa55word"
    assert stored.password_hash.startswith("$2")
