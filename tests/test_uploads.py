import os
import re

from portfolio.core.config import settings
from portfolio.services.upload_service import build_filename


def test_upload_stores_and_serves_file(client, auth_headers):
    response = client.post(
        "/api/upload",
        headers=auth_headers,
        files={"file": ("Photo.PNG", b"\x89PNG fake image bytes", "image/png")},
    )
    assert response.status_code == 201
    url = response.json()["url"]
    assert re.fullmatch(r"/uploads/\d+-\d+\.png", url)

    stored = os.path.join(settings.UPLOAD_DIR, url.rsplit("/", 1)[1])
    assert os.path.exists(stored)

    served = client.get(url)
    assert served.status_code == 200
    assert served.content == b"\x89PNG fake image bytes"


def test_upload_requires_file(client, auth_headers):
    response = client.post("/api/upload", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


def test_upload_rejects_disallowed_extension(client, auth_headers):
    response = client.post(
        "/api/upload",
        headers=auth_headers,
        files={"file": ("script.sh", b"#!/bin/sh\necho hi", "text/x-sh")},
    )
    assert response.status_code == 400
    assert "not allowed" in response.json()["error"]


def test_upload_rejects_too_large_file(client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_MAX_BYTES", 10)
    before = set(os.listdir(settings.UPLOAD_DIR))

    response = client.post(
        "/api/upload",
        headers=auth_headers,
        files={"file": ("big.jpg", b"x" * 11, "image/jpeg")},
    )
    assert response.status_code == 413
    # pas de fichier partiel laissé sur le disque
    assert set(os.listdir(settings.UPLOAD_DIR)) == before


def test_upload_requires_auth(client):
    response = client.post("/api/upload", files={"file": ("a.png", b"data", "image/png")})
    assert response.status_code == 401


def test_filenames_are_unique():
    names = {build_filename("avatar.JPG") for _ in range(50)}
    assert len(names) > 1
    assert all(name.endswith(".jpg") for name in names)
