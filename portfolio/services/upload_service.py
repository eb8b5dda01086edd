"""Upload service - stockage disque des fichiers envoyés par l'admin"""

import logging
import os
import random
import time
from typing import BinaryIO

from fastapi import status
from portfolio.core.config import settings
from portfolio.core.errors import UploadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def build_filename(original_name: str) -> str:
    """<epoch ms>-<aléatoire><extension d'origine>"""
    extension = os.path.splitext(original_name or "")[1].lower()
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{extension}"


def check_extension(original_name: str) -> None:
    extension = os.path.splitext(original_name or "")[1].lower()
    if extension not in settings.UPLOAD_ALLOWED_EXTENSIONS:
        allowed = ", ".join(settings.UPLOAD_ALLOWED_EXTENSIONS)
        raise UploadError(f"File type not allowed (allowed: {allowed})")


def save_upload(source: BinaryIO, original_name: str) -> str:
    """Écrit le fichier dans UPLOAD_DIR et retourne son URL publique"""
    check_extension(original_name)

    upload_dir = settings.UPLOAD_DIR
    os.makedirs(upload_dir, exist_ok=True)
    filename = build_filename(original_name)
    path = os.path.join(upload_dir, filename)

    written = 0
    try:
        with open(path, "wb") as target:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > settings.UPLOAD_MAX_BYTES:
                    raise UploadError(
                        f"File too large (max {settings.UPLOAD_MAX_BYTES} bytes)",
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    )
                target.write(chunk)
    except UploadError:
        os.remove(path)
        raise
    except OSError as e:
        logger.error(f"Upload write failed for {filename}: {e}")
        if os.path.exists(path):
            os.remove(path)
        raise UploadError("Failed to store file", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(f"Stored upload {filename} ({written} bytes)")
    return f"{settings.UPLOAD_URL_PREFIX}/{filename}"
