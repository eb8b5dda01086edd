from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import Optional

from portfolio.core.errors import UploadError
from portfolio.core.security import get_current_user
from portfolio.schemas.upload import UploadResponse
from portfolio.services.upload_service import save_upload

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def upload_file(file: Optional[UploadFile] = File(None)):
    """Un fichier par requête, champ `file` ; retourne l'URL publique"""
    if file is None or not file.filename:
        raise UploadError("No file uploaded")

    try:
        url = save_upload(file.file, file.filename)
    finally:
        file.file.close()
    return {"url": url}
