from datetime import datetime
from fastapi import APIRouter
from portfolio.schemas.base import HealthResponse

router = APIRouter(tags=["health"])

@router.get("/api/health", response_model=HealthResponse)
def health():
    # Check si l'API est up
    return {"status": "ok", "timestamp": datetime.utcnow()}
