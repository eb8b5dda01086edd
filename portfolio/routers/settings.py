from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.schemas.site_settings import SiteSettingsUpdate, SiteSettingsResponse
from portfolio.services.settings_service import get_site_settings, update_site_settings

router = APIRouter(prefix="/api", tags=["settings"])


@router.get("/settings", response_model=SiteSettingsResponse)
@router.get("/site-settings", response_model=SiteSettingsResponse)
def read_settings(db: Session = Depends(get_db)):
    return get_site_settings(db)


@router.patch("/admin/settings", response_model=SiteSettingsResponse,
              dependencies=[Depends(get_current_user)])
def patch_settings(settings_data: SiteSettingsUpdate, db: Session = Depends(get_db)):
    return update_site_settings(db, settings_data.changes())
