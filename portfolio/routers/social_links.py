from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.social_link import SocialLink
from portfolio.schemas.social_link import SocialLinkCreate, SocialLinkUpdate, SocialLinkResponse
from portfolio.services.crud_service import list_records, delete_record
from portfolio.services.social_link_service import upsert_social_link, update_social_link

router = APIRouter(prefix="/api", tags=["social-links"])


@router.get("/social-links", response_model=List[SocialLinkResponse])
def list_social_links(db: Session = Depends(get_db)):
    return list_records(db, SocialLink)


@router.post("/admin/social-links", response_model=SocialLinkResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_social_link(link_data: SocialLinkCreate, response: Response, db: Session = Depends(get_db)):
    """Crée le lien ou met à jour celui qui a déjà ce nom (casse ignorée).

    201 pour une création, 200 quand un lien existant a été mis à jour.
    """
    link, created = upsert_social_link(db, link_data.model_dump(), update_fields=link_data.model_fields_set)
    if not created:
        response.status_code = status.HTTP_200_OK
    return link


@router.patch("/admin/social-links/{link_id}", response_model=SocialLinkResponse,
              dependencies=[Depends(get_current_user)])
def patch_social_link(link_id: int, link_data: SocialLinkUpdate, db: Session = Depends(get_db)):
    return update_social_link(db, link_id, link_data.changes())


@router.delete("/admin/social-links/{link_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_social_link(link_id: int, db: Session = Depends(get_db)):
    delete_record(db, SocialLink, link_id)
