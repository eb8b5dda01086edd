from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Dict, List, Optional

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.skill import Skill
from portfolio.schemas.skill import SkillCreate, SkillUpdate, SkillResponse
from portfolio.services.crud_service import create_record, update_record, delete_record
from portfolio.services.skill_service import list_skills, group_by_category

router = APIRouter(prefix="/api", tags=["skills"])


@router.get("/skills", response_model=List[SkillResponse])
def get_skills(category: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return list_skills(db, category)


@router.get("/skills/grouped", response_model=Dict[str, List[SkillResponse]])
def get_skills_grouped(db: Session = Depends(get_db)):
    """Compétences regroupées par catégorie, pour l'affichage en colonnes"""
    return group_by_category(list_skills(db))


@router.post("/admin/skills", response_model=SkillResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_skill(skill_data: SkillCreate, db: Session = Depends(get_db)):
    return create_record(db, Skill, skill_data.model_dump())


@router.patch("/admin/skills/{skill_id}", response_model=SkillResponse,
              dependencies=[Depends(get_current_user)])
def update_skill(skill_id: int, skill_data: SkillUpdate, db: Session = Depends(get_db)):
    return update_record(db, Skill, skill_id, skill_data.changes())


@router.delete("/admin/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_skill(skill_id: int, db: Session = Depends(get_db)):
    delete_record(db, Skill, skill_id)
