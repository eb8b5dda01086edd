from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.project import Project
from portfolio.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from portfolio.services.crud_service import (
    list_records, get_record_or_404, create_record, update_record, delete_record
)

router = APIRouter(prefix="/api", tags=["projects"])


@router.get("/projects", response_model=List[ProjectResponse])
def list_projects(db: Session = Depends(get_db)):
    # plus récents d'abord
    return list_records(db, Project)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return get_record_or_404(db, Project, project_id)


@router.post("/admin/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_project(project_data: ProjectCreate, db: Session = Depends(get_db)):
    return create_record(db, Project, project_data.model_dump())


@router.patch("/admin/projects/{project_id}", response_model=ProjectResponse,
              dependencies=[Depends(get_current_user)])
def update_project(project_id: int, project_data: ProjectUpdate, db: Session = Depends(get_db)):
    return update_record(db, Project, project_id, project_data.changes())


@router.delete("/admin/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_project(project_id: int, db: Session = Depends(get_db)):
    delete_record(db, Project, project_id)
