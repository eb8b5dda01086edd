from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.education import Education
from portfolio.schemas.education import EducationCreate, EducationUpdate, EducationResponse
from portfolio.services.crud_service import list_records, create_record, delete_record
from portfolio.services.education_service import update_education as update_education_record

router = APIRouter(prefix="/api", tags=["education"])


@router.get("/education", response_model=List[EducationResponse])
def list_education(db: Session = Depends(get_db)):
    return list_records(db, Education)


@router.post("/admin/education", response_model=EducationResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_education(education_data: EducationCreate, db: Session = Depends(get_db)):
    return create_record(db, Education, education_data.model_dump())


@router.patch("/admin/education/{education_id}", response_model=EducationResponse,
              dependencies=[Depends(get_current_user)])
def update_education(education_id: int, education_data: EducationUpdate, db: Session = Depends(get_db)):
    return update_education_record(db, education_id, education_data.changes())


@router.delete("/admin/education/{education_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_education(education_id: int, db: Session = Depends(get_db)):
    delete_record(db, Education, education_id)
