from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.activity import Activity
from portfolio.schemas.activity import ActivityCreate, ActivityUpdate, ActivityResponse
from portfolio.services.crud_service import list_records, create_record, update_record, delete_record

router = APIRouter(prefix="/api", tags=["activities"])


@router.get("/activities", response_model=List[ActivityResponse])
def list_activities(db: Session = Depends(get_db)):
    return list_records(db, Activity)


@router.post("/admin/activities", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_activity(activity_data: ActivityCreate, db: Session = Depends(get_db)):
    return create_record(db, Activity, activity_data.model_dump())


@router.patch("/admin/activities/{activity_id}", response_model=ActivityResponse,
              dependencies=[Depends(get_current_user)])
def update_activity(activity_id: int, activity_data: ActivityUpdate, db: Session = Depends(get_db)):
    return update_record(db, Activity, activity_id, activity_data.changes())


@router.delete("/admin/activities/{activity_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_activity(activity_id: int, db: Session = Depends(get_db)):
    delete_record(db, Activity, activity_id)
