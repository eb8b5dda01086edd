from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from portfolio.core.database import get_db
from portfolio.core.security import get_current_user
from portfolio.models.pricing_plan import PricingPlan
from portfolio.schemas.pricing_plan import PricingPlanCreate, PricingPlanUpdate, PricingPlanResponse
from portfolio.services.crud_service import list_records, create_record, update_record, delete_record

router = APIRouter(prefix="/api", tags=["pricing"])


@router.get("/pricing", response_model=List[PricingPlanResponse])
def list_pricing_plans(db: Session = Depends(get_db)):
    return list_records(db, PricingPlan)


@router.post("/admin/pricing", response_model=PricingPlanResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user)])
def create_pricing_plan(plan_data: PricingPlanCreate, db: Session = Depends(get_db)):
    return create_record(db, PricingPlan, plan_data.model_dump())


@router.patch("/admin/pricing/{plan_id}", response_model=PricingPlanResponse,
              dependencies=[Depends(get_current_user)])
def update_pricing_plan(plan_id: int, plan_data: PricingPlanUpdate, db: Session = Depends(get_db)):
    return update_record(db, PricingPlan, plan_id, plan_data.changes())


@router.delete("/admin/pricing/{plan_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user)])
def delete_pricing_plan(plan_id: int, db: Session = Depends(get_db)):
    delete_record(db, PricingPlan, plan_id)
