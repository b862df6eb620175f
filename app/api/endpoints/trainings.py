"""
Training plan endpoints.

Plan CRUD, weekday / time-window filters and favorites.  Static paths
are declared before ``/{plan_id}`` so they are matched first.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlmodel import Session

from app.api.dependencies import RowId
from app.db.session import get_db
from app.schemas.favorite import FavoriteResponse
from app.schemas.training_plan import DaysFilter, HoursFilter, TrainingPlanCreate, TrainingPlanResponse
from app.services.training_plan_service import TrainingPlanService

router = APIRouter()


@router.get("", summary="List all training plans.", response_model=list[TrainingPlanResponse], )
def list_plans(db: Session = Depends(get_db)):
    return TrainingPlanService(db).list_all()


@router.post("", summary="Create a training plan.", response_model=TrainingPlanResponse, )
def create_plan(data: TrainingPlanCreate, db: Session = Depends(get_db)):
    return TrainingPlanService(db).create(data)


@router.api_route("/between_dates", methods=["GET", "POST"], summary="List plans scheduled on the given weekdays.",
                  response_model=list[TrainingPlanResponse], )
def list_plans_by_days(query: Optional[DaysFilter] = Body(None), db: Session = Depends(get_db)):
    return TrainingPlanService(db).list_by_days(query or DaysFilter())


@router.api_route("/between_hours", methods=["GET", "POST"],
                  summary="List plans whose time window overlaps [start, end].",
                  response_model=list[TrainingPlanResponse], )
def list_plans_by_hours(query: Optional[HoursFilter] = Body(None), db: Session = Depends(get_db)):
    return TrainingPlanService(db).list_by_hours(query or HoursFilter())


@router.get("/favorites/{user_id}", summary="List a user's favorite plans.",
            response_model=list[TrainingPlanResponse], )
def list_favorites(user_id: RowId, db: Session = Depends(get_db)):
    return TrainingPlanService(db).list_favorites(user_id)


@router.get("/{plan_id}", summary="Get a training plan.", response_model=TrainingPlanResponse, )
def get_plan(plan_id: RowId, db: Session = Depends(get_db)):
    return TrainingPlanService(db).get(plan_id)


@router.post("/{plan_id}/favorite/{user_id}", summary="Mark a plan as favorite (idempotent).",
             response_model=FavoriteResponse, )
def mark_favorite(plan_id: RowId, user_id: RowId, db: Session = Depends(get_db)):
    return TrainingPlanService(db).mark_favorite(plan_id, user_id)


@router.delete("/{plan_id}/favorite/{user_id}", summary="Remove a plan from a user's favorites.",
               status_code=status.HTTP_204_NO_CONTENT, )
def unmark_favorite(plan_id: RowId, user_id: RowId, db: Session = Depends(get_db)):
    TrainingPlanService(db).unmark_favorite(plan_id, user_id)
