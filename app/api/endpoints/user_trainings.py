"""
Athlete session endpoints.

Interval endpoints take ``{"start": ..., "end": ...}`` as a JSON body
and answer both GET and POST; existing clients send GET with a body.
"""

from typing import Literal, Optional, Union

from fastapi import APIRouter, Body, Depends, Query
from sqlmodel import Session

from app.api.dependencies import RowId
from app.core.clock import Clock, get_clock
from app.core.config import settings
from app.db.session import get_db
from app.schemas.aggregation import BucketTotals, GroupedColumns
from app.schemas.user_training import IntervalRequest, UserTrainingCreate, UserTrainingResponse
from app.services.user_training_service import UserTrainingService

router = APIRouter()


@router.post("/{plan_id}/user_training/{user_id}", summary="Log a session against a training plan.",
             response_model=UserTrainingResponse, )
def record_session(plan_id: RowId, user_id: RowId, data: UserTrainingCreate, db: Session = Depends(get_db),
                   clock: Clock = Depends(get_clock), ):
    return UserTrainingService(db, clock).record(plan_id, user_id, data)


@router.get("/{plan_id}/user_training/{user_id}", summary="List a user's sessions on one plan.",
            response_model=list[UserTrainingResponse], )
def list_sessions_for_plan(plan_id: RowId, user_id: RowId, db: Session = Depends(get_db)):
    return UserTrainingService(db).list_for_plan_and_user(plan_id, user_id)


@router.get("/user_training/{user_id}", summary="List all sessions of a user.",
            response_model=list[UserTrainingResponse], )
def list_sessions(user_id: RowId, db: Session = Depends(get_db)):
    return UserTrainingService(db).list_for_user(user_id)


@router.api_route("/user_training/{user_id}/between_dates", methods=["GET", "POST"],
                  summary="List a user's sessions dated within [start, end].",
                  response_model=list[UserTrainingResponse], )
def list_sessions_between(user_id: RowId, interval: Optional[IntervalRequest] = Body(None),
                          db: Session = Depends(get_db), ):
    return UserTrainingService(db).list_between(user_id, interval)


@router.api_route("/user_training/{user_id}/between_dates/group_by/{unit}", methods=["GET", "POST"],
                  summary="Sum distance, steps and calories per day, week, month or year.",
                  response_model=Union[GroupedColumns, list[BucketTotals]], )
def aggregate_sessions_between(user_id: RowId, unit: str, interval: Optional[IntervalRequest] = Body(None),
                               shape: Optional[Literal["columns", "rows"]] = Query(
                                   None, description="Response layout; defaults to GROUP_BY_SHAPE"),
                               db: Session = Depends(get_db), ):
    buckets = UserTrainingService(db).aggregate_between(user_id, interval, unit)
    if (shape or settings.GROUP_BY_SHAPE) == "rows":
        return buckets
    return GroupedColumns.from_buckets(buckets)
