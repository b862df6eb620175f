"""
Athlete goal endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import RowId
from app.core.clock import Clock, get_clock
from app.db.session import get_db
from app.schemas.base import MessageResponse
from app.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from app.services.goal_service import GoalService

router = APIRouter()


@router.post("/goals/{athlete_id}", summary="Create a goal for an athlete.", response_model=GoalResponse, )
def create_goal(athlete_id: RowId, data: GoalCreate, db: Session = Depends(get_db),
                clock: Clock = Depends(get_clock), ):
    return GoalService(db, clock).create(athlete_id, data)


@router.get("/goals/{athlete_id}", summary="List an athlete's goals.", response_model=list[GoalResponse], )
def list_goals(athlete_id: RowId, db: Session = Depends(get_db)):
    return GoalService(db).list_for_athlete(athlete_id)


@router.get("/goals/{athlete_id}/achieved", summary="List an athlete's achieved goals.",
            response_model=list[GoalResponse], )
def list_achieved_goals(athlete_id: RowId, db: Session = Depends(get_db)):
    return GoalService(db).list_for_athlete(athlete_id, achieved=True)


@router.put("/goals/{goal_id}", summary="Replace a goal's title, description, type and metric.",
            response_model=GoalResponse, )
def update_goal(goal_id: RowId, data: GoalUpdate, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    return GoalService(db, clock).update(goal_id, data)


@router.delete("/goals/{goal_id}", summary="Delete a goal.", response_model=MessageResponse, )
def delete_goal(goal_id: RowId, db: Session = Depends(get_db)):
    return GoalService(db).delete(goal_id)


@router.put("/goals/{goal_id}/achieve", summary="Mark a goal as achieved.", response_model=GoalResponse, )
def achieve_goal(goal_id: RowId, db: Session = Depends(get_db), clock: Clock = Depends(get_clock)):
    return GoalService(db, clock).achieve(goal_id)
