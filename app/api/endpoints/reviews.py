"""
Review endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import RowId
from app.db.session import get_db
from app.schemas.review import ReviewCreate, ReviewResponse
from app.services.review_service import ReviewService

router = APIRouter()


@router.post("/{plan_id}/review/{user_id}", summary="Review a training plan.", response_model=ReviewResponse, )
def submit_review(plan_id: RowId, user_id: RowId, data: ReviewCreate, db: Session = Depends(get_db)):
    return ReviewService(db).submit(plan_id, user_id, data)


@router.get("/{plan_id}/reviews", summary="List a plan's reviews in submission order.",
            response_model=list[ReviewResponse], )
def list_reviews(plan_id: RowId, db: Session = Depends(get_db)):
    return ReviewService(db).list_for_plan(plan_id)
