"""
Review service.

One review per user per plan, score 1-5, and a trainer may not review
their own plan.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core import messages
from app.core.exceptions import Conflict
from app.db.repositories.review import ReviewRepository
from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewResponse
from app.services.training_plan_service import TrainingPlanService
from app.services.user_directory import UserDirectory
from app.training.validation import require_between, require_fields

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for plan reviews."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = ReviewRepository(session)
        self.plans = TrainingPlanService(session)
        self.users = UserDirectory(session)

    def submit(self, plan_id: int, user_id: int, data: ReviewCreate) -> ReviewResponse:
        """Record a review.

        Checks run in this order: plan exists, user exists, score present,
        score in range, reviewer is not the plan's trainer, no earlier
        review by the same user.
        """
        plan = self.plans.get_or_raise(plan_id)
        self.users.require(user_id)
        require_fields(data, ("score",), "review_missing_fields")
        require_between(data.score, 1, 5, "score_out_of_range")
        if plan.trainer_id == user_id:
            raise Conflict(messages.text("self_review"))
        if self.repository.get_by_user_and_plan(user_id, plan_id):
            raise Conflict(messages.text("duplicate_review"))

        review = Review(user_id=user_id, training_plan_id=plan_id, score=data.score, comment=data.comment or "")
        try:
            review = self.repository.create(review)
        except IntegrityError:
            self.session.rollback()
            raise Conflict(messages.text("duplicate_review")) from None
        logger.info("review_submitted", extra={"plan_id": plan_id, "user_id": user_id, "score": review.score})
        return ReviewResponse.model_validate(review)

    def list_for_plan(self, plan_id: int) -> list[ReviewResponse]:
        self.plans.get_or_raise(plan_id)
        return [ReviewResponse.model_validate(r) for r in self.repository.get_by_plan(plan_id)]
