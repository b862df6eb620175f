"""
Training plan service.

Plan creation, lookups, weekday and time-window filters, and the
favorite relation between users and plans.
"""

import logging

from sqlmodel import Session

from app.core import messages
from app.core.exceptions import InvalidArgument, NotFound
from app.db.repositories.favorite import FavoriteRepository
from app.db.repositories.training_plan import TrainingPlanRepository
from app.models.training_plan import TrainingPlan
from app.schemas.favorite import FavoriteResponse
from app.schemas.training_plan import DaysFilter, HoursFilter, TrainingPlanCreate, TrainingPlanResponse
from app.services.user_directory import UserDirectory
from app.training.validation import (is_missing, parse_days, parse_time_of_day, require_between, require_fields,
                                     require_ordered, )

logger = logging.getLogger(__name__)

REQUIRED_PLAN_FIELDS = ("title", "type", "description", "difficulty", "trainer_id", "days", "start", "end")


class TrainingPlanService:
    """Service for training plan business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingPlanRepository(session)
        self.favorites = FavoriteRepository(session)
        self.users = UserDirectory(session)

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def create(self, data: TrainingPlanCreate) -> TrainingPlanResponse:
        require_fields(data, REQUIRED_PLAN_FIELDS, "training_plan_missing_fields")
        require_between(data.difficulty, 1, 5, "difficulty_out_of_range")
        days = parse_days(data.days)
        start = parse_time_of_day(data.start)
        end = parse_time_of_day(data.end)
        require_ordered(start, end, "start_hour_after_end_hour")
        self.users.require(data.trainer_id)

        plan = TrainingPlan(title=data.title, type=data.type, description=data.description,
                            difficulty=data.difficulty, state=data.state or "active", trainer_id=data.trainer_id,
                            location=data.location, latitude=data.latitude, longitude=data.longitude,
                            days=", ".join(days), start=start, end=end, )
        plan = self.repository.create(plan)
        logger.info("plan_created", extra={"plan_id": plan.id, "trainer_id": plan.trainer_id})
        return self._to_response(plan)

    def get(self, plan_id: int) -> TrainingPlanResponse:
        return self._to_response(self.get_or_raise(plan_id))

    def get_or_raise(self, plan_id: int) -> TrainingPlan:
        plan = self.repository.get_by_id(plan_id)
        if not plan:
            raise NotFound(messages.text("training_plan_not_found"))
        return plan

    def list_all(self) -> list[TrainingPlanResponse]:
        return [self._to_response(p) for p in self.repository.get_all()]

    def list_by_days(self, query: DaysFilter) -> list[TrainingPlanResponse]:
        if is_missing(query.days):
            raise InvalidArgument(messages.text("days_filter_missing_fields"))
        plans = self.repository.get_by_days(parse_days(query.days))
        return [self._to_response(p) for p in plans]

    def list_by_hours(self, query: HoursFilter) -> list[TrainingPlanResponse]:
        require_fields(query, ("start", "end"), "hours_filter_missing_fields")
        start = parse_time_of_day(query.start)
        end = parse_time_of_day(query.end)
        require_ordered(start, end, "start_hour_after_end_hour")
        plans = self.repository.get_overlapping_hours(start, end)
        return [self._to_response(p) for p in plans]

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def mark_favorite(self, plan_id: int, user_id: int) -> FavoriteResponse:
        self.get_or_raise(plan_id)
        self.users.require(user_id)
        favorite = self.favorites.get_or_create(user_id, plan_id)
        logger.info("plan_favorited", extra={"plan_id": plan_id, "user_id": user_id})
        return FavoriteResponse.model_validate(favorite)

    def unmark_favorite(self, plan_id: int, user_id: int) -> None:
        self.get_or_raise(plan_id)
        self.users.require(user_id)
        favorite = self.favorites.get(user_id, plan_id)
        if not favorite:
            raise NotFound(messages.text("favorite_not_found"))
        self.favorites.delete(favorite)

    def list_favorites(self, user_id: int) -> list[TrainingPlanResponse]:
        self.users.require(user_id)
        return [self._to_response(p) for p in self.repository.get_favorites_of_user(user_id)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(plan: TrainingPlan) -> TrainingPlanResponse:
        return TrainingPlanResponse.model_validate(plan)
