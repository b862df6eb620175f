"""
Athlete session service.

Records sessions against plans and answers point, interval and
bucketed-aggregation queries.  "Now" comes from the injected clock.
"""

import datetime
import logging

from sqlmodel import Session

from app.core import messages
from app.core.clock import Clock, to_utc_naive, utc_now
from app.core.exceptions import MissingInterval
from app.db.repositories.user_training import UserTrainingRepository
from app.models.user_training import UserTraining
from app.schemas.aggregation import BucketTotals
from app.schemas.user_training import IntervalRequest, UserTrainingCreate, UserTrainingResponse
from app.services.training_plan_service import TrainingPlanService
from app.services.user_directory import UserDirectory
from app.training.buckets import GroupBy, aggregate_sessions
from app.training.validation import (format_duration, parse_duration, require_fields, require_not_future,
                                     require_ordered, require_positive, )

logger = logging.getLogger(__name__)

REQUIRED_SESSION_FIELDS = ("distance", "calories", "steps", "duration", "date")


class UserTrainingService:
    """Service for athlete session business logic."""

    def __init__(self, session: Session, clock: Clock = utc_now):
        self.repository = UserTrainingRepository(session)
        self.plans = TrainingPlanService(session)
        self.users = UserDirectory(session)
        self.clock = clock

    def record(self, plan_id: int, user_id: int, data: UserTrainingCreate) -> UserTrainingResponse:
        self.plans.get_or_raise(plan_id)
        self.users.require(user_id)
        require_fields(data, REQUIRED_SESSION_FIELDS, "user_training_missing_fields")
        require_positive((data.distance, data.calories, data.steps), "user_training_not_positive")
        duration = parse_duration(data.duration)
        require_positive((duration.total_seconds(),), "user_training_not_positive")
        date = to_utc_naive(data.date)
        require_not_future(date, self.clock())

        entry = UserTraining(user_id=user_id, training_plan_id=plan_id, distance=data.distance,
                             calories=data.calories, steps=data.steps, duration=duration, date=date, )
        entry = self.repository.create(entry)
        logger.info("session_recorded", extra={"session_id": entry.id, "plan_id": plan_id, "user_id": user_id})
        return self._to_response(entry)

    def list_for_plan_and_user(self, plan_id: int, user_id: int) -> list[UserTrainingResponse]:
        self.plans.get_or_raise(plan_id)
        self.users.require(user_id)
        return [self._to_response(e) for e in self.repository.get_by_plan_and_user(plan_id, user_id)]

    def list_for_user(self, user_id: int) -> list[UserTrainingResponse]:
        self.users.require(user_id)
        return [self._to_response(e) for e in self.repository.get_by_user(user_id)]

    def list_between(self, user_id: int, interval: IntervalRequest | None) -> list[UserTrainingResponse]:
        self.users.require(user_id)
        start, end = self._resolve_interval(interval)
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        return [self._to_response(e) for e in entries]

    def aggregate_between(self, user_id: int, interval: IntervalRequest | None, unit: str, ) -> list[BucketTotals]:
        """Sum distance, steps and calories per time bucket within the interval."""
        self.users.require(user_id)
        group_by = GroupBy.parse(unit)
        start, end = self._resolve_interval(interval)
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        return aggregate_sessions(entries, group_by)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_interval(interval: IntervalRequest | None) -> tuple[datetime.datetime, datetime.datetime]:
        if interval is None or interval.start is None or interval.end is None:
            raise MissingInterval(messages.text("interval_missing_fields"))
        start, end = to_utc_naive(interval.start), to_utc_naive(interval.end)
        require_ordered(start, end, "start_after_end")
        return start, end

    @staticmethod
    def _to_response(entry: UserTraining) -> UserTrainingResponse:
        return UserTrainingResponse(id=entry.id, user_id=entry.user_id, training_plan_id=entry.training_plan_id,
                                    distance=entry.distance, calories=entry.calories, steps=entry.steps,
                                    duration=format_duration(entry.duration), date=entry.date,
                                    created_at=entry.created_at, )
