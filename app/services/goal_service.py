"""
Goal service.

Athlete goals: create, list, full update, delete, and the "achieve"
transition that stamps ``last_achieved``.
"""

import logging
from typing import Optional

from sqlmodel import Session

from app.core import messages
from app.core.clock import Clock, utc_now
from app.core.exceptions import InvalidArgument, NotFound
from app.db.repositories.goal import GoalRepository
from app.models.goal import Goal, GoalType
from app.schemas.base import MessageResponse
from app.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from app.services.user_directory import UserDirectory
from app.training.validation import require_fields, require_positive

logger = logging.getLogger(__name__)

REQUIRED_GOAL_FIELDS = ("title", "description", "type", "metric")


class GoalService:
    """Service for athlete goals."""

    def __init__(self, session: Session, clock: Clock = utc_now):
        self.repository = GoalRepository(session)
        self.users = UserDirectory(session)
        self.clock = clock

    def create(self, athlete_id: int, data: GoalCreate) -> GoalResponse:
        self.users.require(athlete_id)
        goal_type = self._validate(data)
        now = self.clock()
        goal = Goal(athlete_id=athlete_id, title=data.title, description=data.description, type=goal_type.value,
                    metric=data.metric, created_at=now, updated_at=now, )
        goal = self.repository.create(goal)
        logger.info("goal_created", extra={"goal_id": goal.id, "athlete_id": athlete_id})
        return GoalResponse.model_validate(goal)

    def list_for_athlete(self, athlete_id: int, achieved: Optional[bool] = None) -> list[GoalResponse]:
        self.users.require(athlete_id)
        return [GoalResponse.model_validate(g) for g in self.repository.get_by_athlete(athlete_id, achieved)]

    def update(self, goal_id: int, data: GoalUpdate) -> GoalResponse:
        """Replace title, description, type and metric."""
        goal = self._get_or_raise(goal_id)
        goal_type = self._validate(data)
        goal.title = data.title
        goal.description = data.description
        goal.type = goal_type.value
        goal.metric = data.metric
        goal.updated_at = self.clock()
        goal = self.repository.update(goal)
        return GoalResponse.model_validate(goal)

    def delete(self, goal_id: int) -> MessageResponse:
        goal = self._get_or_raise(goal_id)
        self.repository.delete(goal)
        logger.info("goal_deleted", extra={"goal_id": goal_id})
        return MessageResponse(message=messages.text("goal_deleted"))

    def achieve(self, goal_id: int) -> GoalResponse:
        goal = self._get_or_raise(goal_id)
        now = self.clock()
        goal.achieved = True
        goal.last_achieved = now
        goal.updated_at = now
        goal = self.repository.update(goal)
        logger.info("goal_achieved", extra={"goal_id": goal_id, "athlete_id": goal.athlete_id})
        return GoalResponse.model_validate(goal)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, goal_id: int) -> Goal:
        goal = self.repository.get_by_id(goal_id)
        if not goal:
            raise NotFound(messages.text("goal_not_found"))
        return goal

    @staticmethod
    def _validate(data: GoalCreate) -> GoalType:
        require_fields(data, REQUIRED_GOAL_FIELDS, "goal_missing_fields")
        require_positive((data.metric,), "metric_not_positive")
        try:
            return GoalType(data.type)
        except ValueError:
            types = ", ".join(t.value for t in GoalType)
            raise InvalidArgument(messages.text("invalid_goal_type", types=types)) from None
