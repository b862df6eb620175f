"""
Training plan repository.

Handles database operations for :class:`TrainingPlan`.  All listings
are in creation order (ascending id).
"""

from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, select

from app.models.favorite import FavoriteTrainingPlan
from app.models.training_plan import TrainingPlan


class TrainingPlanRepository:
    """Repository for TrainingPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, plan: TrainingPlan) -> TrainingPlan:
        self.session.add(plan)
        self.session.commit()
        self.session.refresh(plan)
        return plan

    def get_by_id(self, plan_id: int) -> Optional[TrainingPlan]:
        return self.session.get(TrainingPlan, plan_id)

    def get_all(self) -> list[TrainingPlan]:
        statement = select(TrainingPlan).order_by(TrainingPlan.id)
        return list(self.session.exec(statement).all())

    def get_by_days(self, days: list[str]) -> list[TrainingPlan]:
        """Plans scheduled on any of ``days``.

        ``days`` is matched as text in SQL first, then confirmed against
        the parsed list so "sunday" does not match e.g. a free-form suffix.
        """
        statement = (select(TrainingPlan).where(or_(*[TrainingPlan.days.contains(day) for day in days]))
                     .order_by(TrainingPlan.id))
        wanted = set(days)
        return [plan for plan in self.session.exec(statement).all() if wanted.intersection(plan.day_list)]

    def get_overlapping_hours(self, start: str, end: str) -> list[TrainingPlan]:
        """Plans whose [start, end] window overlaps the given one."""
        statement = (select(TrainingPlan).where(TrainingPlan.start <= end, TrainingPlan.end >= start, )
                     .order_by(TrainingPlan.id))
        return list(self.session.exec(statement).all())

    def get_favorites_of_user(self, user_id: int) -> list[TrainingPlan]:
        """Plans favorited by ``user_id`` in the order they were marked."""
        statement = (select(TrainingPlan)
                     .join(FavoriteTrainingPlan, FavoriteTrainingPlan.training_plan_id == TrainingPlan.id)
                     .where(FavoriteTrainingPlan.user_id == user_id)
                     .order_by(FavoriteTrainingPlan.id))
        return list(self.session.exec(statement).all())
