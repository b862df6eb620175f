"""
Athlete session repository.

Handles database operations for :class:`UserTraining`.  Every listing
is in creation order, which the aggregation relies on.
"""

import datetime

from sqlmodel import Session, select

from app.models.user_training import UserTraining


class UserTrainingRepository:
    """Repository for UserTraining database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: UserTraining) -> UserTraining:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_plan_and_user(self, plan_id: int, user_id: int) -> list[UserTraining]:
        statement = (select(UserTraining).where(UserTraining.training_plan_id == plan_id,
                                                UserTraining.user_id == user_id, ).order_by(UserTraining.id))
        return list(self.session.exec(statement).all())

    def get_by_user(self, user_id: int) -> list[UserTraining]:
        statement = select(UserTraining).where(UserTraining.user_id == user_id).order_by(UserTraining.id)
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(self, user_id: int, start: datetime.datetime,
                               end: datetime.datetime, ) -> list[UserTraining]:
        """Sessions of a user with ``start <= date <= end``."""
        statement = (select(UserTraining).where(UserTraining.user_id == user_id, UserTraining.date >= start,
                                                UserTraining.date <= end, ).order_by(UserTraining.id))
        return list(self.session.exec(statement).all())
