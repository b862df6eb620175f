"""
Athlete session database model.

One logged workout of a user against a training plan.  Rows are
append-only; aggregation reads ``date``, ``distance``, ``steps`` and
``calories``.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, Interval
from sqlmodel import Field, SQLModel


class UserTraining(SQLModel, table=True):
    """A session logged by a user against a training plan."""

    __tablename__ = "user_trainings"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    training_plan_id: int = Field(foreign_key="training_plans.id", nullable=False, index=True)

    # Metrics
    distance: float = Field(nullable=False)
    calories: float = Field(nullable=False)
    steps: int = Field(nullable=False)
    duration: datetime.timedelta = Field(sa_column=Column(Interval, nullable=False))

    # When the session happened (naive UTC), never in the future
    date: datetime.datetime = Field(nullable=False, index=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
