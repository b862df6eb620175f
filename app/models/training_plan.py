"""
Training plan database model.

A trainer-authored offering with a weekly schedule window.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class TrainingPlan(SQLModel, table=True):
    """A training plan.

    ``days`` holds normalised weekday names joined by ``", "``;
    ``start``/``end`` hold zero-padded ``HH:MM`` so text comparison
    follows time-of-day order.
    """

    __tablename__ = "training_plans"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=255)
    type: str = Field(nullable=False, max_length=100, index=True)
    description: str = Field(nullable=False, max_length=2000)
    difficulty: int = Field(nullable=False)
    state: str = Field(default="active", max_length=20)
    trainer_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    # Location
    location: Optional[str] = Field(default=None, max_length=255)
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)

    # Schedule
    days: str = Field(nullable=False, max_length=100)
    start: str = Field(nullable=False, max_length=5)
    end: str = Field(nullable=False, max_length=5)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    @property
    def day_list(self) -> list[str]:
        return [day.strip() for day in self.days.split(",") if day.strip()]
