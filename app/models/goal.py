"""
Athlete goal database model.

Goal types keep the Spanish vocabulary stored by existing clients:
``Calorias``, ``Pasos`` and ``Distancia``.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class GoalType(str, Enum):
    CALORIES = "Calorias"
    STEPS = "Pasos"
    DISTANCE = "Distancia"


class Goal(SQLModel, table=True):
    """An athlete-defined target value for one metric."""

    __tablename__ = "goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    title: str = Field(nullable=False, max_length=255)
    description: str = Field(nullable=False, max_length=1000)
    type: str = Field(nullable=False, max_length=20)  # a GoalType value
    metric: float = Field(nullable=False)

    # Achievement state
    achieved: bool = Field(default=False)
    last_achieved: Optional[datetime.datetime] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
