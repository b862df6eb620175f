"""
Goal API schemas.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class GoalCreate(CamelModel):
    """Schema for creating or fully replacing a goal."""

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    type: Optional[str] = Field(None, description="One of Calorias, Pasos, Distancia")
    metric: Optional[float] = Field(None, description="Target value, strictly positive")


class GoalUpdate(GoalCreate):
    """Full replacement of a goal's mutable fields."""


class GoalResponse(CamelModel):
    id: int
    athlete_id: int
    title: str
    description: str
    type: str
    metric: float
    achieved: bool
    last_achieved: Optional[datetime.datetime]
    created_at: datetime.datetime
    updated_at: datetime.datetime
