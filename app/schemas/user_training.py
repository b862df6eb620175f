"""
Athlete session API schemas.
"""

import datetime
from typing import Optional, Union

from pydantic import Field

from app.schemas.base import INT32_MAX, CamelModel


class UserTrainingCreate(CamelModel):
    """Schema for logging a session.

    ``duration`` accepts any scalar so a malformed value is reported as a
    format error rather than a type error.
    """

    distance: Optional[float] = None
    calories: Optional[float] = None
    steps: Optional[int] = Field(None, le=INT32_MAX)
    duration: Optional[Union[str, int, float]] = Field(None, description="HH:MM:SS")
    date: Optional[datetime.datetime] = Field(None, description="When the session happened; not in the future")


class UserTrainingResponse(CamelModel):
    id: int
    user_id: int
    training_plan_id: int
    distance: float
    calories: float
    steps: int
    duration: str
    date: datetime.datetime
    created_at: datetime.datetime


class IntervalRequest(CamelModel):
    """Inclusive date interval."""
    start: Optional[datetime.datetime] = None
    end: Optional[datetime.datetime] = None
