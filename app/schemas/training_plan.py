"""
Training plan API schemas.

Request fields are all optional here: required-field and range checks
run in the service so every failure maps to the same 400 message
format.  Length limits mirror the ``training_plans`` columns.
"""

import datetime
from typing import Optional, Union

from pydantic import Field

from app.schemas.base import INT32_MAX, INT32_MIN, CamelModel


class TrainingPlanCreate(CamelModel):
    """Schema for creating a training plan."""

    title: Optional[str] = Field(None, max_length=255)
    type: Optional[str] = Field(None, max_length=100, description="Free-form category, e.g. 'Running'")
    description: Optional[str] = Field(None, max_length=2000)
    difficulty: Optional[int] = Field(None, description="1 (easiest) to 5")
    state: Optional[str] = Field("active", max_length=20)
    trainer_id: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)
    location: Optional[str] = Field(None, max_length=255)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    days: Optional[Union[str, list[str]]] = Field(None, description="Weekdays, e.g. 'monday, tuesday'")
    start: Optional[str] = Field(None, description="Start time, HH:MM")
    end: Optional[str] = Field(None, description="End time, HH:MM")


class TrainingPlanResponse(CamelModel):
    """Schema for a training plan in API responses."""

    id: int
    title: str
    type: str
    description: str
    difficulty: int
    state: str
    trainer_id: int
    location: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    days: str
    start: str
    end: str
    created_at: datetime.datetime


class DaysFilter(CamelModel):
    """Plans scheduled on any of ``days``."""
    days: Optional[Union[str, list[str]]] = None


class HoursFilter(CamelModel):
    """Plans whose time window overlaps [start, end]."""
    start: Optional[str] = None
    end: Optional[str] = None
