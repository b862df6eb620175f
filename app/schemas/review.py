"""
Review API schemas.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class ReviewCreate(CamelModel):
    """Schema for reviewing a plan; the score range is checked by the service."""
    score: Optional[int] = None
    comment: Optional[str] = Field(None, max_length=1000)


class ReviewResponse(CamelModel):
    id: int
    user_id: int
    training_plan_id: int
    score: int
    comment: str
    created_at: datetime.datetime
