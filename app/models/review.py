"""
Training plan review database model.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Review(SQLModel, table=True):
    """A user's score and comment on a training plan.

    One review per user per plan (enforced by unique constraint).
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "training_plan_id", name="uq_review_user_plan"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    training_plan_id: int = Field(foreign_key="training_plans.id", nullable=False, index=True)

    score: int = Field(nullable=False, ge=1, le=5)
    comment: str = Field(default="", max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
