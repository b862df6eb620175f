"""
Favorite training plan relation.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class FavoriteTrainingPlan(SQLModel, table=True):
    """A plan marked as favorite by a user.

    Marking is idempotent: the unique constraint keeps a single row per
    (user, plan) even under concurrent requests.
    """

    __tablename__ = "favorite_training_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "training_plan_id", name="uq_favorite_user_plan"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    training_plan_id: int = Field(foreign_key="training_plans.id", nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
