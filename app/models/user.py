"""
User database model.

Read-side view of the ``users`` table shared with the user service.
The training service only resolves ids and emails against it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class UserRole(str, Enum):
    ATHLETE = "athlete"
    TRAINER = "trainer"
    ADMIN = "admin"


class User(SQLModel, table=True):
    """
    Platform user.

    Plans reference trainers, and sessions, reviews, favorites and goals
    reference athletes, all by ``users.id``.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    role: str = Field(default=UserRole.ATHLETE.value, max_length=20)
    blocked: bool = Field(default=False)
    push_token: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
