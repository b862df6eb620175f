"""Pydantic schemas for request/response validation."""

from app.schemas.base import CamelModel, MessageResponse
from app.schemas.training_plan import (
    DaysFilter,
    HoursFilter,
    TrainingPlanCreate,
    TrainingPlanResponse,
)
from app.schemas.favorite import FavoriteResponse
from app.schemas.review import ReviewCreate, ReviewResponse
from app.schemas.user_training import IntervalRequest, UserTrainingCreate, UserTrainingResponse
from app.schemas.aggregation import BucketTotals, GroupedColumns
from app.schemas.goal import GoalCreate, GoalResponse, GoalUpdate

__all__ = [
    "CamelModel",
    "MessageResponse",
    "DaysFilter",
    "HoursFilter",
    "TrainingPlanCreate",
    "TrainingPlanResponse",
    "FavoriteResponse",
    "ReviewCreate",
    "ReviewResponse",
    "IntervalRequest",
    "UserTrainingCreate",
    "UserTrainingResponse",
    "BucketTotals",
    "GroupedColumns",
    "GoalCreate",
    "GoalResponse",
    "GoalUpdate",
]
