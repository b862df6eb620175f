"""Business logic services."""

from app.services.user_directory import UserDirectory
from app.services.training_plan_service import TrainingPlanService
from app.services.review_service import ReviewService
from app.services.user_training_service import UserTrainingService
from app.services.goal_service import GoalService

__all__ = [
    "UserDirectory",
    "TrainingPlanService",
    "ReviewService",
    "UserTrainingService",
    "GoalService",
]
