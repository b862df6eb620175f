"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.training_plan import TrainingPlanRepository
from app.db.repositories.favorite import FavoriteRepository
from app.db.repositories.review import ReviewRepository
from app.db.repositories.user_training import UserTrainingRepository
from app.db.repositories.goal import GoalRepository

__all__ = [
    "UserRepository",
    "TrainingPlanRepository",
    "FavoriteRepository",
    "ReviewRepository",
    "UserTrainingRepository",
    "GoalRepository",
]
