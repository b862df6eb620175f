"""SQLModel database models."""

from app.models.user import User, UserRole
from app.models.training_plan import TrainingPlan
from app.models.user_training import UserTraining
from app.models.review import Review
from app.models.favorite import FavoriteTrainingPlan
from app.models.goal import Goal, GoalType

__all__ = [
    "User",
    "UserRole",
    "TrainingPlan",
    "UserTraining",
    "Review",
    "FavoriteTrainingPlan",
    "Goal",
    "GoalType",
]
