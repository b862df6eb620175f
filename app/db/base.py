"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.training_plan import TrainingPlan  # noqa: F401
from app.models.user_training import UserTraining  # noqa: F401
from app.models.review import Review  # noqa: F401
from app.models.favorite import FavoriteTrainingPlan  # noqa: F401
from app.models.goal import Goal  # noqa: F401
