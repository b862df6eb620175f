"""
Seed a local database with a trainer, an athlete, a plan and a few sessions.

The user service owns accounts in production; this only fills the
shared ``users`` table so the training endpoints can be tried locally.

Usage:
    python scripts/seed_demo.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.clock import utc_now
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.init_db import init_db
from app.db.repositories.user import UserRepository
from app.db.session import engine
from app.models.user import User, UserRole
from app.schemas.goal import GoalCreate
from app.schemas.training_plan import TrainingPlanCreate
from app.schemas.user_training import UserTrainingCreate
from app.services.goal_service import GoalService
from app.services.training_plan_service import TrainingPlanService
from app.services.user_training_service import UserTrainingService


def seed() -> None:
    init_db()
    with Session(engine) as session:
        users = UserRepository(session)
        trainer = users.get_by_email("demo-trainer@mail.com") or users.create(
            User(name="Demo Trainer", email="demo-trainer@mail.com", role=UserRole.TRAINER.value))
        athlete = users.get_by_email("demo-athlete@mail.com") or users.create(
            User(name="Demo Athlete", email="demo-athlete@mail.com"))

        plan = TrainingPlanService(session).create(TrainingPlanCreate(
            title="Morning run", type="Running", description="Easy 5k around the park", difficulty=2,
            trainer_id=trainer.id, location="Parque Centenario", days="monday, wednesday, friday",
            start="07:00", end="08:00"))

        sessions = UserTrainingService(session)
        today = utc_now().replace(hour=7, minute=0, second=0, microsecond=0)
        for days_ago, distance in ((14, 4.5), (7, 5.0), (2, 5.2)):
            sessions.record(plan.id, athlete.id, UserTrainingCreate(
                distance=distance, calories=distance * 70, steps=int(distance * 1300), duration="00:32:00",
                date=today - datetime.timedelta(days=days_ago)))

        GoalService(session).create(athlete.id, GoalCreate(
            title="Run 20k this month", description="Monthly distance", type="Distancia", metric=20))

    print(f"Seeded plan {plan.id} for trainer {trainer.id} and athlete {athlete.id}")


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    seed()
