"""
Favorite plan repository.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.favorite import FavoriteTrainingPlan


class FavoriteRepository:
    """Repository for FavoriteTrainingPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id: int, plan_id: int) -> Optional[FavoriteTrainingPlan]:
        statement = select(FavoriteTrainingPlan).where(FavoriteTrainingPlan.user_id == user_id,
                                                       FavoriteTrainingPlan.training_plan_id == plan_id, )
        return self.session.exec(statement).first()

    def get_or_create(self, user_id: int, plan_id: int) -> FavoriteTrainingPlan:
        """Insert the relation unless present.

        A concurrent insert of the same pair loses on the unique
        constraint and returns the row that won.
        """
        existing = self.get(user_id, plan_id)
        if existing:
            return existing
        favorite = FavoriteTrainingPlan(user_id=user_id, training_plan_id=plan_id)
        self.session.add(favorite)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            existing = self.get(user_id, plan_id)
            if existing is None:
                raise
            return existing
        self.session.refresh(favorite)
        return favorite

    def delete(self, favorite: FavoriteTrainingPlan) -> None:
        self.session.delete(favorite)
        self.session.commit()
