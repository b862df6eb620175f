"""
Review repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.review import Review


class ReviewRepository:
    """Repository for Review database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, review: Review) -> Review:
        """Insert a review; raises ``IntegrityError`` on a duplicate (user, plan)."""
        self.session.add(review)
        self.session.commit()
        self.session.refresh(review)
        return review

    def get_by_user_and_plan(self, user_id: int, plan_id: int) -> Optional[Review]:
        statement = select(Review).where(Review.user_id == user_id, Review.training_plan_id == plan_id)
        return self.session.exec(statement).first()

    def get_by_plan(self, plan_id: int) -> list[Review]:
        statement = select(Review).where(Review.training_plan_id == plan_id).order_by(Review.id)
        return list(self.session.exec(statement).all())
