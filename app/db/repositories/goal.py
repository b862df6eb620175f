"""
Goal repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.goal import Goal


class GoalRepository:
    """Repository for Goal database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, goal: Goal) -> Goal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal

    def get_by_id(self, goal_id: int) -> Optional[Goal]:
        return self.session.get(Goal, goal_id)

    def get_by_athlete(self, athlete_id: int, achieved: Optional[bool] = None) -> list[Goal]:
        statement = select(Goal).where(Goal.athlete_id == athlete_id)
        if achieved is not None:
            statement = statement.where(Goal.achieved == achieved)
        return list(self.session.exec(statement.order_by(Goal.id)).all())

    def update(self, goal: Goal) -> Goal:
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal

    def delete(self, goal: Goal) -> None:
        self.session.delete(goal)
        self.session.commit()
