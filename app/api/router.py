"""
API router.

Aggregates all endpoints under ``/trainings``.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import ensure_caller_not_blocked
from app.api.endpoints import goals, reviews, trainings, user_trainings

api_router = APIRouter(dependencies=[Depends(ensure_caller_not_blocked)])

# Include endpoint routers
api_router.include_router(
    trainings.router, prefix="/trainings", tags=["Training plans"]
)
api_router.include_router(
    reviews.router, prefix="/trainings", tags=["Reviews"]
)
api_router.include_router(
    user_trainings.router, prefix="/trainings", tags=["Athlete sessions"]
)
api_router.include_router(
    goals.router, prefix="/trainings", tags=["Goals"]
)
