"""
Favorite plan API schemas.
"""

import datetime

from app.schemas.base import CamelModel


class FavoriteResponse(CamelModel):
    user_id: int
    training_plan_id: int
    created_at: datetime.datetime
