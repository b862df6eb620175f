"""
Aggregated session metrics.

Two wire shapes exist for the same data:

- ``rows``: ``[{"label": "2021", "distance": 10, "steps": ..., "calories": ...}, ...]``
- ``columns``: ``{"label": [...], "distance": [...], "steps": [...], "calories": [...]}``
"""

from pydantic import BaseModel


class BucketTotals(BaseModel):
    """Sums for one time bucket."""

    label: str
    distance: float = 0.0
    steps: int = 0
    calories: float = 0.0


class GroupedColumns(BaseModel):
    """Parallel arrays, one position per bucket."""

    label: list[str] = []
    distance: list[float] = []
    steps: list[int] = []
    calories: list[float] = []

    @classmethod
    def from_buckets(cls, buckets: list[BucketTotals]) -> "GroupedColumns":
        return cls(label=[b.label for b in buckets], distance=[b.distance for b in buckets],
                   steps=[b.steps for b in buckets], calories=[b.calories for b in buckets], )
