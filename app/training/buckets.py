"""
Time bucketing of athlete sessions.

Maps a session timestamp to a grouping key and a display label, and
sums distance, steps and calories per bucket.

Labels (no zero padding)::

    year   -> "2021"
    month  -> "5-2021"
    week   -> "21-2021"     ISO-8601 week, Monday start, ISO year
    day    -> "27-5-2021"

Buckets come out in order of first appearance in the input, which the
repository returns in creation order.  Sessions are therefore grouped
exhaustively and disjointly: the per-bucket sums add up to the totals
of the input.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Iterable, Protocol

from app.core import messages
from app.core.exceptions import InvalidArgument
from app.schemas.aggregation import BucketTotals


class GroupBy(str, Enum):
    """Supported aggregation units."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str) -> GroupBy:
        """Parse a unit name, raising :class:`InvalidArgument` when unknown."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise InvalidArgument(messages.text("invalid_group_by")) from None


class SessionMetrics(Protocol):
    date: datetime.datetime
    distance: float
    steps: int
    calories: float


def bucket_key(moment: datetime.datetime, unit: GroupBy) -> tuple[int, ...]:
    """Stable grouping key for ``moment`` under ``unit``."""
    if unit is GroupBy.YEAR:
        return (moment.year,)
    if unit is GroupBy.MONTH:
        return moment.year, moment.month
    if unit is GroupBy.WEEK:
        iso = moment.isocalendar()
        return iso[0], iso[1]
    return moment.year, moment.month, moment.day


def bucket_label(moment: datetime.datetime, unit: GroupBy) -> str:
    """Human label for the bucket containing ``moment``."""
    if unit is GroupBy.YEAR:
        return str(moment.year)
    if unit is GroupBy.MONTH:
        return f"{moment.month}-{moment.year}"
    if unit is GroupBy.WEEK:
        iso = moment.isocalendar()
        return f"{iso[1]}-{iso[0]}"
    return f"{moment.day}-{moment.month}-{moment.year}"


def aggregate_sessions(sessions: Iterable[SessionMetrics], unit: GroupBy) -> list[BucketTotals]:
    """Sum distance, steps and calories per bucket.

    Args:
        sessions: Sessions already restricted to one user and date range.
        unit: Bucket size.

    Returns:
        One :class:`BucketTotals` per non-empty bucket, in order of first
        appearance.  Empty input gives an empty list.
    """
    buckets: dict[tuple[int, ...], BucketTotals] = {}
    for session in sessions:
        key = bucket_key(session.date, unit)
        totals = buckets.get(key)
        if totals is None:
            totals = BucketTotals(label=bucket_label(session.date, unit))
            buckets[key] = totals
        totals.distance += session.distance
        totals.steps += session.steps
        totals.calories += session.calories
    return list(buckets.values())
