"""
Clock capability.

All timestamps are stored as naive UTC.  Services receive a clock
callable so tests can pin "now".
"""

import datetime
from typing import Callable

Clock = Callable[[], datetime.datetime]


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: datetime.datetime) -> datetime.datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


def get_clock() -> Clock:
    """FastAPI dependency returning the wall clock."""
    return utc_now
