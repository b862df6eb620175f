"""
Input validation shared by the training services.

Each helper raises :class:`InvalidArgument` with a catalog message so
services can state their preconditions in a few lines.
"""

from __future__ import annotations

import datetime
import re
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel

from app.core import messages
from app.core.exceptions import InvalidArgument

WEEKDAYS: tuple[str, ...] = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_DURATION_RE = re.compile(r"^(\d{2,}):([0-5]\d):([0-5]\d)$")
_TIME_OF_DAY_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

# Interval columns on non-native backends store epoch + duration as a datetime
MAX_DURATION_HOURS = 9999


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(data: BaseModel, fields: Iterable[str], message_key: str) -> None:
    """Raise unless every attribute in ``fields`` is set on ``data``."""
    if any(is_missing(getattr(data, name, None)) for name in fields):
        raise InvalidArgument(messages.text(message_key))


def require_positive(values: Iterable[Union[int, float]], message_key: str) -> None:
    """Raise unless every value is strictly greater than zero."""
    if any(value <= 0 for value in values):
        raise InvalidArgument(messages.text(message_key))


def require_between(value: int, low: int, high: int, message_key: str) -> None:
    if not low <= value <= high:
        raise InvalidArgument(messages.text(message_key))


def require_ordered(start: Any, end: Any, message_key: str) -> None:
    """Raise when ``start`` is strictly after ``end``."""
    if start > end:
        raise InvalidArgument(messages.text(message_key))


def require_not_future(moment: datetime.datetime, now: datetime.datetime) -> None:
    if moment > now:
        raise InvalidArgument(messages.text("date_in_future"))


def parse_duration(value: Any) -> datetime.timedelta:
    """Parse ``HH:MM:SS`` into a timedelta.

    Hours may exceed 99 but not ``MAX_DURATION_HOURS``.
    """
    match = _DURATION_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidArgument(messages.text("invalid_duration"))
    hours, minutes, seconds = (int(part) for part in match.groups())
    if hours > MAX_DURATION_HOURS:
        raise InvalidArgument(messages.text("invalid_duration"))
    return datetime.timedelta(hours=hours, minutes=minutes, seconds=seconds)


def format_duration(value: datetime.timedelta) -> str:
    total = int(value.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_time_of_day(value: Any) -> str:
    """Validate ``H:MM``/``HH:MM`` and normalise to zero-padded ``HH:MM``.

    Zero-padded strings compare correctly, so plan windows are stored
    and queried as text.
    """
    match = _TIME_OF_DAY_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidArgument(messages.text("invalid_hour"))
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidArgument(messages.text("invalid_hour"))
    return f"{hour:02d}:{minute:02d}"


def parse_days(value: Optional[Union[str, list[str]]]) -> list[str]:
    """Split a comma separated weekday list ("monday, tuesday").

    Returns lower-case names in input order, without duplicates.
    """
    parts = value.split(",") if isinstance(value, str) else list(value or [])
    days: list[str] = []
    for part in parts:
        day = str(part).strip().lower()
        if not day:
            continue
        if day not in WEEKDAYS:
            raise InvalidArgument(messages.text("invalid_days"))
        if day not in days:
            days.append(day)
    if not days:
        raise InvalidArgument(messages.text("invalid_days"))
    return days
