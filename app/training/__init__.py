"""Training domain rules: input validation and time bucketing."""

from app.training.buckets import GroupBy, aggregate_sessions, bucket_label
from app.training.validation import (parse_days, parse_duration, parse_time_of_day, require_fields,
                                     require_positive, )

__all__ = [
    "GroupBy",
    "aggregate_sessions",
    "bucket_label",
    "parse_days",
    "parse_duration",
    "parse_time_of_day",
    "require_fields",
    "require_positive",
]
