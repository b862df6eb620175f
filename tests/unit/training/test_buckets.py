"""Tests for time bucketing of athlete sessions.

Pure unit tests: sessions are plain objects carrying the four fields
the aggregation reads.
"""

import datetime
from types import SimpleNamespace

import pytest

from app.core.exceptions import InvalidArgument
from app.training.buckets import GroupBy, aggregate_sessions, bucket_key, bucket_label


# ======================================================================
# Helpers
# ======================================================================


def _session(date: str, distance: float, steps: int = 10, calories: float = 5.0) -> SimpleNamespace:
    return SimpleNamespace(date=datetime.datetime.fromisoformat(date), distance=distance, steps=steps,
                           calories=calories)


def _scenario() -> list[SimpleNamespace]:
    """Six sessions in creation order; two share 2023-05-27."""
    return [
        _session("2021-05-27T07:00:00", 1),
        _session("2022-05-27T07:00:00", 2),
        _session("2023-05-27T07:00:00", 3),
        _session("2023-05-27T18:00:00", 3),
        _session("2021-05-28T07:00:00", 4),
        _session("2021-07-28T07:00:00", 5),
    ]


def _as_dict(buckets) -> dict[str, float]:
    return {b.label: b.distance for b in buckets}


# ======================================================================
# GroupBy
# ======================================================================


class TestGroupByParse:
    @pytest.mark.parametrize("value", ["day", "week", "month", "year", "YEAR", " Month "])
    def test_known_units(self, value):
        assert GroupBy.parse(value).value == value.strip().lower()

    @pytest.mark.parametrize("value", ["hour", "", "decade"])
    def test_unknown_unit_raises(self, value):
        with pytest.raises(InvalidArgument) as excinfo:
            GroupBy.parse(value)
        assert excinfo.value.message == "Invalid group by value"
        assert excinfo.value.status_code == 400


# ======================================================================
# Labels
# ======================================================================


class TestBucketLabel:
    def test_year(self):
        assert bucket_label(datetime.datetime(2021, 5, 27), GroupBy.YEAR) == "2021"

    def test_month_is_not_zero_padded(self):
        assert bucket_label(datetime.datetime(2021, 5, 27), GroupBy.MONTH) == "5-2021"

    def test_iso_week(self):
        assert bucket_label(datetime.datetime(2021, 5, 27), GroupBy.WEEK) == "21-2021"
        assert bucket_label(datetime.datetime(2021, 7, 28), GroupBy.WEEK) == "30-2021"

    def test_week_uses_iso_year_at_year_boundary(self):
        """2021-01-01 is a Friday in ISO week 53 of 2020."""
        assert bucket_label(datetime.datetime(2021, 1, 1), GroupBy.WEEK) == "53-2020"

    def test_day(self):
        assert bucket_label(datetime.datetime(2021, 5, 7), GroupBy.DAY) == "7-5-2021"

    def test_week_starts_on_monday(self):
        sunday = datetime.datetime(2021, 5, 30)
        monday = datetime.datetime(2021, 5, 31)
        assert bucket_key(sunday, GroupBy.WEEK) != bucket_key(monday, GroupBy.WEEK)
        assert bucket_key(monday, GroupBy.WEEK) == bucket_key(datetime.datetime(2021, 6, 6), GroupBy.WEEK)


# ======================================================================
# Aggregation
# ======================================================================


class TestAggregateSessions:
    def test_by_year(self):
        buckets = aggregate_sessions(_scenario(), GroupBy.YEAR)
        assert [b.label for b in buckets] == ["2021", "2022", "2023"]
        assert _as_dict(buckets) == {"2021": 10, "2022": 2, "2023": 6}

    def test_by_month_keeps_first_appearance_order(self):
        buckets = aggregate_sessions(_scenario(), GroupBy.MONTH)
        assert [b.label for b in buckets] == ["5-2021", "5-2022", "5-2023", "7-2021"]
        assert _as_dict(buckets) == {"5-2021": 5, "5-2022": 2, "5-2023": 6, "7-2021": 5}

    def test_by_week(self):
        buckets = aggregate_sessions(_scenario(), GroupBy.WEEK)
        assert _as_dict(buckets) == {"21-2021": 5, "21-2022": 2, "21-2023": 6, "30-2021": 5}

    def test_by_day_merges_same_day_sessions(self):
        buckets = aggregate_sessions(_scenario(), GroupBy.DAY)
        assert [b.label for b in buckets] == ["27-5-2021", "27-5-2022", "27-5-2023", "28-5-2021", "28-7-2021"]
        assert _as_dict(buckets)["27-5-2023"] == 6

    def test_sums_steps_and_calories(self):
        sessions = [_session("2022-01-03T10:00:00", 1, steps=100, calories=50.5),
                    _session("2022-01-04T10:00:00", 2, steps=250, calories=20.0)]
        (bucket,) = aggregate_sessions(sessions, GroupBy.WEEK)
        assert bucket.steps == 350
        assert bucket.calories == pytest.approx(70.5)

    @pytest.mark.parametrize("unit", list(GroupBy))
    def test_partition_preserves_total_distance(self, unit):
        sessions = _scenario()
        buckets = aggregate_sessions(sessions, unit)
        assert sum(b.distance for b in buckets) == pytest.approx(sum(s.distance for s in sessions))

    @pytest.mark.parametrize("unit", list(GroupBy))
    def test_empty_input_gives_no_buckets(self, unit):
        assert aggregate_sessions([], unit) == []
