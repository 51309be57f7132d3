"""
Unit tests for app.utils.time module.
"""
from datetime import date, datetime, time, timedelta, timezone

import pytest

from app.utils.time import UTC, days_ago, ensure_aware, isoformat_z, split_instant, utcnow


class TestUtcnow:
    def test_is_aware_utc(self):
        now = utcnow()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestEnsureAware:
    def test_naive_assumed_utc(self):
        assert ensure_aware(datetime(2026, 1, 1, 12)).tzinfo == UTC

    def test_naive_rejected(self):
        with pytest.raises(ValueError):
            ensure_aware(datetime(2026, 1, 1), assume_utc=False)

    def test_converts_offset(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        assert ensure_aware(datetime(2026, 1, 1, 5, 30, tzinfo=ist)) == datetime(2026, 1, 1, tzinfo=UTC)


class TestSplitInstant:
    def test_drops_microseconds(self):
        d, t = split_instant(datetime(2026, 10, 19, 8, 15, 30, 999999, tzinfo=UTC))

        assert d == date(2026, 10, 19)
        assert t == time(8, 15, 30)
        assert t.tzinfo is None

    def test_uses_utc_date(self):
        # 02:00 in UTC+5:30 is still the previous day in UTC
        ist = timezone(timedelta(hours=5, minutes=30))

        d, t = split_instant(datetime(2026, 10, 20, 2, 0, tzinfo=ist))

        assert d == date(2026, 10, 19)
        assert t == time(20, 30)


class TestDaysAgo:
    def test_window_start(self):
        assert days_ago(30, today=date(2026, 10, 19)) == date(2026, 9, 19)

    def test_negative_is_today(self):
        assert days_ago(-3, today=date(2026, 10, 19)) == date(2026, 10, 19)


class TestIsoformatZ:
    def test_millisecond_precision(self):
        assert isoformat_z(datetime(2026, 10, 19, 8, 15, 30, 250999, tzinfo=UTC)) == "2026-10-19T08:15:30.250Z"

    def test_default_is_now(self):
        assert isoformat_z().endswith("Z")
