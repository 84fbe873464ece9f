"""Tests for weather cache staleness checks."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from solunar.ingest.staleness import cache_age_hours, is_cache_valid_for_today

BELGRADE = timezone(timedelta(hours=2))


class TestIsCacheValidForToday:
    def test_same_day(self):
        now = datetime(2026, 10, 19, 18, 0, tzinfo=BELGRADE)
        assert is_cache_valid_for_today("2026-10-19T06:15:00+02:00", now)

    def test_previous_day(self):
        now = datetime(2026, 10, 19, 0, 5, tzinfo=BELGRADE)
        assert not is_cache_valid_for_today("2026-10-18T23:55:00+02:00", now)

    def test_compared_in_local_zone(self):
        # 23:30 UTC on the 18th is already the 19th in Belgrade
        now = datetime(2026, 10, 19, 8, 0, tzinfo=BELGRADE)
        assert is_cache_valid_for_today("2026-10-18T23:30:00+00:00", now)

    def test_naive_timestamp_treated_as_utc(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        assert is_cache_valid_for_today("2026-10-19T01:00:00", now)

    def test_invalid_timestamp(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        assert not is_cache_valid_for_today("not-a-date", now)


class TestCacheAgeHours:
    def test_age(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        assert cache_age_hours("2026-10-19T09:00:00+00:00", now) == pytest.approx(3.0)

    def test_naive_now(self):
        now = datetime(2026, 10, 19, 12, 0)
        assert cache_age_hours("2026-10-19T11:30:00+00:00", now) == pytest.approx(0.5)

    def test_unreadable(self):
        assert cache_age_hours("garbage") == float("inf")
