"""Staleness checks for cached weather."""

from datetime import UTC, datetime

from solunar.models.common import local_now


def is_cache_valid_for_today(fetched_at_iso: str, now: datetime | None = None) -> bool:
    """True when the fetch happened on the same local calendar day as now."""
    if now is None:
        now = local_now()
    fetched = _parse_timestamp(fetched_at_iso)
    if fetched is None:
        return False
    if now.tzinfo is not None:
        fetched = fetched.astimezone(now.tzinfo)
    return fetched.date() == now.date()


def cache_age_hours(fetched_at_iso: str, now: datetime | None = None) -> float:
    """Age of a cache entry in hours; inf if the timestamp is unreadable."""
    if now is None:
        now = local_now()
    fetched = _parse_timestamp(fetched_at_iso)
    if fetched is None:
        return float("inf")
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return (now - fetched).total_seconds() / 3600


def _parse_timestamp(iso_str: str) -> datetime | None:
    """Parse an ISO timestamp, treating naive values as UTC."""
    try:
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt
    except (ValueError, TypeError):
        return None
