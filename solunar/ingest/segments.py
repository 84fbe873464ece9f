"""Split a date window into archive / forecast / seasonal source segments."""

from dataclasses import dataclass
from datetime import date, timedelta

from solunar.models.weather import WeatherSource


@dataclass(frozen=True)
class Segment:
    source: WeatherSource
    start: date
    end: date  # inclusive


def plan_segments(
    start: date, end: date, today: date, short_term_days: int = 16
) -> list[Segment]:
    """Past days come from the archive, today through the forecast horizon
    from the forecast model, anything later from the seasonal model.

    Returned in chronological order; empty segments are omitted.
    """
    segments: list[Segment] = []
    if start > end:
        return segments

    yesterday = today - timedelta(days=1)
    if start <= yesterday:
        segments.append(Segment(WeatherSource.ARCHIVE, start, min(end, yesterday)))

    horizon_end = today + timedelta(days=short_term_days - 1)
    near_start = max(start, today)
    near_end = min(end, horizon_end)
    if near_start <= near_end:
        segments.append(Segment(WeatherSource.FORECAST, near_start, near_end))

    long_start = max(start, horizon_end + timedelta(days=1))
    if long_start <= end:
        segments.append(Segment(WeatherSource.SEASONAL, long_start, end))

    return segments
