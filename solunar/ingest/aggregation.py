"""Hourly to daily weather aggregation, trend resolution and gap filling."""

import math
from collections.abc import Iterable
from datetime import date

from scipy.stats import circmean

from solunar.models.common import DateStr, iter_dates, round_half_up, to_date_str
from solunar.models.weather import (
    CARDINAL_DIRECTIONS,
    DEFAULT_WEATHER,
    Conditions,
    DailyAggregate,
    PressureTrend,
    WeatherInfo,
)

DEFAULT_PRESSURE_HPA = 1013
PRESSURE_TREND_EPS = 1.0

# WMO weather interpretation codes, checked in priority order
_CODE_CATEGORIES: list[tuple[Conditions, frozenset[int]]] = [
    (Conditions.STORMY, frozenset({95, 96, 99})),
    (Conditions.SNOWY, frozenset({71, 73, 75, 77, 85, 86})),
    (Conditions.RAINY, frozenset({51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82})),
    (Conditions.FOGGY, frozenset({45, 48})),
    (Conditions.CLOUDY, frozenset({1, 2, 3})),
]


def codes_to_condition(codes: Iterable[int]) -> Conditions:
    """Highest-priority condition present among a day's weather codes."""
    present = {int(c) for c in codes}
    for condition, members in _CODE_CATEGORIES:
        if present & members:
            return condition
    return Conditions.CLEAR


def vector_mean_degrees(degrees: list[float]) -> float:
    """Circular mean of compass angles, in [0, 360)."""
    return float(circmean(degrees, high=360, low=0)) % 360


def degrees_to_cardinal(deg: float) -> str:
    return CARDINAL_DIRECTIONS[round_half_up(deg / 45) % 8]


def pressure_trend(
    current: float, previous: float | None, eps: float = PRESSURE_TREND_EPS
) -> PressureTrend:
    if previous is None:
        return PressureTrend.STEADY
    delta = current - previous
    if delta > eps:
        return PressureTrend.RISING
    if delta < -eps:
        return PressureTrend.FALLING
    return PressureTrend.STEADY


def _is_number(x: object) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool) and math.isfinite(x)


def _column(hourly: dict, name: str, idxs: list[int]) -> list[float]:
    values = hourly.get(name) or []
    return [values[i] for i in idxs if i < len(values) and _is_number(values[i])]


def aggregate_hourly(hourly: dict, start: date, end: date) -> list[DailyAggregate]:
    """Reduce an Open-Meteo hourly block to per-day aggregates.

    Timestamps are local (timezone=auto), so the date prefix is the local
    calendar day. Days in [start, end] without any samples are skipped.
    """
    buckets: dict[DateStr, list[int]] = {}
    for i, ts in enumerate(hourly.get("time") or []):
        buckets.setdefault(str(ts)[:10], []).append(i)

    out: list[DailyAggregate] = []
    for d in iter_dates(start, end):
        key = to_date_str(d)
        idxs = buckets.get(key)
        if not idxs:
            continue

        temps = _column(hourly, "temperature_2m", idxs)
        pressures = _column(hourly, "pressure_msl", idxs)
        winds = _column(hourly, "wind_speed_10m", idxs)
        dirs = _column(hourly, "wind_direction_10m", idxs)
        codes = _column(hourly, "weather_code", idxs)

        out.append(
            DailyAggregate(
                date=key,
                temp_high=round_half_up(max(temps)) if temps else 0,
                temp_low=round_half_up(min(temps)) if temps else 0,
                pressure=round_half_up(sum(pressures) / len(pressures)) if pressures else None,
                wind_speed=round_half_up(sum(winds) / len(winds)) if winds else 0,
                wind_direction=degrees_to_cardinal(vector_mean_degrees(dirs)) if dirs else "N",
                conditions=codes_to_condition(codes) if codes else Conditions.CLEAR,
            )
        )
    return out


def resolve_daily(aggregates: Iterable[DailyAggregate]) -> dict[DateStr, WeatherInfo]:
    """Chronological pass: fill missing pressure and derive day-over-day trend.

    The previous day's pressure carries across segment boundaries and across
    days with no data at all.
    """
    out: dict[DateStr, WeatherInfo] = {}
    prev_pressure: int | None = None
    for agg in sorted(aggregates, key=lambda a: a.date):
        if agg.pressure is not None:
            pressure = agg.pressure
        elif prev_pressure is not None:
            pressure = prev_pressure
        else:
            pressure = DEFAULT_PRESSURE_HPA
        out[agg.date] = WeatherInfo(
            temp_high=agg.temp_high,
            temp_low=agg.temp_low,
            pressure=pressure,
            pressure_trend=pressure_trend(pressure, prev_pressure),
            wind_speed=agg.wind_speed,
            wind_direction=agg.wind_direction,
            conditions=agg.conditions,
        )
        prev_pressure = pressure
    return out


def fill_missing_days(
    data: dict[DateStr, WeatherInfo], start: date, end: date
) -> dict[DateStr, WeatherInfo]:
    """Return a copy covering every date in [start, end].

    A missing day repeats the closest earlier day; with nothing earlier it
    gets DEFAULT_WEATHER.
    """
    out = dict(data)
    last: WeatherInfo | None = None
    for d in iter_dates(start, end):
        key = to_date_str(d)
        if key in out:
            last = out[key]
        else:
            out[key] = last if last is not None else DEFAULT_WEATHER
    return out
