"""Output formatters for monthly forecasts."""

import calendar
import json

from solunar.models.astro import EventKind
from solunar.models.forecast import FishingDay, MonthlyForecast

SPARK_CHARS = " ▁▂▃▄▅▆▇█"


def score_label(score: int) -> str:
    if score >= 85:
        return "Epic"
    if score >= 70:
        return "Good"
    if score >= 55:
        return "Fair"
    return "Slow"


def sparkline(values: list[int]) -> str:
    """One character per hour, scaled over the 0..100 activity range."""
    top = len(SPARK_CHARS) - 1
    return "".join(SPARK_CHARS[min(top, max(0, round(v / 100 * top)))] for v in values)


def _event_time(day: FishingDay, kind: EventKind) -> str:
    for e in day.events:
        if e.kind == kind:
            return e.time
    return "--:--"


def format_forecast_text(f: MonthlyForecast, location_name: str | None = None) -> str:
    """Plain text month table."""
    title = f"{calendar.month_name[f.month]} {f.year}"
    if location_name:
        title += f" | {location_name}"
    lines = [
        f"=== Solunar Forecast: {title} ===",
        f"{'Day':>3} {'Score':>5} {'':<4} {'Moon':<16} {'Sunrise':>7} {'Sunset':>7} "
        f"{'Majors':<11} {'Weather':<24}",
    ]
    for d in f.days:
        w = d.weather
        weather = (
            f"{w.temp_low}..{w.temp_high}C {w.pressure}hPa "
            f"{w.conditions.value}"
        )
        lines.append(
            f"{d.day:>3} {d.score:>5} {score_label(d.score):<4} "
            f"{d.moon_phase_name.value:<16} "
            f"{_event_time(d, EventKind.SUNRISE):>7} {_event_time(d, EventKind.SUNSET):>7} "
            f"{' '.join(d.best_times):<11} {weather:<24}"
        )
    best = max(f.days, key=lambda d: d.score)
    lines.append(f"Best day: {best.day} ({best.score}, {best.moon_phase_name.value})")
    return "\n".join(lines)


def format_day_text(d: FishingDay, month: int, year: int) -> str:
    """Detailed single-day view."""
    w = d.weather
    lines = [
        f"=== {year}-{month:02d}-{d.day:02d} | Score {d.score} ({score_label(d.score)}) ===",
        f"Moon: {d.moon_phase_name.value} ({d.moon_phase_value:.3f})",
        f"Best times: {', '.join(d.best_times)}",
        "Events:",
    ]
    for e in d.events:
        lines.append(f"  {e.label:<12} {e.time}")
    lines.append(f"Activity 00-23: {sparkline(d.hourly_activity)}")
    lines.append(f"  {' '.join(str(v) for v in d.hourly_activity)}")
    lines.append(
        f"Weather: {w.conditions.value}, {w.temp_low}..{w.temp_high}C, "
        f"{w.pressure}hPa {w.pressure_trend.value}, "
        f"wind {w.wind_speed}km/h {w.wind_direction}"
    )
    return "\n".join(lines)


def format_forecast_json(f: MonthlyForecast) -> str:
    """JSON forecast for programmatic consumption."""
    return json.dumps(f.to_dict(), indent=2, ensure_ascii=False)
