"""Fishing forecast models."""

from dataclasses import dataclass

from solunar.models.astro import MoonPhase, SolarLunarEvent
from solunar.models.weather import WeatherInfo


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    name: str | None = None


@dataclass(frozen=True)
class PeakWindow:
    kind_label: str  # "Major" or "Minor"
    window: str  # "5:10 AM – 7:10 AM (Major)"


@dataclass(frozen=True)
class DayScore:
    score: int
    hourly_activity: list[int]
    alignment_bonus: int
    peak_window: PeakWindow


@dataclass(frozen=True)
class FishingDay:
    day: int
    score: int
    moon_phase_name: MoonPhase
    moon_phase_value: float
    best_times: list[str]
    hourly_activity: list[int]
    events: list[SolarLunarEvent]
    weather: WeatherInfo

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "score": self.score,
            "moon_phase_name": self.moon_phase_name.value,
            "moon_phase_value": self.moon_phase_value,
            "best_times": list(self.best_times),
            "hourly_activity": list(self.hourly_activity),
            "events": [e.to_dict() for e in self.events],
            "weather": self.weather.to_dict(),
        }


@dataclass(frozen=True)
class MonthlyForecast:
    month: int
    year: int
    days: list[FishingDay]

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "days": [d.to_dict() for d in self.days],
        }
