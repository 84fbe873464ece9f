"""Daily weather models and the persisted weather cache entry."""

import json
from dataclasses import asdict, dataclass, field
from enum import StrEnum

from solunar.models.common import DateStr

CARDINAL_DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class PressureTrend(StrEnum):
    RISING = "rising"
    FALLING = "falling"
    STEADY = "steady"


class Conditions(StrEnum):
    CLEAR = "Clear"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    SNOWY = "Snowy"
    FOGGY = "Foggy"
    STORMY = "Stormy"


class WeatherSource(StrEnum):
    ARCHIVE = "archive"
    FORECAST = "forecast"
    SEASONAL = "seasonal"


@dataclass(frozen=True)
class WeatherInfo:
    temp_high: int  # °C
    temp_low: int  # °C
    pressure: int  # hPa, mean sea level
    pressure_trend: PressureTrend
    wind_speed: int  # km/h
    wind_direction: str  # one of CARDINAL_DIRECTIONS
    conditions: Conditions

    def to_dict(self) -> dict:
        return {
            "temp_high": self.temp_high,
            "temp_low": self.temp_low,
            "pressure": self.pressure,
            "pressure_trend": self.pressure_trend.value,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "conditions": self.conditions.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeatherInfo":
        return cls(
            temp_high=int(data["temp_high"]),
            temp_low=int(data["temp_low"]),
            pressure=int(data["pressure"]),
            pressure_trend=PressureTrend(data["pressure_trend"]),
            wind_speed=int(data["wind_speed"]),
            wind_direction=str(data["wind_direction"]),
            conditions=Conditions(data["conditions"]),
        )


DEFAULT_WEATHER = WeatherInfo(
    temp_high=20,
    temp_low=12,
    pressure=1013,
    pressure_trend=PressureTrend.STEADY,
    wind_speed=5,
    wind_direction="NW",
    conditions=Conditions.CLEAR,
)


@dataclass(frozen=True)
class DailyAggregate:
    """One day of hourly samples reduced to daily values.

    Pressure is None when the day had no pressure samples; trend is
    resolved later in a chronological pass across all segments.
    """

    date: DateStr
    temp_high: int
    temp_low: int
    pressure: int | None
    wind_speed: int
    wind_direction: str
    conditions: Conditions


@dataclass(frozen=True)
class WeatherCacheEntry:
    fetched_at: str  # ISO-8601 with offset
    range_start: DateStr
    range_end: DateStr
    data: dict[DateStr, WeatherInfo] = field(default_factory=dict)

    def to_json(self) -> str:
        payload = asdict(self)
        payload["data"] = {k: v.to_dict() for k, v in self.data.items()}
        return json.dumps(payload)

    @classmethod
    def from_json(cls, raw: str) -> "WeatherCacheEntry":
        payload = json.loads(raw)
        return cls(
            fetched_at=payload["fetched_at"],
            range_start=payload["range_start"],
            range_end=payload["range_end"],
            data={
                k: WeatherInfo.from_dict(v) for k, v in payload["data"].items()
            },
        )
