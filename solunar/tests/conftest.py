"""Shared test fixtures."""

from collections.abc import Callable
from datetime import UTC, date, datetime
from pathlib import Path

import pytest
import yaml

from solunar.config.schema import (
    CacheBackend,
    CacheConfig,
    SolunarConfig,
    WeatherConfig,
    WeatherSourceMode,
)
from solunar.models.common import iter_dates, to_date_str
from solunar.models.forecast import Location


@pytest.fixture
def novi_sad() -> Location:
    return Location(latitude=45.2671, longitude=19.8335, name="Novi Sad")


@pytest.fixture
def offline_config() -> SolunarConfig:
    """Config that never touches the network or the disk."""
    return SolunarConfig(
        weather=WeatherConfig(source=WeatherSourceMode.SYNTHETIC),
        cache=CacheConfig(backend=CacheBackend.MEMORY),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "location": {"name": "Lake Test", "latitude": 46.1, "longitude": 20.2},
        "weather": {"short_term_days": 14},
        "scoring": {"alignment_bonus_cap": 20},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


class FakeClock:
    """Settable clock for cache-expiry tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 10, 19, 9, 30, tzinfo=UTC))


@pytest.fixture
def hourly_factory() -> Callable[..., dict]:
    """Build an Open-Meteo style hourly block covering [start, end].

    pressure_for maps a date to that day's constant pressure.
    """

    def make(
        start: date,
        end: date,
        temp: float = 15.0,
        pressure_for: Callable[[date], float] = lambda d: 1013.0,
        wind: float = 10.0,
        direction: float = 270.0,
        code: int = 0,
    ) -> dict:
        block: dict[str, list] = {
            "time": [],
            "temperature_2m": [],
            "pressure_msl": [],
            "wind_speed_10m": [],
            "wind_direction_10m": [],
            "weather_code": [],
        }
        for d in iter_dates(start, end):
            for h in range(24):
                block["time"].append(f"{to_date_str(d)}T{h:02d}:00")
                block["temperature_2m"].append(temp)
                block["pressure_msl"].append(pressure_for(d))
                block["wind_speed_10m"].append(wind)
                block["wind_direction_10m"].append(direction)
                block["weather_code"].append(code)
        return block

    return make
