"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class WeatherSourceMode(StrEnum):
    OPEN_METEO = "open-meteo"
    SYNTHETIC = "synthetic"  # offline, deterministic


class CacheBackend(StrEnum):
    SQLITE = "sqlite"
    MEMORY = "memory"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    name: str | None = None


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: WeatherSourceMode = WeatherSourceMode.OPEN_METEO
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    archive_url: str = "https://archive-api.open-meteo.com/v1/archive"
    seasonal_url: str = "https://seasonal-api.open-meteo.com/v1/seasonal"
    short_term_days: int = Field(default=16, ge=1, le=16)
    past_days: int = Field(default=7, ge=0)
    future_days: int = Field(default=60, ge=0)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    user_agent: str = "solunar-forecast/0.1.0"


class ScoringConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # base score
    phase_base: float = 50.0
    phase_amplitude: float = 40.0
    phase_bonus: float = 5.0
    phase_bonus_window: float = Field(default=0.05, ge=0.0, le=0.25)

    # solar-lunar alignment
    alignment_window_min: int = Field(default=90, ge=0)
    alignment_bonus_major: int = Field(default=10, ge=0)
    alignment_bonus_minor: int = Field(default=5, ge=0)
    alignment_bonus_cap: int = Field(default=20, ge=0)

    # hourly curve
    hourly_floor: float = 20.0
    twilight_window_min: int = Field(default=90, gt=0)
    twilight_amplitude: float = 25.0
    major_window_min: int = Field(default=120, gt=0)
    major_amplitude: float = 50.0
    major_aligned_boost: float = 35.0
    minor_window_min: int = Field(default=75, gt=0)
    minor_amplitude: float = 25.0
    minor_aligned_boost: float = 20.0

    # peak window half-widths
    major_half_window_min: int = Field(default=60, gt=0)
    minor_half_window_min: int = Field(default=30, gt=0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    backend: CacheBackend = CacheBackend.SQLITE
    db_path: str = "data/solunar.db"


class SolunarConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig | None = None
    weather: WeatherConfig = WeatherConfig()
    scoring: ScoringConfig = ScoringConfig()
    cache: CacheConfig = CacheConfig()
