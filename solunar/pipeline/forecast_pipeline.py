"""Forecast pipeline: assembles a MonthlyForecast for one location."""

import logging
from datetime import date
from typing import Protocol

from solunar.astro.calculator import compute_astro_day
from solunar.config.schema import (
    CacheBackend,
    SolunarConfig,
    WeatherSourceMode,
)
from solunar.ingest.aggregation import fill_missing_days
from solunar.ingest.open_meteo_client import OpenMeteoClient
from solunar.ingest.synthetic import SyntheticWeatherSource
from solunar.ingest.weather_aggregator import WeatherAggregator
from solunar.models.astro import AstroDay, EventKind, SolarLunarEvent
from solunar.models.common import DateStr, days_in_month, month_bounds, to_date_str
from solunar.models.forecast import (
    FishingDay,
    Location,
    MonthlyForecast,
    PeakWindow,
)
from solunar.models.weather import DEFAULT_WEATHER, WeatherInfo
from solunar.scoring.scorer import AlignmentScorer
from solunar.storage.weather_cache import InMemoryWeatherCache, SqliteWeatherCache

logger = logging.getLogger(__name__)


class WeatherProvider(Protocol):
    async def monthly_weather(
        self, month: int, year: int, location: Location
    ) -> dict[DateStr, WeatherInfo]: ...


def build_events(astro: AstroDay, peak: PeakWindow) -> list[SolarLunarEvent]:
    return [
        SolarLunarEvent(EventKind.SUNRISE, astro.sunrise, "Sunrise"),
        SolarLunarEvent(EventKind.SUNSET, astro.sunset, "Sunset"),
        SolarLunarEvent(EventKind.MOONRISE, astro.moonrise, "Moonrise"),
        SolarLunarEvent(EventKind.MOONSET, astro.moonset, "Moonset"),
        SolarLunarEvent(EventKind.MAJOR, astro.majors[0], "Major"),
        SolarLunarEvent(EventKind.MAJOR, astro.majors[1], "Major"),
        SolarLunarEvent(EventKind.MINOR, astro.minors[0], "Minor"),
        SolarLunarEvent(EventKind.MINOR, astro.minors[1], "Minor"),
        SolarLunarEvent(EventKind.PEAK_WINDOW, peak.window, "Peak Window"),
    ]


class ForecastPipeline:
    def __init__(self, weather: WeatherProvider, scorer: AlignmentScorer | None = None):
        self.weather = weather
        self.scorer = scorer or AlignmentScorer()
        self._closers: list = []

    @classmethod
    def from_config(cls, config: SolunarConfig) -> "ForecastPipeline":
        """Wire the weather provider and cache backend named in config."""
        closers = []
        weather: WeatherProvider
        if config.weather.source == WeatherSourceMode.SYNTHETIC:
            weather = SyntheticWeatherSource()
        else:
            if config.cache.backend == CacheBackend.SQLITE:
                cache = SqliteWeatherCache.open(config.cache.db_path)
                closers.append(cache.close)
            else:
                cache = InMemoryWeatherCache()
            weather = WeatherAggregator(
                OpenMeteoClient(config.weather), cache, config.weather
            )
        pipeline = cls(weather, AlignmentScorer(config.scoring))
        pipeline._closers = closers
        return pipeline

    def close(self) -> None:
        for close in self._closers:
            close()
        self._closers = []

    def __enter__(self) -> "ForecastPipeline":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    async def compute_monthly_forecast(
        self, month: int, year: int, location: Location
    ) -> MonthlyForecast:
        """Score every day of a month and attach its weather.

        Weather is fetched once for the whole month; any weather failure
        degrades to gap-filled defaults rather than raising.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be in 1..12, got {month}")

        weather = await self._month_weather(month, year, location)

        days = [
            self.build_day(date(year, month, d), location, weather)
            for d in range(1, days_in_month(year, month) + 1)
        ]
        logger.info(
            "Computed %d-%02d forecast for (%.4f, %.4f): %d days",
            year, month, location.latitude, location.longitude, len(days),
        )
        return MonthlyForecast(month=month, year=year, days=days)

    def build_day(
        self, d: date, location: Location, weather: dict[DateStr, WeatherInfo]
    ) -> FishingDay:
        astro = compute_astro_day(d, location)
        scored = self.scorer.score_day(astro)
        return FishingDay(
            day=d.day,
            score=scored.score,
            moon_phase_name=astro.phase_name,
            moon_phase_value=astro.phase,
            best_times=list(astro.majors),
            hourly_activity=scored.hourly_activity,
            events=build_events(astro, scored.peak_window),
            weather=weather.get(to_date_str(d), DEFAULT_WEATHER),
        )

    async def _month_weather(
        self, month: int, year: int, location: Location
    ) -> dict[DateStr, WeatherInfo]:
        try:
            weather = await self.weather.monthly_weather(month, year, location)
        except Exception:
            logger.exception("Weather provider failed for %d-%02d", year, month)
            weather = {}
        first, last = month_bounds(year, month)
        return fill_missing_days(weather, first, last)


async def compute_monthly_forecast(
    month: int,
    year: int,
    location: Location,
    config: SolunarConfig | None = None,
) -> MonthlyForecast:
    """Engine entry point: build a pipeline from config, run it, release it."""
    with ForecastPipeline.from_config(config or SolunarConfig()) as pipeline:
        return await pipeline.compute_monthly_forecast(month, year, location)
