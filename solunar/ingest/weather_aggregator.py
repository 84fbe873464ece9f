"""Weather aggregator: segmented Open-Meteo fetch with a once-per-day cache."""

import asyncio
import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta

from solunar.config.schema import WeatherConfig
from solunar.ingest.aggregation import aggregate_hourly, fill_missing_days, resolve_daily
from solunar.ingest.open_meteo_client import OpenMeteoClient
from solunar.ingest.segments import Segment, plan_segments
from solunar.ingest.staleness import cache_age_hours, is_cache_valid_for_today
from solunar.models.common import DateStr, iter_dates, local_now, month_bounds, to_date_str
from solunar.models.forecast import Location
from solunar.models.weather import DailyAggregate, WeatherCacheEntry, WeatherInfo
from solunar.storage.weather_cache import InMemoryWeatherCache, WeatherCache, cache_key

logger = logging.getLogger(__name__)


class WeatherAggregator:
    def __init__(
        self,
        client: OpenMeteoClient,
        cache: WeatherCache | None = None,
        config: WeatherConfig | None = None,
        clock: Callable[[], datetime] = local_now,
    ):
        self.client = client
        self.cache = cache if cache is not None else InMemoryWeatherCache()
        self.config = config or WeatherConfig()
        self.clock = clock

    async def daily_weather(self, location: Location) -> dict[DateStr, WeatherInfo]:
        """Rolling window of daily weather around today for a location.

        Served from cache when it was fetched today; otherwise fetched from
        all sources, gap-filled and written back.
        """
        now = self.clock()
        today = now.date()
        key = cache_key(location)

        cached = self._read_cache(key)
        if cached is not None:
            if is_cache_valid_for_today(cached.fetched_at, now):
                logger.debug("Weather cache hit for %s", key)
                return dict(cached.data)
            logger.info(
                "Weather cache for %s is %.1fh old, refreshing",
                key, cache_age_hours(cached.fetched_at, now),
            )

        start = today - timedelta(days=self.config.past_days)
        end = today + timedelta(days=self.config.future_days)
        data = await self.fetch_range(location, start, end, today)

        entry = WeatherCacheEntry(
            fetched_at=now.isoformat(),
            range_start=to_date_str(start),
            range_end=to_date_str(end),
            data=data,
        )
        self._write_cache(key, entry)
        return data

    async def monthly_weather(
        self, month: int, year: int, location: Location
    ) -> dict[DateStr, WeatherInfo]:
        """Slice the cached window to one month, gap-filling days outside it."""
        window = await self.daily_weather(location)
        first, last = month_bounds(year, month)
        month_data = {}
        for d in iter_dates(first, last):
            key = to_date_str(d)
            if key in window:
                month_data[key] = window[key]
        return fill_missing_days(month_data, first, last)

    async def fetch_range(
        self, location: Location, start: date, end: date, today: date
    ) -> dict[DateStr, WeatherInfo]:
        """Fetch every segment concurrently and merge them gap-free."""
        segments = plan_segments(start, end, today, self.config.short_term_days)
        logger.info(
            "Fetching weather %s..%s in %d segments for (%.4f, %.4f)",
            start, end, len(segments), location.latitude, location.longitude,
        )
        results = await asyncio.gather(
            *(self._fetch_segment(seg, location) for seg in segments)
        )

        aggregates: list[DailyAggregate] = []
        for seg_aggregates in results:
            aggregates.extend(seg_aggregates)

        return fill_missing_days(resolve_daily(aggregates), start, end)

    async def _fetch_segment(
        self, segment: Segment, location: Location
    ) -> list[DailyAggregate]:
        try:
            hourly = await self.client.get_hourly(
                segment.source,
                location.latitude,
                location.longitude,
                segment.start,
                segment.end,
            )
            days = aggregate_hourly(hourly, segment.start, segment.end)
        except Exception:
            logger.exception(
                "Failed to fetch %s segment %s..%s",
                segment.source, segment.start, segment.end,
            )
            return []
        logger.debug(
            "%s segment %s..%s yielded %d days",
            segment.source, segment.start, segment.end, len(days),
        )
        return days

    def _read_cache(self, key: str) -> WeatherCacheEntry | None:
        try:
            return self.cache.get(key)
        except Exception:
            logger.exception("Failed to read weather cache %s", key)
            return None

    def _write_cache(self, key: str, entry: WeatherCacheEntry) -> None:
        try:
            self.cache.set(key, entry)
        except Exception:
            logger.exception("Failed to save weather cache %s", key)
            return
        try:
            purged = self.cache.purge_except_key(key)
            if purged:
                logger.info("Purged %d weather cache entries for other locations", purged)
        except Exception:
            logger.exception("Weather cache cleanup failed")
