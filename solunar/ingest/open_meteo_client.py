"""Open-Meteo hourly weather client with retry and rate limit handling."""

import asyncio
import logging
from datetime import date

import httpx

from solunar.config.schema import WeatherConfig
from solunar.models.common import to_date_str
from solunar.models.weather import WeatherSource

logger = logging.getLogger(__name__)

HOURLY_VARIABLES = (
    "temperature_2m",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
    "weather_code",
)


class WeatherSourceError(Exception):
    """Raised when a weather source answers without usable hourly data."""


class OpenMeteoClient:
    def __init__(self, config: WeatherConfig | None = None):
        config = config or WeatherConfig()
        self.base_urls = {
            WeatherSource.FORECAST: config.forecast_url,
            WeatherSource.ARCHIVE: config.archive_url,
            WeatherSource.SEASONAL: config.seasonal_url,
        }
        self.user_agent = config.user_agent
        self.timeout = config.timeout_seconds
        self.max_retries = config.max_retries
        self.retry_base_delay = config.retry_base_delay

    def build_params(
        self, latitude: float, longitude: float, start: date, end: date
    ) -> dict[str, str]:
        return {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "timezone": "auto",
            "start_date": to_date_str(start),
            "end_date": to_date_str(end),
            "temperature_unit": "celsius",
            "wind_speed_unit": "kmh",
            "timeformat": "iso8601",
            "hourly": ",".join(HOURLY_VARIABLES),
        }

    async def get_hourly(
        self,
        source: WeatherSource,
        latitude: float,
        longitude: float,
        start: date,
        end: date,
    ) -> dict:
        """Fetch the hourly block for an inclusive date range.

        Retries on 503/429 and transport errors with exponential backoff.
        Raises httpx.HTTPStatusError on a non-success status and
        WeatherSourceError when the hourly block is missing or empty.
        """
        url = self.base_urls[source]
        params = self.build_params(latitude, longitude, start, end)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            for attempt in range(self.max_retries + 1):
                try:
                    resp = await client.get(url, params=params, headers=headers)
                    if resp.status_code in (503, 429) and attempt < self.max_retries:
                        delay = self.retry_base_delay * (2**attempt)
                        logger.warning(
                            "Open-Meteo %s returned %d, retrying in %.1fs (attempt %d/%d)",
                            source, resp.status_code, delay, attempt + 1, self.max_retries,
                        )
                        await asyncio.sleep(delay)
                        continue
                    resp.raise_for_status()
                    return _extract_hourly(resp.json(), source)
                except httpx.RequestError as e:
                    if attempt < self.max_retries:
                        delay = self.retry_base_delay * (2**attempt)
                        logger.warning(
                            "Open-Meteo %s request error, retrying in %.1fs: %s",
                            source, delay, e,
                        )
                        await asyncio.sleep(delay)
                        continue
                    raise


def _extract_hourly(payload: dict, source: WeatherSource) -> dict:
    hourly = payload.get("hourly") if isinstance(payload, dict) else None
    if not isinstance(hourly, dict) or not hourly.get("time"):
        raise WeatherSourceError(f"{source} returned no hourly data")
    return hourly
