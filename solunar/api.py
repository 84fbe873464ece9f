"""Forecast API: FastAPI backend serving monthly solunar forecasts as JSON."""

import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from solunar.config.loader import config_location, load_config
from solunar.config.schema import SolunarConfig
from solunar.models.forecast import Location, MonthlyForecast
from solunar.pipeline.forecast_pipeline import ForecastPipeline

CONFIG_PATH = Path(os.environ.get("SOLUNAR_CONFIG", "solunar.yaml"))

app = FastAPI(title="Solunar Forecast", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_config() -> SolunarConfig:
    return load_config(CONFIG_PATH)


async def _forecast(
    month: int, year: int, lat: float | None, lon: float | None
) -> MonthlyForecast:
    config = get_config()
    default = config_location(config)
    location = Location(
        latitude=lat if lat is not None else default.latitude,
        longitude=lon if lon is not None else default.longitude,
    )
    with ForecastPipeline.from_config(config) as pipeline:
        return await pipeline.compute_monthly_forecast(month, year, location)


@app.get("/api/forecast")
async def get_forecast(
    month: int = Query(ge=1, le=12),
    year: int = Query(ge=1900, le=2200),
    lat: float | None = Query(default=None, ge=-90, le=90),
    lon: float | None = Query(default=None, ge=-180, le=180),
):
    """Whole-month forecast: score, hourly curve, events, weather per day."""
    forecast = await _forecast(month, year, lat, lon)
    return forecast.to_dict()


@app.get("/api/forecast/{day}")
async def get_forecast_day(
    day: int,
    month: int = Query(ge=1, le=12),
    year: int = Query(ge=1900, le=2200),
    lat: float | None = Query(default=None, ge=-90, le=90),
    lon: float | None = Query(default=None, ge=-180, le=180),
):
    """One day of the month's forecast."""
    forecast = await _forecast(month, year, lat, lon)
    if not 1 <= day <= len(forecast.days):
        raise HTTPException(status_code=404, detail=f"No day {day} in {year}-{month:02d}")
    return forecast.days[day - 1].to_dict()


@app.get("/api/config")
def show_config():
    """Active configuration."""
    return get_config().model_dump(mode="json")
