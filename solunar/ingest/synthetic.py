"""Deterministic offline weather for demos and tests without network access."""

import math
from datetime import date

from solunar.models.common import DateStr, iter_dates, month_bounds, to_date_str
from solunar.models.forecast import Location
from solunar.models.weather import (
    CARDINAL_DIRECTIONS,
    Conditions,
    PressureTrend,
    WeatherInfo,
)

WINTER_MONTHS = frozenset({1, 2, 3, 11, 12})


class LinearCongruentialGenerator:
    """Numerical Recipes LCG over 32-bit state, yielding floats in [0, 1]."""

    MULTIPLIER = 1664525
    INCREMENT = 1013904223
    MODULUS = 2**32

    def __init__(self, seed: int):
        self.state = seed % self.MODULUS

    def next_float(self) -> float:
        self.state = (self.MULTIPLIER * self.state + self.INCREMENT) % self.MODULUS
        return self.state / 0xFFFFFFFF


def weather_seed(d: date, location: Location) -> int:
    day_number = d.year * 10000 + d.month * 100 + d.day
    lat_part = math.floor((location.latitude + 90) * 1000)
    lon_part = math.floor((location.longitude + 180) * 1000)
    return day_number ^ lat_part ^ lon_part


def synthetic_weather(d: date, location: Location) -> WeatherInfo:
    rnd = LinearCongruentialGenerator(weather_seed(d, location)).next_float
    base_temp = 5 if d.month in WINTER_MONTHS else 22

    t = rnd()
    if t > 0.66:
        trend = PressureTrend.RISING
    elif t > 0.33:
        trend = PressureTrend.FALLING
    else:
        trend = PressureTrend.STEADY

    temp_high = math.floor(base_temp + rnd() * 10)
    temp_low = math.floor(base_temp - 5 + rnd() * 5)
    pressure = math.floor(1005 + rnd() * 20)
    wind_speed = math.floor(rnd() * 25)
    wind_direction = CARDINAL_DIRECTIONS[min(7, math.floor(rnd() * 8))]
    if rnd() > 0.7:
        conditions = Conditions.CLOUDY
    elif rnd() > 0.4:
        conditions = Conditions.CLEAR
    else:
        conditions = Conditions.CLOUDY

    return WeatherInfo(
        temp_high=temp_high,
        temp_low=temp_low,
        pressure=pressure,
        pressure_trend=trend,
        wind_speed=wind_speed,
        wind_direction=wind_direction,
        conditions=conditions,
    )


class SyntheticWeatherSource:
    """Drop-in replacement for WeatherAggregator when running offline."""

    async def monthly_weather(
        self, month: int, year: int, location: Location
    ) -> dict[DateStr, WeatherInfo]:
        first, last = month_bounds(year, month)
        return {
            to_date_str(d): synthetic_weather(d, location)
            for d in iter_dates(first, last)
        }
