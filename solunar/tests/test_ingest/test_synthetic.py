"""Tests for deterministic offline weather."""

import asyncio
from datetime import date

import pytest

from solunar.ingest.synthetic import (
    LinearCongruentialGenerator,
    SyntheticWeatherSource,
    synthetic_weather,
    weather_seed,
)
from solunar.models.forecast import Location
from solunar.models.weather import CARDINAL_DIRECTIONS, Conditions


class TestLinearCongruentialGenerator:
    def test_first_value_for_zero_seed(self):
        assert LinearCongruentialGenerator(0).next_float() == pytest.approx(0.236068, abs=1e-6)

    def test_repeatable(self):
        a = LinearCongruentialGenerator(42)
        b = LinearCongruentialGenerator(42)
        assert [a.next_float() for _ in range(5)] == [b.next_float() for _ in range(5)]

    def test_unit_range(self):
        gen = LinearCongruentialGenerator(123456789)
        assert all(0.0 <= gen.next_float() <= 1.0 for _ in range(1000))


class TestSyntheticWeather:
    def test_seed_depends_on_date(self, novi_sad: Location):
        assert weather_seed(date(2025, 2, 1), novi_sad) != weather_seed(date(2025, 2, 2), novi_sad)

    def test_deterministic(self, novi_sad: Location):
        assert synthetic_weather(date(2025, 2, 14), novi_sad) == synthetic_weather(
            date(2025, 2, 14), novi_sad
        )

    def test_seasonal_bands(self, novi_sad: Location):
        for day in range(1, 29):
            winter = synthetic_weather(date(2025, 2, day), novi_sad)
            summer = synthetic_weather(date(2025, 7, day), novi_sad)
            assert 5 <= winter.temp_high <= 15
            assert 0 <= winter.temp_low <= 5
            assert 22 <= summer.temp_high <= 32
            assert 17 <= summer.temp_low <= 22

    def test_value_ranges(self, novi_sad: Location):
        for day in range(1, 31):
            w = synthetic_weather(date(2025, 4, day), novi_sad)
            assert 1005 <= w.pressure <= 1025
            assert 0 <= w.wind_speed <= 25
            assert w.wind_direction in CARDINAL_DIRECTIONS
            assert w.conditions in (Conditions.CLEAR, Conditions.CLOUDY)


class TestSyntheticWeatherSource:
    def test_covers_month(self, novi_sad: Location):
        data = asyncio.run(SyntheticWeatherSource().monthly_weather(2, 2024, novi_sad))
        assert len(data) == 29
        assert "2024-02-29" in data
