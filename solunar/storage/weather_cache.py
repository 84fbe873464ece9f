"""Per-location daily weather cache backends."""

import sqlite3
from pathlib import Path
from typing import Protocol

from solunar.models.forecast import Location
from solunar.models.weather import WeatherCacheEntry
from solunar.storage.database import open_database

CACHE_PREFIX = "weather_daily_"


def cache_key(location: Location) -> str:
    """Key for a location rounded to two decimal degrees (~1 km)."""
    return f"{CACHE_PREFIX}{location.latitude:.2f}_{location.longitude:.2f}"


class WeatherCache(Protocol):
    def get(self, key: str) -> WeatherCacheEntry | None: ...

    def set(self, key: str, entry: WeatherCacheEntry) -> None: ...

    def purge_except_key(self, key: str) -> int: ...


class InMemoryWeatherCache:
    def __init__(self) -> None:
        self._entries: dict[str, WeatherCacheEntry] = {}

    def get(self, key: str) -> WeatherCacheEntry | None:
        return self._entries.get(key)

    def set(self, key: str, entry: WeatherCacheEntry) -> None:
        self._entries[key] = entry

    def purge_except_key(self, key: str) -> int:
        stale = [k for k in self._entries if k.startswith(CACHE_PREFIX) and k != key]
        for k in stale:
            del self._entries[k]
        return len(stale)

    def keys(self) -> list[str]:
        return sorted(self._entries)


class SqliteWeatherCache:
    """Cache rows in the weather_cache table; values are entry JSON."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @classmethod
    def open(cls, db_path: str | Path) -> "SqliteWeatherCache":
        return cls(open_database(db_path))

    def close(self) -> None:
        self.conn.close()

    def get(self, key: str) -> WeatherCacheEntry | None:
        row = self.conn.execute(
            "SELECT value FROM weather_cache WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return WeatherCacheEntry.from_json(row[0])

    def set(self, key: str, entry: WeatherCacheEntry) -> None:
        self.conn.execute(
            "INSERT INTO weather_cache (key, value, updated_at) "
            "VALUES (?, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
            "updated_at = CURRENT_TIMESTAMP",
            (key, entry.to_json()),
        )
        self.conn.commit()

    def purge_except_key(self, key: str) -> int:
        cursor = self.conn.execute(
            "DELETE FROM weather_cache WHERE key LIKE ? AND key != ?",
            (f"{CACHE_PREFIX}%", key),
        )
        self.conn.commit()
        return cursor.rowcount

    def purge_all(self) -> int:
        cursor = self.conn.execute(
            "DELETE FROM weather_cache WHERE key LIKE ?", (f"{CACHE_PREFIX}%",)
        )
        self.conn.commit()
        return cursor.rowcount

    def keys(self) -> list[str]:
        rows = self.conn.execute("SELECT key FROM weather_cache ORDER BY key").fetchall()
        return [r[0] for r in rows]
