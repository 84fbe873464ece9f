"""Initial schema: key-value weather cache."""

import sqlite3

DDL = [
    # One row per cached location; value is a JSON WeatherCacheEntry
    """
    CREATE TABLE IF NOT EXISTS weather_cache (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
