"""SQLite connection manager with WAL mode and numbered migrations."""

import importlib
import pkgutil
import sqlite3
from pathlib import Path

from solunar.storage import migrations

IN_MEMORY = ":memory:"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a SQLite connection in WAL mode, creating the parent directory."""
    if str(db_path) != IN_MEMORY:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def open_database(db_path: str | Path) -> sqlite3.Connection:
    """Connect and bring the schema up to date."""
    conn = connect(db_path)
    run_migrations(conn)
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending migrations in name order. Returns the names applied."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    applied = {
        row[0] for row in conn.execute("SELECT version FROM schema_versions")
    }
    newly_applied = []
    for name in _discover_migrations():
        if name in applied:
            continue
        mod = importlib.import_module(f"{migrations.__name__}.{name}")
        mod.up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
        newly_applied.append(name)
    return newly_applied


def _discover_migrations() -> list[str]:
    """Migration modules are named v###_<description>."""
    names = [
        info.name
        for info in pkgutil.iter_modules(migrations.__path__)
        if info.name.startswith("v") and info.name[1:4].isdigit()
    ]
    return sorted(names)
