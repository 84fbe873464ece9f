"""YAML config loader with runtime get/set."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from solunar.config.defaults import DEFAULT_LOCATION
from solunar.config.schema import SolunarConfig
from solunar.models.forecast import Location


def load_config(path: str | Path) -> SolunarConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty document yields the defaults. If no location
    is specified, injects DEFAULT_LOCATION.
    """
    path = Path(path)
    raw: dict = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("location"):
        raw["location"] = DEFAULT_LOCATION.model_dump()

    return SolunarConfig(**raw)


def config_hash(config: SolunarConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def config_location(config: SolunarConfig) -> Location:
    loc = config.location or DEFAULT_LOCATION
    return Location(latitude=loc.latitude, longitude=loc.longitude, name=loc.name)


def get_config_value(config: SolunarConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'scoring.alignment_bonus_cap'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if not isinstance(obj, BaseModel) or part not in type(obj).model_fields:
            raise KeyError(f"Config key not found: {dotted_key}")
        obj = getattr(obj, part)
    return obj


def set_config_value(config: SolunarConfig, dotted_key: str, value: Any) -> SolunarConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new SolunarConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if target.get(part) is None:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return SolunarConfig(**data)
