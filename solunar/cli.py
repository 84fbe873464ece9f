"""CLI entry point for the solunar forecast engine."""

import argparse
import asyncio
import logging
from datetime import date

from solunar.config.loader import (
    config_hash,
    config_location,
    get_config_value,
    load_config,
    set_config_value,
)
from solunar.config.schema import CacheBackend, SolunarConfig
from solunar.models.forecast import Location
from solunar.pipeline.forecast_pipeline import ForecastPipeline
from solunar.reporting.formatters import (
    format_day_text,
    format_forecast_json,
    format_forecast_text,
)
from solunar.storage.weather_cache import SqliteWeatherCache

DEFAULT_CONFIG = "solunar.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="solunar",
        description="Solunar fishing forecast engine",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite cache path (overrides config)")
    parser.add_argument(
        "--offline", action="store_true", help="Use synthetic weather, no network"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Forecast a whole month")
    _add_month_args(fc_p)
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    # day
    day_p = sub.add_parser("day", help="Show one day in detail")
    day_p.add_argument("day", type=int, help="Day of month")
    _add_month_args(day_p)

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # cache
    cache_p = sub.add_parser("cache", help="Weather cache operations")
    cache_sub = cache_p.add_subparsers(dest="cache_command")
    cache_sub.add_parser("show", help="List cached locations")
    cache_sub.add_parser("purge", help="Drop all cached weather")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = set_config_value(config, "cache.db_path", args.db)
    if args.offline:
        config = set_config_value(config, "weather.source", "synthetic")

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "day":
        return _cmd_day(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "cache":
        return _cmd_cache(config, args)
    else:
        parser.print_help()
        return 1


def _add_month_args(p: argparse.ArgumentParser) -> None:
    today = date.today()
    p.add_argument("--month", type=int, default=today.month, choices=range(1, 13))
    p.add_argument("--year", type=int, default=today.year)
    p.add_argument("--lat", type=float, default=None, help="Latitude override")
    p.add_argument("--lon", type=float, default=None, help="Longitude override")


def _resolve_location(config: SolunarConfig, args) -> Location:
    loc = config_location(config)
    if args.lat is None and args.lon is None:
        return loc
    return Location(
        latitude=args.lat if args.lat is not None else loc.latitude,
        longitude=args.lon if args.lon is not None else loc.longitude,
    )


def _run_forecast(config: SolunarConfig, args):
    location = _resolve_location(config, args)
    with ForecastPipeline.from_config(config) as pipeline:
        forecast = asyncio.run(
            pipeline.compute_monthly_forecast(args.month, args.year, location)
        )
    return forecast, location


def _cmd_forecast(config, args) -> int:
    forecast, location = _run_forecast(config, args)
    if args.json:
        print(format_forecast_json(forecast))
    else:
        label = location.name or f"{location.latitude:.4f}, {location.longitude:.4f}"
        print(format_forecast_text(forecast, label))
    return 0


def _cmd_day(config, args) -> int:
    forecast, _ = _run_forecast(config, args)
    if not 1 <= args.day <= len(forecast.days):
        print(f"Error: day must be in 1..{len(forecast.days)}")
        return 1
    print(format_day_text(forecast.days[args.day - 1], forecast.month, forecast.year))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        print(f"Config hash: {config_hash(config)}")
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_cache(config, args) -> int:
    if config.cache.backend != CacheBackend.SQLITE:
        print(f"Cache backend is {config.cache.backend}; nothing is persisted")
        return 0
    cache = SqliteWeatherCache.open(config.cache.db_path)
    try:
        if args.cache_command == "show":
            keys = cache.keys()
            print(f"Cached locations: {len(keys)}")
            for k in keys:
                entry = cache.get(k)
                if entry is not None:
                    print(f"  {k}: {entry.range_start}..{entry.range_end} fetched {entry.fetched_at}")
            return 0
        elif args.cache_command == "purge":
            removed = cache.purge_all()
            print(f"Purged {removed} cache entries")
            return 0
        else:
            print("Use: cache show | cache purge")
            return 1
    finally:
        cache.close()
