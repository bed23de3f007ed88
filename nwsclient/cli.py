"""CLI entry point for the NWS point client."""

import argparse
import dataclasses
import json
import logging
from datetime import datetime
from typing import Any

from nwsclient.config.loader import load_config
from nwsclient.config.schema import ClientConfig
from nwsclient.errors import NwsError
from nwsclient.ingest.staleness import forecast_age_hours, is_forecast_stale
from nwsclient.session import Session

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nwsclient",
        description="Fetch alerts, forecasts and observations for a point",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--lat", type=float, help="Latitude (decimal degrees)")
    parser.add_argument("--lon", type=float, help="Longitude (decimal degrees)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("point", help="Show the resolved point and gridpoint")
    sub.add_parser("stations", help="List nearby observation stations")
    sub.add_parser("alerts", help="Fetch active alerts")

    forecast_p = sub.add_parser("forecast", help="Fetch the forecast")
    forecast_p.add_argument(
        "--hourly", action="store_true", help="Hourly instead of semidaily"
    )

    obs_p = sub.add_parser("observation", help="Fetch the latest observation")
    obs_p.add_argument(
        "--station", default=None, help="Station id (default: nearest)"
    )

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)

    coords = _coordinates(config, args)
    if coords is None:
        print("Error: --lat and --lon are required (or set location in config)")
        return 1

    try:
        session = Session.from_config(config, *coords)
        if args.command == "point":
            _emit({"point": session.point, "gridpoint": session.gridpoint})
        elif args.command == "stations":
            _emit({
                "default_station_id": session.default_station_id,
                "stations": session.stations,
            })
        elif args.command == "alerts":
            _emit(session.update_alerts())
        elif args.command == "forecast":
            if args.hourly:
                forecast = session.update_hourly_forecast()
            else:
                forecast = session.update_semidaily_forecast()
            if is_forecast_stale(forecast, config.forecast_max_age_minutes):
                logger.warning(
                    "Forecast was last updated %.1f hours ago",
                    forecast_age_hours(forecast),
                )
            _emit(forecast)
        elif args.command == "observation":
            if args.station:
                _emit(session.update_observation(args.station))
            else:
                _emit(session.update_default_observation())
        else:
            parser.print_help()
            return 1
    except NwsError as e:
        logger.error("%s failed (%s): %s", args.command, e.kind, e)
        return 1
    return 0


def _coordinates(config: ClientConfig, args) -> tuple[float, float] | None:
    if args.lat is not None and args.lon is not None:
        return args.lat, args.lon
    if config.location is not None:
        return config.location.latitude, config.location.longitude
    return None


def _cmd_config(config: ClientConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1


def _jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, dict):
        return {k: _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, list | tuple):
        return [_jsonable(v) for v in obj]
    if isinstance(obj, datetime):
        return obj.isoformat()
    return obj


def _emit(obj: Any) -> None:
    print(json.dumps(_jsonable(obj), indent=2))
