"""
Command-line interface for daycast.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from daycast import __version__
from daycast.config import get_settings
from daycast.errors import ForecastError
from daycast.flows.forecast import forecast_flow
from daycast.logging_config import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="daycast",
        description="Day-partitioned hourly weather from forecast.io",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'forecast' command - fetch and print the day buckets
    forecast_parser = subparsers.add_parser("forecast", help="Fetch the forecast for a location")
    forecast_parser.add_argument(
        "location",
        nargs="?",
        default=None,
        help="latitude,longitude (default: DAYCAST_LOCATION)",
    )
    forecast_parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Number of days (default: DAYCAST_DAYS or 3)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def print_summary(summary: dict[str, Any]) -> None:
    """Print a forecast summary as plain text."""
    current = summary["current"]
    temp = "?" if current["temp_c"] is None else f"{current['temp_c']:.1f}°C"
    print(f"Location: {summary['location']}")
    print(f"Now: {current['desc'] or current['code']} {temp}")
    for day in summary["days"]:
        hours = f"{day['first']}-{day['last']}" if day["slots"] else "no data"
        print(f"  {day['date']}: {day['slots']:>2} slots ({hours}) {', '.join(day['codes'])}")


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    location = args.location or settings.location
    numdays = args.days if args.days is not None else settings.days

    if not location:
        print("Error: no location given and DAYCAST_LOCATION is not set", file=sys.stderr)
        return 1

    try:
        summary = forecast_flow(location, numdays)
    except ForecastError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(summary)
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"API key: {settings.masked_api_key}")
    print(f"Language: {settings.forecast_lang}")
    print(f"Timeout: {settings.forecast_timeout:g}s")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    setup_logging("DEBUG" if args.debug or settings.debug else "WARNING")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "forecast": cmd_forecast,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
