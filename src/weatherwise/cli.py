"""
Command-line interface for weatherwise.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

import requests

from weatherwise import __version__
from weatherwise.config import get_settings
from weatherwise.datasources.openweather import (
    LocationNotFoundError,
    geocode_city,
)
from weatherwise.flows.report import build_report
from weatherwise.schemas import Location, WeatherReport
from weatherwise.services.http import WeatherServiceError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weatherwise",
        description="What to wear today: recommendations, impact score and forecast",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # Shared location options for 'now' and 'forecast'
    location_parser = argparse.ArgumentParser(add_help=False)
    location_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    location_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    location_parser.add_argument("--city", type=str, default=None, help="City name to geocode")
    location_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    subparsers.add_parser(
        "now", parents=[location_parser], help="Current recommendation and impact score"
    )

    forecast_parser = subparsers.add_parser(
        "forecast", parents=[location_parser], help="Rest-of-today and 7-day forecast"
    )
    forecast_parser.add_argument("--hourly", action="store_true", help="Only the hourly window")
    forecast_parser.add_argument("--daily", action="store_true", help="Only the daily window")

    return parser


def resolve_location(args: argparse.Namespace) -> Location:
    """Pick the location from --city, --lat/--lon, or the configured default."""
    settings = get_settings()
    if args.city:
        return geocode_city(args.city, settings.openweather_api_key)
    lat = settings.lat if args.lat is None else args.lat
    lon = settings.lon if args.lon is None else args.lon
    return Location(lat=lat, lon=lon)


def _fmt(value: float | None, unit: str, digits: int = 0) -> str:
    if value is None:
        return "-"
    return f"{value:.{digits}f}{unit}"


def format_current(report: WeatherReport) -> str:
    """Plain-text rendering of the current conditions part of a report."""
    lines = [
        f"{report.location.label} • {report.generated_at:%A, %d %B %Y}",
        f"{report.icon} {report.summary}",
        report.recommendation,
    ]
    if report.insight:
        lines.append(f"  “{report.insight}”")
    lines.append(
        f"Temp {_fmt(report.temperature_c, '°C')} (feels {_fmt(report.feels_like_c, '°C')})"
        f" • Wind {_fmt(report.wind_speed_ms, ' m/s', 1)} • {report.raw_condition}"
    )
    lines.append(f"Impact: {report.impact_score}/100")
    if report.badges:
        lines.append("Badges: " + ", ".join(f"{b.text} [{b.tone}]" for b in report.badges))
    return "\n".join(lines)


def format_hourly(report: WeatherReport) -> str:
    """Plain-text rendering of the rest-of-today window."""
    if not report.hourly:
        return "No more hourly forecast for today."
    return "\n".join(
        f"{p.time:%H:%M}  {p.tag:<12} {_fmt(p.temperature_c, '°C'):>6}"
        f"  rain {_fmt(p.precipitation_probability, '%'):>4}"
        f"  wind {_fmt(p.wind_speed_kmh, ' km/h')}"
        for p in report.hourly
    )


def format_daily(report: WeatherReport) -> str:
    """Plain-text rendering of the 7-day window."""
    if not report.daily:
        return "No daily forecast available."
    return "\n".join(
        f"{p.day:%a %d.%m}  {p.tag:<12}"
        f" {_fmt(p.temperature_min_c, '°')} / {_fmt(p.temperature_max_c, '°')}"
        f"  rain {_fmt(p.precipitation_probability_max, '%')} {_fmt(p.precipitation_sum_mm, 'mm', 1)}"
        f"  wind {_fmt(p.wind_speed_max_kmh, ' km/h')}"
        for p in report.daily
    )


def _run_report(args: argparse.Namespace, *, include_forecast: bool) -> WeatherReport | None:
    """Resolve the location and run the flow; print errors and return None on failure."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings.model_dump(exclude={'openweather_api_key'})}")
    try:
        location = resolve_location(args)
        report, _cache = build_report(location, include_forecast=include_forecast)
    except (LocationNotFoundError, ValueError, WeatherServiceError, requests.RequestException) as exc:
        # ValueError covers a missing API key and out-of-range coordinates;
        # RequestException is a network failure left over after retries
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return report


def cmd_now(args: argparse.Namespace) -> int:
    """Handle the 'now' command."""
    report = _run_report(args, include_forecast=False)
    if report is None:
        return 1
    if args.json:
        print(report.model_dump_json(indent=2, exclude={"hourly", "daily"}))
    else:
        print(format_current(report))
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    report = _run_report(args, include_forecast=True)
    if report is None:
        return 1

    # Neither flag means both windows
    show_hourly = args.hourly or not args.daily
    show_daily = args.daily or not args.hourly

    if args.json:
        include = {"location", "generated_at"}
        if show_hourly:
            include.add("hourly")
        if show_daily:
            include.add("daily")
        print(report.model_dump_json(indent=2, include=include))
        return 0

    sections = []
    if show_hourly:
        sections.append("Today\n" + format_hourly(report))
    if show_daily:
        sections.append("Next 7 days\n" + format_daily(report))
    print("\n\n".join(sections))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default location: ({settings.lat}, {settings.lon})")
    print(f"API key configured: {bool(settings.openweather_api_key)}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "now": cmd_now,
        "forecast": cmd_forecast,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
