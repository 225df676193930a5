"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from weather_unusualness import __version__
from weather_unusualness.config import get_settings
from weather_unusualness.errors import AnalysisError
from weather_unusualness.flows.analyze import SITE_DIR, analyze_today
from weather_unusualness.renderers.unusualness import format_text_report
from weather_unusualness.schemas import AnalysisOptions, Location, Result, TemperatureUnit


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-unusualness",
        description="How statistically unusual is today's forecast high for this time of year?",
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

    # 'analyze' command - rate today's forecast high
    analyze_parser = subparsers.add_parser("analyze", help="Rate today's forecast high")
    analyze_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    analyze_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    analyze_parser.add_argument(
        "--unit",
        choices=[u.value for u in TemperatureUnit],
        default=None,
        help="Temperature unit (default: from settings)",
    )
    analyze_parser.add_argument(
        "--window-days",
        type=int,
        default=None,
        help="Half-width of the date window in days (default: 5)",
    )
    analyze_parser.add_argument(
        "--years",
        type=int,
        default=None,
        help="Number of complete past years to compare against (default: 30)",
    )
    analyze_parser.add_argument(
        "--no-site",
        action="store_true",
        help="Print the report only, skip writing the HTML page",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - serve generated page locally
    serve_parser = subparsers.add_parser("serve", help="Serve the generated page locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def resolve_params(args: argparse.Namespace) -> dict[str, Any]:
    """Merge CLI overrides onto settings into ``analyze_today`` keyword arguments."""
    settings = get_settings()
    return {
        "lat": settings.lat if args.lat is None else args.lat,
        "lon": settings.lon if args.lon is None else args.lon,
        "unit": TemperatureUnit(args.unit or settings.temperature_unit),
        "window_days": settings.window_days if args.window_days is None else args.window_days,
        "history_years": settings.history_years if args.years is None else args.years,
        "min_sample_size": settings.min_sample_size,
        "write_html": not args.no_site,
    }


def run_analysis(args: argparse.Namespace) -> Result:
    """Run one analysis with CLI overrides applied to settings."""
    params = resolve_params(args)

    try:
        summary = analyze_today(**params)
    except AnalysisError as exc:
        return Result(
            success=False,
            message="",
            data=exc.to_dict(),
            error=f"Failed to get weather analysis: {exc.message}",
        )

    report = format_text_report(summary.pop("result"), params["unit"])
    return Result(success=True, message=report, data=summary)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    params = resolve_params(args)
    lat, lon = params["lat"], params["lon"]
    try:
        Location(lat=lat, lon=lon)
    except ValidationError as exc:
        print(f"Error: invalid coordinates ({lat}, {lon}): {exc}", file=sys.stderr)
        return 2
    try:
        AnalysisOptions(window_days=params["window_days"], history_years=params["history_years"])
    except ValidationError as exc:
        print(f"Error: invalid window or history length: {exc}", file=sys.stderr)
        return 2

    result = run_analysis(args)
    if result.success:
        print(result.message)
        output = (result.data or {}).get("output")
        if output:
            print(f"\nPage written to {output}")
        return 0
    else:
        print(result.error, file=sys.stderr)
        return 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"Unit: {settings.temperature_unit}")
    print(f"Window: +/-{settings.window_days} days")
    print(f"History: {settings.history_years} years")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the generated page locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(SITE_DIR)

    if not site_dir.exists():
        print(
            "No site directory found. Run 'weather-unusualness analyze' first.",
            file=sys.stderr,
        )
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "analyze": cmd_analyze,
        "info": cmd_info,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
