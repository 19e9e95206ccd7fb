"""CLI interface for the sysinfo-influxdb collector."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import Settings
from .core import collect_series
from .errors import SinkError
from .formatters import FORMATS
from .logging import configure_logging
from .reporter import report

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser.

    ``-h`` selects the InfluxDB host, so help is only available as ``--help``.
    Flags left unset fall back to environment variables, then built-in defaults.
    """
    parser = argparse.ArgumentParser(
        prog="sysinfo-influxdb",
        description="Collect host metrics once and print them or write them to InfluxDB",
        add_help=False,
    )

    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Print the version number and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Display series even when writing to a database, and debug logs",
    )
    parser.add_argument(
        "--prefix",
        "-P",
        default=None,
        help="Series name prefix (default: $SYSINFO_PREFIX or host name)",
    )

    influx = parser.add_argument_group("InfluxDB")
    influx.add_argument(
        "--host",
        "-h",
        default=None,
        help="Connect to host:port (default: $INFLUXDB_HOST or localhost:8086)",
    )
    influx.add_argument(
        "--username",
        "-u",
        default=None,
        help="User for login (default: $INFLUXDB_USERNAME or root)",
    )
    influx.add_argument(
        "--password",
        "-p",
        default=None,
        help="Password to use when connecting (default: $INFLUXDB_PASSWORD or root)",
    )
    influx.add_argument(
        "--database",
        "-d",
        default=None,
        help="Database to write to; nothing is written when empty (default: $INFLUXDB_DATABASE)",
    )

    view = parser.add_argument_group("output")
    view.add_argument(
        "--format",
        "-f",
        choices=sorted(FORMATS),
        default=None,
        help="Text view format (default: table)",
    )
    view.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Append the text view to this file (default: stdout)",
    )

    return parser


def run(settings: Settings) -> int:
    """Collect once and report. Returns the process exit code."""
    series = collect_series(settings.prefix)

    try:
        report(
            series,
            settings.sink,
            settings.verbose,
            fmt=settings.format,
            output=settings.output,
        )
    except SinkError as e:
        log.error("sink_failed: %s", e, extra={"sink": e.host, "code": type(e).__name__})
        return 1

    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        sys.stdout.write(f"Version: {__version__}\n")
        raise SystemExit(0)

    settings = Settings.from_args(args)
    configure_logging(level="DEBUG" if settings.verbose else None)

    raise SystemExit(run(settings))
