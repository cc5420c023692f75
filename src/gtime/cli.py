"""Command-line interface for gtime."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from gtime import __version__
from gtime.config import get_settings, resolve_timezones
from gtime.core.renderer import RenderedLine, render_timezones
from gtime.errors import GtimeError
from gtime.utils.time import parse_time

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gtime",
        description="Convert a time into one or more timezones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gtime now -z America/New_York -z Europe/London
  gtime 1704110400 -z Asia/Tokyo                 # Unix timestamp
  gtime 2024-01-01T12:00:00Z -z Europe/Paris      # RFC3339
  gtime 2024-01-01T12:00:00+02:00 -z UTC          # ISO8601 with offset
  gtime "2024-01-01 12:00:00" -z Australia/Sydney # date and time in UTC
  gtime 15:30 -z America/Los_Angeles              # today, local time

Environment Variables:
  GTIME_TIMEZONES    # Comma-separated default timezones
  GTIME_CONFIG_FILE  # Config file path (default: per-user config directory)
  GTIME_LOG_LEVEL    # DEBUG, INFO, WARNING (default) or ERROR
  GTIME_LOG_FILE     # Write logs to this file instead of stderr

Note: -z arguments take precedence over GTIME_TIMEZONES, which takes
precedence over the 'timezones' array in the config file.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "time",
        metavar="TIME",
        help="Time to convert (timestamp, 'now', or datetime string)",
    )

    parser.add_argument(
        "-z",
        "--timezone",
        dest="timezones",
        action="append",
        default=None,
        metavar="TIMEZONE",
        help="Timezone to convert to (can be specified multiple times)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Send gtime log records to stderr, or to log_file when given."""
    package_logger = logging.getLogger("gtime")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main() -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    try:
        settings = get_settings()
        configure_logging("DEBUG" if args.verbose else settings.log_level, settings.log_file)
    except ValidationError as e:
        # Report the first problem only, named by its environment variable
        error = e.errors()[0]
        variable = "GTIME_" + "_".join(str(part) for part in error["loc"]).upper()
        print(f"Error: Invalid configuration: {variable}: {error['msg']}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot open log file: {e}", file=sys.stderr)
        return 1

    try:
        timezones = resolve_timezones(args.timezones, settings)
        parsed = parse_time(args.time)
    except GtimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Input time: {parsed.echo}\n")

    rendered = 0
    for result in render_timezones(parsed, timezones):
        if isinstance(result, RenderedLine):
            print(result)
            rendered += 1
        else:
            print(f"Error: {result}", file=sys.stderr)

    if rendered == 0:
        logger.debug("None of the requested timezones could be rendered")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
