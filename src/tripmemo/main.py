# src/tripmemo/main.py
"""Backend entry point and command line interface for tripmemo."""

import argparse
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .catalog import ACHIEVEMENT_DEFINITIONS
from .config import ConfigManager
from .constants import APP_NAME, CATEGORY_ORDER, CLIMessages
from .exceptions import InputFileMissingError, TripMemoError
from .importer import PhotoSheetImporter
from .models import Trip
from .trip import build_trip

LOG_DIR = Path.home() / ".tripmemo_logs"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Rotating file log plus console output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    log_dir = log_dir or LOG_DIR
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.insert(
            0, RotatingFileHandler(log_dir / "app.log", maxBytes=1_000_000, backupCount=5, encoding="utf-8")
        )
    except OSError as e:
        print(f"Log file disabled: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def process_sheet_backend(
    input_path_str: str,
    trip_name_str: str = "",
    is_first_trip: bool = False,
    output_path_str: str = "",
) -> Trip:
    """
    Builds a trip from a photo sheet and optionally writes it as JSON.

    Args:
        input_path_str: Path to the .xlsx sheet listing the photos.
        trip_name_str: Trip name. Falls back to the configured default, then
            to a name derived from the start month.
        is_first_trip: Award the first-trip badge.
        output_path_str: Optional path of the JSON file to write.

    Returns:
        The assembled Trip.

    Raises:
        InputFileMissingError: If the sheet doesn't exist.
        InvalidSheetError: If the file is not a readable .xlsx workbook.
        MissingColumnsError: If the sheet lacks the id or date column.
        NoTimestampedPhotosError: If no photo has a usable date.
    """
    logger.info("Starting trip build")

    input_path = Path(input_path_str)
    if not input_path.exists():
        raise InputFileMissingError(input_path)

    config = ConfigManager.load_config()
    tz = ConfigManager.get_timezone(config)
    name = trip_name_str.strip() or config.get("default_trip_name", "")

    photos = PhotoSheetImporter().parse_sheet(input_path)
    trip = build_trip(photos, name=name, is_first_trip=is_first_trip, tz=tz)

    if output_path_str:
        output_path = Path(output_path_str)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(trip.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Trip written to {output_path}")

    ConfigManager.save_config(last_input=str(input_path))
    return trip


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Turn a list of geotagged photos into a trip record.")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a trip from a photo sheet (.xlsx)")
    build.add_argument("sheet", help="Sheet with Id/File, Date, Latitude, Longitude, Altitude columns")
    build.add_argument("--name", default="", help="Trip name")
    build.add_argument("--first-trip", action="store_true", help="This is the very first trip")
    build.add_argument("--output", "-o", default="", help="Write the trip as JSON to this file")

    catalog = sub.add_parser("catalog", help="List achievement definitions")
    catalog.add_argument("--category", choices=CATEGORY_ORDER, default=None)
    return parser


def _print_catalog(category: Optional[str]) -> None:
    for definition in ACHIEVEMENT_DEFINITIONS.values():
        if category and definition.category != category:
            continue
        print(f"{definition.icon}  {definition.type:<20} {definition.rarity:<10} {definition.title} - {definition.description}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = ConfigManager.load_config()
    configure_logging(args.log_level or config.get("log_level", "INFO"))

    if args.command == "catalog":
        _print_catalog(args.category)
        return 0

    print(CLIMessages.BUILDING.format(path=args.sheet))
    try:
        trip = process_sheet_backend(args.sheet, args.name, args.first_trip, args.output)
    except TripMemoError as e:
        logger.error(f"Trip build failed: {e}")
        print(CLIMessages.ERROR.format(error=e), file=sys.stderr)
        return 1

    print(
        CLIMessages.SUCCESS.format(
            name=trip.name,
            photos=trip.total_photos,
            distance=trip.total_distance,
            achievements=len(trip.achievements),
        )
    )
    for achievement in trip.achievements:
        definition = ACHIEVEMENT_DEFINITIONS[achievement.type]
        print(f"  {definition.icon} {definition.title} ({definition.rarity})")
    if args.output:
        print(CLIMessages.WRITTEN.format(path=args.output))
    else:
        print(json.dumps(trip.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
