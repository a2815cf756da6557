#!/usr/bin/env python3
# morphphoto/main.py
"""
MorphPhoto command-line interface.

Copies images from a source tree into an organized destination tree and
segregates corrupt files according to the configured policy.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Settings, load_settings
from .enums import CorruptFileHandling, LogEmoji, LoggerName, LogLevel, LogSource, OrganizationType
from .exceptions import ConfigurationError, MorphPhotoError
from .models.organizer_model import OrganizerOptions
from .services.corruption_pipeline import create_corruption_pipeline
from .services.file_scanner_service import FileScannerService
from .services.logger import configure_logging, get_service_logger
from .services.organizer_service import OrganizerService

logger = get_service_logger(LoggerName.CLI, LogSource.CLI)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morphphoto",
        description="Organize pictures by date or extension and segregate corrupt files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ~/Pictures/import ~/Pictures/organized
  %(prog)s SRC DEST --organization-type by_extension --corrupt-files extension_organize
  %(prog)s                      # prompt, or use MORPHPHOTO_DEFAULT_* settings
        """,
    )

    parser.add_argument("source", nargs="?", help="Source directory")
    parser.add_argument("destination", nargs="?", help="Destination directory")
    parser.add_argument(
        "--organization-type",
        choices=[t.value for t in OrganizationType],
        default=settings.organization_type.value,
        help="Group by date or by extension first (default: %(default)s)",
    )
    parser.add_argument(
        "--corrupt-files",
        choices=[h.value for h in CorruptFileHandling],
        default=settings.corrupt_file_handling.value,
        help="How to handle corrupt files (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=settings.log_level.value,
        help="Console log level (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=settings.log_file, help="Also log to this file")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored console output"
    )
    return parser


def resolve_directories(
    source: Optional[str],
    destination: Optional[str],
    settings: Settings,
    interactive: Optional[bool] = None,
) -> Tuple[Path, Path]:
    """
    Source and destination from arguments, an interactive prompt, or settings.

    Raises:
        ConfigurationError: Missing directories or a source that does not exist
    """
    if interactive is None:
        interactive = sys.stdin.isatty()

    if not source:
        if interactive:
            source = _prompt("Enter source directory: ")
        else:
            source = settings.default_source_directory

    if source and not destination:
        if interactive:
            destination = _prompt("Enter destination directory: ")
        else:
            default_destination = settings.get_default_destination(source)
            destination = str(default_destination) if default_destination else None

    if not source or not source.strip() or not destination or not destination.strip():
        raise ConfigurationError("Source and destination directories are required!")

    source_path = Path(source).expanduser()
    destination_path = Path(destination).expanduser()

    if not source_path.is_dir():
        raise ConfigurationError(f"Source directory does not exist: {source_path}")

    return source_path, destination_path


def _prompt(message: str) -> Optional[str]:
    try:
        value = input(message)
    except EOFError:
        return None
    # Paths pasted from a file manager often come quoted
    return value.strip().strip('"').strip("'") or None


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(e)
        return 1

    args = build_parser(settings).parse_args(argv)

    configure_logging(
        level=args.log_level,
        log_file=args.log_file,
        use_colors=settings.use_colors and not args.no_color,
    )

    try:
        source_dir, dest_dir = resolve_directories(args.source, args.destination, settings)
    except ConfigurationError as e:
        print(e)
        return 1

    options = OrganizerOptions(
        organization_type=OrganizationType(args.organization_type),
        corrupt_file_handling=CorruptFileHandling(args.corrupt_files),
    )

    organizer = OrganizerService(
        source_dir,
        dest_dir,
        options=options,
        corruption_pipeline=create_corruption_pipeline(settings),
        file_scanner=FileScannerService(
            extensions=settings.file_extensions_list, exclude_directory=dest_dir
        ),
    )

    try:
        organizer.organize()
    except MorphPhotoError as e:
        logger.error("Error during organization", exception=e, emoji=LogEmoji.FAILED)
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
