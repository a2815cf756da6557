# morphphoto/utils/time_utils.py
"""
Time utilities for filesystem timestamps and date-based folder names.

All timestamps are naive local datetimes, matching what a user sees in their
file manager.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..constants import MONTH_ABBREVIATIONS


def get_creation_timestamp(stat_result: os.stat_result) -> float:
    """
    Best available creation time.

    st_birthtime exists on macOS, BSD and recent Windows builds. Elsewhere
    st_ctime is the closest stand-in (metadata change time on Linux).
    """
    return getattr(stat_result, "st_birthtime", stat_result.st_ctime)


def get_earliest_file_timestamp(file_path: Union[str, Path]) -> Optional[datetime]:
    """
    Earliest of a file's creation and modification times.

    Returns:
        Local naive datetime, or None if the file cannot be stat'ed
    """
    try:
        stat_result = Path(file_path).stat()
    except OSError:
        return None

    earliest = min(get_creation_timestamp(stat_result), stat_result.st_mtime)
    try:
        return datetime.fromtimestamp(earliest)
    except (OverflowError, OSError, ValueError):
        return None


def format_year_folder(date: datetime) -> str:
    return f"{date.year:04d}"


def format_month_folder(date: datetime) -> str:
    """Month folder name, e.g. 05-May. Locale independent."""
    return f"{date.month:02d}-{MONTH_ABBREVIATIONS[date.month - 1]}"
