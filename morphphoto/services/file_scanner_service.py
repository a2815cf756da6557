# morphphoto/services/file_scanner_service.py
"""
File Scanner Service

Recursive enumeration of candidate image files under a source directory,
filtered by extension and with OS metadata and editor temp files removed.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..constants import DEFAULT_IMAGE_EXTENSIONS, SKIP_FILE_PATTERNS, SKIP_FILE_PREFIXES
from ..enums import LogEmoji, LoggerName, LogSource
from ..exceptions import DirectoryScanError
from .logger import get_service_logger

logger = get_service_logger(LoggerName.FILE_SCANNER, LogSource.FILESYSTEM)


def should_skip_file(file_path: Union[str, Path]) -> bool:
    """
    True for system and metadata files that are never organized.

    Checks exact names, wildcard patterns and editor/temp prefixes, all
    case-insensitively.
    """
    file_name = Path(file_path).name.lower()

    if file_name in SKIP_FILE_PATTERNS:
        return True

    for pattern in SKIP_FILE_PATTERNS:
        if "*" in pattern and file_name.startswith(pattern.replace("*", "")):
            return True

    return any(file_name.startswith(prefix) for prefix in SKIP_FILE_PREFIXES)


class FileScannerService:
    """Lists the image files an organizer run will process."""

    def __init__(
        self,
        extensions: Optional[Iterable[str]] = None,
        exclude_directory: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            extensions: Extensions to keep, with leading dot (case-insensitive)
            exclude_directory: Directory whose contents are never listed,
                typically the destination when it sits inside the source
        """
        self.extensions = {
            ext.lower() for ext in (extensions or DEFAULT_IMAGE_EXTENSIONS)
        }
        self.exclude_directory = (
            Path(exclude_directory).resolve() if exclude_directory else None
        )

    def is_candidate(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.extensions and not should_skip_file(
            file_path
        )

    def get_image_files(self, directory: Union[str, Path]) -> List[Path]:
        """
        Sorted list of candidate files under a directory.

        Enumeration failures are logged and produce an empty list.
        """
        try:
            return self.scan(directory)
        except DirectoryScanError as e:
            logger.error(f"Error scanning directory {directory}", exception=e)
            return []

    def scan(self, directory: Union[str, Path]) -> List[Path]:
        """
        Walk a directory tree and return candidate files in a stable order.

        Raises:
            DirectoryScanError: If the directory or any subdirectory cannot be read
        """
        root = Path(directory)
        if not root.is_dir():
            raise DirectoryScanError(f"Not a directory: {root}")

        def _raise(error: OSError) -> None:
            raise DirectoryScanError(str(error)) from error

        files: List[Path] = []
        for current, dirnames, filenames in os.walk(root, onerror=_raise):
            current_path = Path(current)

            if self.exclude_directory is not None:
                dirnames[:] = [
                    d
                    for d in dirnames
                    if (current_path / d).resolve() != self.exclude_directory
                ]

            dirnames.sort()
            for filename in sorted(filenames):
                file_path = current_path / filename
                if self.is_candidate(file_path):
                    files.append(file_path)

        logger.debug(
            f"Found {len(files)} candidate files under {root}",
            emoji=LogEmoji.SEARCH,
        )
        return files
