# morphphoto/services/path_resolution_service.py
"""
Path Resolution Service

Computes where a source file lands in the destination tree.

The folder layout is a pure function of (verdict, policy, has_timestamp);
only the final `_001`, `_002`, ... disambiguation looks at the filesystem.

Layout:
    clean, dated          ByDate: YYYY/MM-Mon      ByExtension: ext/YYYY/MM-Mon
    clean, undated        error/
    corrupt, normal       same as clean
    corrupt, extension    ByDate: <Verdict>/       ByExtension: ext/<Verdict>/
    corrupt, skip         PathResolutionConflictError
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

from ..constants import CORRUPTION_FOLDERS, ERROR_FOLDER
from ..enums import CorruptFileHandling, CorruptnessVerdict, LoggerName, OrganizationType
from ..exceptions import PathResolutionConflictError
from ..models.image_model import ImageRecord
from ..models.organizer_model import OrganizerOptions
from .logger import get_service_logger
from ..utils.file_helpers import get_unique_file_path
from ..utils.time_utils import format_month_folder, format_year_folder

logger = get_service_logger(LoggerName.PATH_RESOLVER)


def get_formatted_extension(file_path: Union[str, Path]) -> str:
    """Lowercase extension without the leading dot"""
    return Path(file_path).suffix.lstrip(".").lower()


def get_corruption_folder(verdict: CorruptnessVerdict) -> str:
    """
    Folder name for a corrupt verdict.

    Raises:
        ValueError: For the NONE verdict, which has no corruption folder
    """
    if verdict not in CORRUPTION_FOLDERS:
        raise ValueError(f"Cannot get corruption folder for verdict '{verdict.value}'")
    return CORRUPTION_FOLDERS[verdict]


def resolve_folder_template(
    verdict: CorruptnessVerdict,
    options: OrganizerOptions,
    earliest_date: Optional[datetime],
    extension: str,
) -> Tuple[str, ...]:
    """
    Destination folders, relative to the destination root, for one file.

    Args:
        verdict: Corruption verdict of the file
        options: Organization policy
        earliest_date: File timestamp, None when unavailable
        extension: Lowercase extension without dot

    Returns:
        Tuple of folder names

    Raises:
        PathResolutionConflictError: Corrupt file under the skip policy
    """
    if verdict.is_corrupt:
        handling = options.corrupt_file_handling

        if handling == CorruptFileHandling.SKIP:
            raise PathResolutionConflictError(
                f"Corrupt file ({verdict.value}) reached path resolution under the skip policy"
            )
        if handling == CorruptFileHandling.EXTENSION_ORGANIZE:
            return _by_organization_type(
                options.organization_type,
                extension,
                (get_corruption_folder(verdict),),
            )
        if handling != CorruptFileHandling.NORMAL_ORGANIZE:
            raise ValueError(f"Invalid corrupt file handling option: {handling}")

    if earliest_date is None:
        return (ERROR_FOLDER,)

    return _by_organization_type(
        options.organization_type,
        extension,
        (format_year_folder(earliest_date), format_month_folder(earliest_date)),
    )


def _by_organization_type(
    organization_type: OrganizationType,
    extension: str,
    folders: Tuple[str, ...],
) -> Tuple[str, ...]:
    if organization_type == OrganizationType.BY_DATE:
        return folders
    if organization_type == OrganizationType.BY_EXTENSION:
        return (extension, *folders)
    raise ValueError(f"Invalid organization type: {organization_type}")


class PathResolutionService:
    """
    Resolves destination paths under a fixed destination root and policy.
    """

    def __init__(self, destination_root: Union[str, Path], options: OrganizerOptions):
        """
        Args:
            destination_root: Root of the organized tree
            options: Organization policy
        """
        self.destination_root = Path(destination_root)
        self.options = options

    def get_target_path(self, record: ImageRecord) -> Path:
        """Destination path before collision handling."""
        folders = resolve_folder_template(
            record.corruptness,
            self.options,
            record.earliest_date,
            get_formatted_extension(record.file_path),
        )
        return self.destination_root.joinpath(*folders, record.file_path.name)

    def resolve(self, record: ImageRecord) -> Path:
        """
        Destination path for a record, suffixed with _001, _002, ... if taken.

        Raises:
            PathResolutionConflictError: Corrupt record under the skip policy
        """
        target = self.get_target_path(record)
        resolved = get_unique_file_path(target)

        if resolved != target:
            logger.debug(
                f"{target.name} already exists, using {resolved.name}",
                extra_context={"target": str(target), "resolved": str(resolved)},
            )
        return resolved
