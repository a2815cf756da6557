# morphphoto/services/organizer_service.py
"""
Organizer Service

Orchestrates a run: scan the source tree, then for every file inspect →
resolve destination → copy, strictly one file at a time. Source files are
never moved or deleted and existing destination files are never overwritten.

Per-file failures are logged and counted; they never abort the batch.
Batch-level failures (destination cannot be created) raise OrganizerError.
"""

from pathlib import Path
from typing import Optional, Union

from ..enums import CorruptFileHandling, FileOutcome, LogEmoji, LoggerName, LogSource
from ..exceptions import OrganizerError, PathResolutionConflictError
from ..models.image_model import ImageRecord
from ..models.organizer_model import FileProcessingResult, OrganizerOptions, OrganizeSummary
from .corruption_pipeline import CorruptionPipeline
from .file_scanner_service import FileScannerService
from .logger import get_service_logger
from .path_resolution_service import PathResolutionService
from ..utils.file_helpers import copy_file_no_overwrite, get_relative_path

logger = get_service_logger(LoggerName.ORGANIZER, LogSource.PIPELINE)

# Attempts to find a free name when another writer takes the resolved path
# between resolution and copy
MAX_COPY_ATTEMPTS = 5


class OrganizerService:
    """
    Copies images from a source tree into an organized destination tree.
    """

    def __init__(
        self,
        source_dir: Union[str, Path],
        dest_dir: Union[str, Path],
        options: Optional[OrganizerOptions] = None,
        corruption_pipeline: Optional[CorruptionPipeline] = None,
        file_scanner: Optional[FileScannerService] = None,
    ):
        """
        Args:
            source_dir: Tree to read images from
            dest_dir: Root of the organized tree
            options: Organization policy (defaults to by-date, normal organize)
            corruption_pipeline: Decode + classify step
            file_scanner: Source enumeration
        """
        self.source_dir = Path(source_dir)
        self.dest_dir = Path(dest_dir)
        self.options = options or OrganizerOptions()
        self.corruption_pipeline = corruption_pipeline or CorruptionPipeline()
        self.file_scanner = file_scanner or FileScannerService(
            exclude_directory=self.dest_dir
        )
        self.path_resolver = PathResolutionService(self.dest_dir, self.options)

    def organize(self) -> OrganizeSummary:
        """
        Run the whole batch.

        Returns:
            OrganizeSummary with per-outcome and per-verdict counters

        Raises:
            OrganizerError: If the destination directory cannot be created
        """
        logger.info("Starting organize...", emoji=LogEmoji.STARTUP)
        logger.info(f"Source Dir {self.source_dir}", emoji=LogEmoji.FOLDER)
        logger.info(f"Destination Dir {self.dest_dir}", emoji=LogEmoji.FOLDER)

        try:
            self.dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create destination directory {self.dest_dir}", exception=e)
            raise OrganizerError(
                f"Cannot create destination directory {self.dest_dir}: {e}"
            ) from e

        images = self.file_scanner.get_image_files(self.source_dir)
        summary = OrganizeSummary(total_files=len(images))
        logger.info(f"Image count: {len(images)}", emoji=LogEmoji.IMAGE)

        for index, file_path in enumerate(images, start=1):
            logger.info(
                f"Processing {index}/{len(images)}: {file_path.name}",
                emoji=LogEmoji.PROCESSING,
            )
            summary.record(self.process_file(file_path))

        logger.success(
            f"Done: {summary.organized} organized, {summary.skipped} skipped, "
            f"{summary.failed} failed",
            extra_context=summary.model_dump(mode="json"),
            emoji=LogEmoji.COMPLETED,
        )
        return summary

    def process_file(self, file_path: Path) -> FileProcessingResult:
        """
        Inspect, resolve and copy one file. Never raises for per-file problems.
        """
        record: Optional[ImageRecord] = None
        try:
            record = self.corruption_pipeline.inspect(file_path)

            if self.should_skip_record(record):
                reason = f"corrupt file ({record.corruptness.value})"
                logger.warning(
                    f"Skipping {reason}: {file_path.name}", emoji=LogEmoji.SKIPPED
                )
                return FileProcessingResult(
                    source_path=file_path,
                    outcome=FileOutcome.SKIPPED,
                    corruptness=record.corruptness,
                    reason=reason,
                )

            destination = self.copy_to_destination(record)
            logger.success(
                f"Organized: {file_path.name} -> {get_relative_path(self.dest_dir, destination)}",
                emoji=LogEmoji.COPY,
            )
            return FileProcessingResult(
                source_path=file_path,
                outcome=FileOutcome.ORGANIZED,
                corruptness=record.corruptness,
                destination_path=destination,
            )

        except PathResolutionConflictError:
            # Contract violation, not a per-file condition
            raise
        except Exception as e:
            logger.error(f"Error processing {file_path}", exception=e)
            return FileProcessingResult(
                source_path=file_path,
                outcome=FileOutcome.FAILED,
                corruptness=record.corruptness if record else None,
                reason=str(e),
            )

    def should_skip_record(self, record: ImageRecord) -> bool:
        return (
            record.is_corrupt
            and self.options.corrupt_file_handling == CorruptFileHandling.SKIP
        )

    def copy_to_destination(self, record: ImageRecord) -> Path:
        """
        Resolve a free destination name and copy the file there.

        Resolution and copy happen together; if the resolved name is taken
        before the exclusive create, the name is resolved again.

        Raises:
            FileCopyError: Copy failed for a reason other than a name clash
            OrganizerError: No free name found after MAX_COPY_ATTEMPTS
        """
        for _ in range(MAX_COPY_ATTEMPTS):
            destination = self.path_resolver.resolve(record)
            destination.parent.mkdir(parents=True, exist_ok=True)
            try:
                return copy_file_no_overwrite(record.file_path, destination)
            except FileExistsError:
                logger.debug(f"{destination} was taken before copy, resolving again")

        raise OrganizerError(
            f"Could not find a free destination for {record.file_path.name} "
            f"after {MAX_COPY_ATTEMPTS} attempts"
        )
