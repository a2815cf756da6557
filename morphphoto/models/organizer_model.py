# morphphoto/models/organizer_model.py
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field

from ..enums import CorruptFileHandling, CorruptnessVerdict, FileOutcome, OrganizationType


class OrganizerOptions(BaseModel):
    """Organization policy for a run"""

    organization_type: OrganizationType = Field(
        default=OrganizationType.BY_DATE,
        description="Group by <year>/<month> or by <extension> first",
    )
    corrupt_file_handling: CorruptFileHandling = Field(
        default=CorruptFileHandling.NORMAL_ORGANIZE,
        description="Skip, organize normally, or file under a verdict folder",
    )


class FileProcessingResult(BaseModel):
    """Outcome of a single source file"""

    source_path: Path
    outcome: FileOutcome
    corruptness: Optional[CorruptnessVerdict] = None
    destination_path: Optional[Path] = None
    reason: Optional[str] = Field(
        None, description="Skip reason or error message"
    )


class OrganizeSummary(BaseModel):
    """Counters for a whole organizer run"""

    total_files: int = 0
    organized: int = 0
    skipped: int = 0
    failed: int = 0
    verdicts: Dict[CorruptnessVerdict, int] = Field(default_factory=dict)

    def record(self, result: FileProcessingResult) -> None:
        """Fold a single file result into the counters"""
        if result.outcome == FileOutcome.ORGANIZED:
            self.organized += 1
        elif result.outcome == FileOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

        if result.corruptness is not None:
            self.verdicts[result.corruptness] = (
                self.verdicts.get(result.corruptness, 0) + 1
            )
