# morphphoto/services/corruption_pipeline/corruption_pipeline.py
"""
Main Corruption Pipeline Class

Single entry point from a file path to an ImageRecord: filesystem timestamps,
decode, then partial corruption sampling when the decode succeeded.
"""

from pathlib import Path
from typing import Optional, Union

from ...enums import CorruptnessVerdict, LoggerName
from ...models.image_model import DecodeFailure, ImageRecord
from ...services.logger import get_service_logger
from ...utils.time_utils import get_earliest_file_timestamp
from .decoders import ImageDecoder
from .detectors import PartialCorruptionDetector

logger = get_service_logger(LoggerName.CORRUPTION_PIPELINE)


class CorruptionPipeline:
    """
    Builds the ImageRecord for a file with injected decoder and detector.
    """

    def __init__(
        self,
        decoder: Optional[ImageDecoder] = None,
        detector: Optional[PartialCorruptionDetector] = None,
    ):
        self.decoder = decoder or ImageDecoder()
        self.detector = detector or PartialCorruptionDetector()

    def inspect(self, file_path: Union[str, Path]) -> ImageRecord:
        """
        Decode and classify a single file.

        Args:
            file_path: Path to the image file

        Returns:
            ImageRecord with timestamp, dimensions and verdict
        """
        path = Path(file_path)
        earliest_date = get_earliest_file_timestamp(path)

        outcome = self.decoder.decode(path)

        if isinstance(outcome, DecodeFailure):
            return ImageRecord(
                file_path=path,
                earliest_date=earliest_date,
                corruptness=outcome.verdict,
                decode_error=outcome.message,
            )

        verdict = self.detector.classify(outcome)
        if verdict == CorruptnessVerdict.PARTIAL_CORRUPTION:
            logger.debug(f"{path.name} flagged as partially corrupt")

        return ImageRecord(
            file_path=path,
            earliest_date=earliest_date,
            width=outcome.width,
            height=outcome.height,
            corruptness=verdict,
        )
