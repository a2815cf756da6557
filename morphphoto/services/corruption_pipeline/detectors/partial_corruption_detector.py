# morphphoto/services/corruption_pipeline/detectors/partial_corruption_detector.py
"""
Partial Corruption Detector

Sampling heuristic for images that decoded but are partially corrupt. A decode
that was cut off mid-stream leaves a solid black band, usually starting
partway down the image. Only the left half of the image is sampled, on a
uniform grid sized by a fixed sample budget, so the cost is O(sample budget)
regardless of resolution.

This is a heuristic, not a proof: scattered black regions can score under the
threshold.
"""

import math
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ....constants import (
    DEFAULT_BLACK_CHANNEL_THRESHOLD,
    DEFAULT_CORRUPTION_THRESHOLD,
    DEFAULT_SAMPLE_BUDGET,
)
from ....enums import CorruptnessVerdict, LoggerName
from ....models.image_model import PixelBuffer
from ....services.logger import get_service_logger

logger = get_service_logger(LoggerName.CORRUPTION_PIPELINE)


@dataclass
class PartialCorruptionResult:
    """Result from partial corruption sampling"""

    verdict: CorruptnessVerdict
    black_samples: int
    sampled_pixels: int
    corruption_ratio: float
    step_x: int
    step_y: int
    processing_time_ms: float

    @property
    def is_corrupted(self) -> bool:
        return self.verdict == CorruptnessVerdict.PARTIAL_CORRUPTION

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format"""
        return {
            "verdict": self.verdict.value,
            "black_samples": self.black_samples,
            "sampled_pixels": self.sampled_pixels,
            "corruption_ratio": self.corruption_ratio,
            "step_x": self.step_x,
            "step_y": self.step_y,
            "processing_time_ms": self.processing_time_ms,
        }


class PartialCorruptionDetector:
    """
    Flags decoded images whose sampled left half is mostly black.

    Only ever returns NONE or PARTIAL_CORRUPTION; truncated and undecodable
    files are classified upstream by the decoder.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize with configuration"""
        self.config = {**self._get_default_config(), **(config or {})}

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration for partial corruption sampling"""
        return {
            "sample_budget": DEFAULT_SAMPLE_BUDGET,
            "black_channel_threshold": DEFAULT_BLACK_CHANNEL_THRESHOLD,
            "corruption_threshold": DEFAULT_CORRUPTION_THRESHOLD,
        }

    def classify(self, buffer: PixelBuffer) -> CorruptnessVerdict:
        """Return the verdict for a decoded buffer."""
        return self.detect(buffer).verdict

    def detect(self, buffer: PixelBuffer) -> PartialCorruptionResult:
        """
        Sample the left half of a decoded image and compute its black ratio.

        Args:
            buffer: Decoded RGBA pixel buffer

        Returns:
            PartialCorruptionResult with verdict and sampling evidence
        """
        start_time = time.time()

        width, height = buffer.width, buffer.height
        step_x, step_y = self.compute_strides(width, height)

        if width < 1 or height < 1:
            return self._build_result(0, 0, step_x, step_y, start_time)

        # Column 0 is always sampled, even for a 1 pixel wide image
        half_width = max(1, width // 2)
        row_length = buffer.pixels.shape[1]
        column_limit = min(half_width, row_length)

        samples = buffer.pixels[0:height:step_y, 0:column_limit:step_x, :3]
        threshold = self.config["black_channel_threshold"]
        black_mask = np.all(samples < threshold, axis=-1)

        result = self._build_result(
            int(np.count_nonzero(black_mask)),
            int(black_mask.size),
            step_x,
            step_y,
            start_time,
        )

        if result.is_corrupted:
            logger.debug(
                f"Partial corruption: {result.corruption_ratio:.1%} of "
                f"{result.sampled_pixels} samples black",
                extra_context=result.to_dict(),
            )
        return result

    def compute_strides(self, width: int, height: int) -> Tuple[int, int]:
        """
        Independent strides per axis so the samples form a roughly uniform grid.

        Returns:
            (step_x, step_y), each at least 1
        """
        total_pixels = max(0, width) * max(0, height)
        sample_count = min(total_pixels, self.config["sample_budget"])
        grid_side = max(1, math.isqrt(sample_count))

        step_x = max(1, width // grid_side)
        step_y = max(1, height // grid_side)
        return step_x, step_y

    def _build_result(
        self,
        black_samples: int,
        sampled_pixels: int,
        step_x: int,
        step_y: int,
        start_time: float,
    ) -> PartialCorruptionResult:
        ratio = black_samples / sampled_pixels if sampled_pixels else 0.0

        # Strictly greater: a ratio equal to the threshold is not corrupt
        verdict = (
            CorruptnessVerdict.PARTIAL_CORRUPTION
            if ratio > self.config["corruption_threshold"]
            else CorruptnessVerdict.NONE
        )

        return PartialCorruptionResult(
            verdict=verdict,
            black_samples=black_samples,
            sampled_pixels=sampled_pixels,
            corruption_ratio=ratio,
            step_x=step_x,
            step_y=step_y,
            processing_time_ms=(time.time() - start_time) * 1000,
        )
