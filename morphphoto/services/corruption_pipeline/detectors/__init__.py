"""
Corruption Detection Algorithms

- PartialCorruptionDetector: sampled black-ratio check on decoded pixels
"""

from .partial_corruption_detector import PartialCorruptionDetector, PartialCorruptionResult

__all__ = [
    "PartialCorruptionDetector",
    "PartialCorruptionResult",
]
