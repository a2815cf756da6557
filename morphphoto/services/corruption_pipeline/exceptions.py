# morphphoto/services/corruption_pipeline/exceptions.py
"""
Corruption Pipeline Exception Classes

Custom exceptions for image decoding and corruption detection operations.
"""

from ...exceptions import MorphPhotoError


class CorruptionPipelineError(MorphPhotoError):
    """Base exception for corruption pipeline operations."""

    pass


class ImageDecodeError(CorruptionPipelineError):
    """Exception raised when an image cannot be decoded into a pixel buffer."""

    pass

