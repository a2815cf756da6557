"""
Image decoding adapters.

- ImageDecoder: Pillow / pillow-heif decode into a PixelBuffer
- DecodeFailureClassifier: exception -> failure reason -> verdict lookup
"""

from .failure_classifier import DecodeFailureClassifier
from .image_decoder import DecodeOutcome, ImageDecoder, is_heif_file

__all__ = [
    "DecodeFailureClassifier",
    "DecodeOutcome",
    "ImageDecoder",
    "is_heif_file",
]
