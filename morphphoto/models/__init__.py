"""
Typed models for images, decode outcomes and organizer runs.
"""

from .image_model import DecodeFailure, ImageRecord, PixelBuffer
from .organizer_model import FileProcessingResult, OrganizerOptions, OrganizeSummary

__all__ = [
    "PixelBuffer",
    "DecodeFailure",
    "ImageRecord",
    "OrganizerOptions",
    "FileProcessingResult",
    "OrganizeSummary",
]
