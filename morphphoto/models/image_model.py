# morphphoto/models/image_model.py
"""
Image data models.

PixelBuffer wraps a decoded RGBA array and is kept as a dataclass because it
holds a numpy array. ImageRecord is the per-file metadata that flows from the
corruption pipeline to the path resolver.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..enums import CorruptnessVerdict, DecodeFailureReason


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded image: height × width × 4 RGBA uint8 samples, read-only."""

    width: int
    height: int
    pixels: np.ndarray

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """
        Build a buffer from an RGBA array.

        Writable input is copied so the caller cannot mutate the buffer
        afterwards; read-only input (e.g. from Pillow) is used as is.

        Raises:
            ValueError: If the array is not height × width × 4
        """
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(
                f"Expected a height x width x 4 RGBA array, got shape {array.shape}"
            )

        pixels = np.asarray(array, dtype=np.uint8)
        if pixels.flags.writeable:
            pixels = pixels.copy()
            pixels.setflags(write=False)

        height, width = pixels.shape[:2]
        return cls(width=int(width), height=int(height), pixels=pixels)


@dataclass(frozen=True)
class DecodeFailure:
    """A decode attempt that did not produce a PixelBuffer."""

    reason: DecodeFailureReason
    message: str
    verdict: CorruptnessVerdict


class ImageRecord(BaseModel):
    """Per-file metadata used to route a file to its destination"""

    file_path: Path = Field(..., description="Path to the source image file")
    earliest_date: Optional[datetime] = Field(
        None, description="Earliest of the file's creation and modification times"
    )
    width: int = Field(default=0, ge=0, description="Decoded width in pixels")
    height: int = Field(default=0, ge=0, description="Decoded height in pixels")
    corruptness: CorruptnessVerdict = Field(
        default=CorruptnessVerdict.NONE, description="Corruption verdict"
    )
    decode_error: Optional[str] = Field(
        None, description="Decoder error message when decoding failed"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_corrupt(self) -> bool:
        return self.corruptness.is_corrupt

    @property
    def has_timestamp(self) -> bool:
        return self.earliest_date is not None
