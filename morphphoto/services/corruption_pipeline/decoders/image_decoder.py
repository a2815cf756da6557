# morphphoto/services/corruption_pipeline/decoders/image_decoder.py
"""
Image Decoder Adapter

Loads an image file into an RGBA PixelBuffer, or returns a classified
DecodeFailure. HEIC/HEIF containers go through pillow-heif; every other format
goes through Pillow with a forced full decode so that truncated streams fail
here rather than yielding a partial image silently.

Callers depend only on `decode(path) -> PixelBuffer | DecodeFailure`.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import pillow_heif
from PIL import Image

from ....constants import HEIF_EXTENSIONS
from ....enums import LogEmoji, LoggerName, LogSource
from ....models.image_model import DecodeFailure, PixelBuffer
from ....services.logger import get_service_logger
from ..exceptions import ImageDecodeError
from .failure_classifier import DecodeFailureClassifier

logger = get_service_logger(LoggerName.IMAGE_DECODER, LogSource.PIPELINE)

DecodeOutcome = Union[PixelBuffer, DecodeFailure]


def is_heif_file(file_path: Union[str, Path]) -> bool:
    """True for .heic / .heif files, case-insensitive"""
    return Path(file_path).suffix.lower() in HEIF_EXTENSIONS


class ImageDecoder:
    """
    Format-aware decoder producing RGBA pixel buffers.

    Every exception raised while opening or decoding is converted into a
    DecodeFailure; nothing propagates to the caller.
    """

    def __init__(self, failure_classifier: Optional[DecodeFailureClassifier] = None):
        self.failure_classifier = failure_classifier or DecodeFailureClassifier()

    def decode(self, file_path: Union[str, Path]) -> DecodeOutcome:
        """
        Decode a file into a PixelBuffer.

        Args:
            file_path: Path to the image file

        Returns:
            PixelBuffer on success, DecodeFailure otherwise
        """
        path = Path(file_path)

        try:
            if is_heif_file(path):
                image = self._open_heif(path)
            else:
                image = self._open_generic(path)

            return self._to_pixel_buffer(image)

        except Exception as e:
            failure = self.failure_classifier.classify(e)
            logger.warning(
                f"Could not decode {path.name} ({failure.verdict.value}): {failure.message}",
                extra_context={
                    "file_path": str(path),
                    "reason": failure.reason.value,
                },
                emoji=LogEmoji.BROKEN,
            )
            return failure

    def _open_heif(self, path: Path) -> Image.Image:
        """Decode the primary image of a HEIF container into a Pillow image."""
        heif_file = pillow_heif.open_heif(str(path), convert_hdr_to_8bit=True)
        return Image.frombytes(
            heif_file.mode,
            heif_file.size,
            heif_file.data,
            "raw",
            heif_file.mode,
            heif_file.stride,
        )

    def _open_generic(self, path: Path) -> Image.Image:
        """Open and fully decode any Pillow-supported format."""
        with Image.open(path) as img:
            # load() forces the whole stream to be read and raises on truncation
            img.load()
            return img.copy()

    def _to_pixel_buffer(self, image: Image.Image) -> PixelBuffer:
        try:
            width, height = image.size
            if width < 1 or height < 1:
                raise ImageDecodeError(f"Decoded image has no pixels ({width}x{height})")

            if image.mode == "RGBA":
                return PixelBuffer.from_array(np.asarray(image))

            rgba = image.convert("RGBA")
            try:
                return PixelBuffer.from_array(np.asarray(rgba))
            finally:
                rgba.close()
        finally:
            image.close()
