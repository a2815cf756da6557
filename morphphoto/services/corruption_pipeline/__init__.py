"""
Corruption Pipeline Domain

Decoding and corruption classification for a single image file.

Domain Responsibilities:
- Format-aware decoding into RGBA pixel buffers (Pillow, pillow-heif)
- Classification of decode failures (truncated vs. invalid)
- Partial corruption sampling of decoded pixels

Factory Usage:
```python
from morphphoto.services.corruption_pipeline import create_corruption_pipeline

pipeline = create_corruption_pipeline()
record = pipeline.inspect("/photos/IMG_0001.HEIC")
record.corruptness  # CorruptnessVerdict
```
"""

from typing import Optional

from ...config import Settings, load_settings
from .corruption_pipeline import CorruptionPipeline
from .decoders import DecodeFailureClassifier, ImageDecoder, is_heif_file
from .detectors import PartialCorruptionDetector, PartialCorruptionResult
from .exceptions import CorruptionPipelineError, ImageDecodeError


def create_corruption_pipeline(settings: Optional[Settings] = None) -> CorruptionPipeline:
    """
    Build a CorruptionPipeline, taking sampling parameters from settings.

    Args:
        settings: Settings instance (defaults to settings loaded from the environment)

    Raises:
        ConfigurationError: If settings are loaded here and fail validation
    """
    if settings is None:
        settings = load_settings()

    detector = PartialCorruptionDetector(
        config={
            "sample_budget": settings.sample_budget,
            "black_channel_threshold": settings.black_channel_threshold,
            "corruption_threshold": settings.corruption_threshold,
        }
    )
    return CorruptionPipeline(decoder=ImageDecoder(), detector=detector)


__all__ = [
    "CorruptionPipeline",
    "create_corruption_pipeline",
    "ImageDecoder",
    "DecodeFailureClassifier",
    "is_heif_file",
    "PartialCorruptionDetector",
    "PartialCorruptionResult",
    "CorruptionPipelineError",
    "ImageDecodeError",
]
