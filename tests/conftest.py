#!/usr/bin/env python3
# tests/conftest.py
"""
Pytest configuration and shared fixtures for MorphPhoto tests.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pytest
from loguru import logger
from PIL import Image

from morphphoto.models.image_model import PixelBuffer


def make_rgba_array(
    width: int,
    height: int,
    color: Tuple[int, int, int] = (128, 128, 128),
    alpha: int = 255,
) -> np.ndarray:
    """Uniform height × width × 4 array"""
    array = np.empty((height, width, 4), dtype=np.uint8)
    array[..., :3] = color
    array[..., 3] = alpha
    return array


@pytest.fixture
def rgba_array() -> Callable[..., np.ndarray]:
    """Factory for uniform RGBA arrays."""
    return make_rgba_array


@pytest.fixture
def pixel_buffer() -> Callable[[np.ndarray], PixelBuffer]:
    """Factory turning an RGBA array into a PixelBuffer."""
    return PixelBuffer.from_array


@pytest.fixture
def image_factory() -> Callable[..., Path]:
    """
    Factory writing real image files.

    Args of the returned callable:
        path: Target file path (format from extension)
        size: (width, height)
        color: RGB fill
        black_left: Paint the whole left half pure black
        mtime: Optional modification time to set on the file
    """

    def _create(
        path: Path,
        size: Tuple[int, int] = (100, 100),
        color: Tuple[int, int, int] = (128, 128, 128),
        black_left: bool = False,
        mtime: Optional[datetime] = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        img = Image.new("RGB", size, color=color)
        if black_left:
            width, height = size
            img.paste((0, 0, 0), (0, 0, width // 2, height))

        fmt = "PNG" if path.suffix.lower() == ".png" else "JPEG"
        img.save(path, fmt)

        if mtime is not None:
            ts = mtime.timestamp()
            os.utime(path, (ts, ts))
        return path

    return _create


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def source_dir(tmp_path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path) -> Path:
    return tmp_path / "organized"
