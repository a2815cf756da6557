#!/usr/bin/env python3
"""
Unit tests for PartialCorruptionDetector.

Tests the sampling heuristic:
- Verdicts for black, gray and mixed left halves
- Strict threshold boundary
- Stride computation and narrow images
- Determinism and alpha handling
"""

import numpy as np
import pytest

from morphphoto.enums import CorruptnessVerdict
from morphphoto.models.image_model import PixelBuffer
from morphphoto.services.corruption_pipeline.detectors import (
    PartialCorruptionDetector,
    PartialCorruptionResult,
)


@pytest.mark.unit
@pytest.mark.corruption
class TestPartialCorruptionDetector:
    """Test suite for the partial corruption sampler."""

    @pytest.fixture
    def detector(self):
        return PartialCorruptionDetector()

    # ============================================================================
    # VERDICT TESTS
    # ============================================================================

    def test_black_left_half_is_partial_corruption(self, detector, rgba_array):
        """100×100 image with a pure black left half."""
        array = rgba_array(100, 100)
        array[:, :50, :3] = 0

        result = detector.detect(PixelBuffer.from_array(array))

        assert result.verdict == CorruptnessVerdict.PARTIAL_CORRUPTION
        assert result.corruption_ratio == pytest.approx(1.0)
        assert result.black_samples == result.sampled_pixels

    def test_uniform_gray_is_clean(self, detector, rgba_array):
        """100×100 mid-gray image."""
        buffer = PixelBuffer.from_array(rgba_array(100, 100, color=(128, 128, 128)))

        result = detector.detect(buffer)

        assert result.verdict == CorruptnessVerdict.NONE
        assert result.corruption_ratio == 0.0
        assert result.black_samples == 0

    def test_all_black_image_is_partial_corruption(self, detector, rgba_array):
        buffer = PixelBuffer.from_array(rgba_array(640, 480, color=(0, 0, 0)))
        assert detector.classify(buffer) == CorruptnessVerdict.PARTIAL_CORRUPTION

    def test_black_right_half_is_not_sampled(self, detector, rgba_array):
        """Only the left half is inspected."""
        array = rgba_array(100, 100)
        array[:, 50:, :3] = 0

        assert detector.classify(PixelBuffer.from_array(array)) == CorruptnessVerdict.NONE

    def test_black_bottom_band_is_detected(self, detector, rgba_array):
        """Truncated decodes leave a black band from partway down the image."""
        array = rgba_array(300, 400)
        array[200:, :, :3] = 0

        result = detector.detect(PixelBuffer.from_array(array))

        assert result.verdict == CorruptnessVerdict.PARTIAL_CORRUPTION
        assert 0.4 < result.corruption_ratio < 0.6

    def test_near_black_pixels_count_as_black(self, detector, rgba_array):
        buffer = PixelBuffer.from_array(rgba_array(100, 100, color=(9, 9, 9)))
        assert detector.classify(buffer) == CorruptnessVerdict.PARTIAL_CORRUPTION

    def test_channel_at_threshold_is_not_black(self, detector, rgba_array):
        """All three channels must be strictly below 10."""
        buffer = PixelBuffer.from_array(rgba_array(100, 100, color=(0, 10, 0)))
        assert detector.classify(buffer) == CorruptnessVerdict.NONE

    def test_alpha_is_ignored(self, detector, rgba_array):
        buffer = PixelBuffer.from_array(rgba_array(100, 100, color=(0, 0, 0), alpha=0))
        assert detector.classify(buffer) == CorruptnessVerdict.PARTIAL_CORRUPTION

        buffer = PixelBuffer.from_array(
            rgba_array(100, 100, color=(200, 200, 200), alpha=0)
        )
        assert detector.classify(buffer) == CorruptnessVerdict.NONE

    # ============================================================================
    # THRESHOLD BOUNDARY TESTS
    # ============================================================================

    def test_ratio_equal_to_threshold_is_clean(self, detector, rgba_array):
        """
        10×10 image: stride 1, left half 5 columns, 50 samples.
        15 black samples give a ratio of exactly 0.30.
        """
        array = rgba_array(10, 10)
        array[:3, :5, :3] = 0

        result = detector.detect(PixelBuffer.from_array(array))

        assert result.sampled_pixels == 50
        assert result.black_samples == 15
        assert result.corruption_ratio == pytest.approx(0.30)
        assert result.verdict == CorruptnessVerdict.NONE

    def test_ratio_just_above_threshold_is_corrupt(self, detector, rgba_array):
        array = rgba_array(10, 10)
        array[:3, :5, :3] = 0
        array[3, 0, :3] = 0

        result = detector.detect(PixelBuffer.from_array(array))

        assert result.black_samples == 16
        assert result.verdict == CorruptnessVerdict.PARTIAL_CORRUPTION

    def test_custom_threshold_from_config(self, rgba_array):
        array = rgba_array(10, 10)
        array[:3, :5, :3] = 0
        detector = PartialCorruptionDetector(config={"corruption_threshold": 0.2})

        assert detector.classify(PixelBuffer.from_array(array)) == (
            CorruptnessVerdict.PARTIAL_CORRUPTION
        )

    # ============================================================================
    # SAMPLING GEOMETRY TESTS
    # ============================================================================

    @pytest.mark.parametrize(
        "width,height,expected",
        [
            (100, 100, (3, 3)),
            (4000, 3000, (129, 96)),
            (10, 10, (1, 1)),
            (1, 5000, (1, 161)),
        ],
    )
    def test_compute_strides(self, detector, width, height, expected):
        assert detector.compute_strides(width, height) == expected

    def test_sample_count_stays_within_budget(self, detector, rgba_array):
        buffer = PixelBuffer.from_array(rgba_array(4000, 3000))

        result = detector.detect(buffer)

        assert result.sampled_pixels <= 1000
        assert result.sampled_pixels > 0

    def test_narrow_image_samples_column_zero(self, detector, rgba_array):
        """A 1 pixel wide image still samples column 0 of every sampled row."""
        array = rgba_array(1, 500, color=(0, 0, 0))

        result = detector.detect(PixelBuffer.from_array(array))

        expected_rows = len(range(0, 500, result.step_y))
        assert result.sampled_pixels == expected_rows
        assert result.verdict == CorruptnessVerdict.PARTIAL_CORRUPTION

    def test_single_pixel_image(self, detector, rgba_array):
        result = detector.detect(PixelBuffer.from_array(rgba_array(1, 1, color=(0, 0, 0))))

        assert result.sampled_pixels == 1
        assert result.verdict == CorruptnessVerdict.PARTIAL_CORRUPTION

    def test_empty_buffer_is_clean(self, detector):
        buffer = PixelBuffer.from_array(np.zeros((0, 0, 4), dtype=np.uint8))

        result = detector.detect(buffer)

        assert result.sampled_pixels == 0
        assert result.verdict == CorruptnessVerdict.NONE

    # ============================================================================
    # DETERMINISM AND RESULT FORMAT TESTS
    # ============================================================================

    def test_repeated_detection_is_deterministic(self, detector):
        rng = np.random.default_rng(seed=1234)
        array = rng.integers(0, 256, size=(333, 517, 4), dtype=np.uint8)
        array[:, :, :3][array[:, :, 0] < 100] = 0
        buffer = PixelBuffer.from_array(array)

        results = [detector.detect(buffer) for _ in range(5)]

        assert len({r.verdict for r in results}) == 1
        assert len({r.black_samples for r in results}) == 1
        assert len({r.sampled_pixels for r in results}) == 1

    def test_result_to_dict(self, detector, rgba_array):
        result = detector.detect(PixelBuffer.from_array(rgba_array(100, 100)))

        data = result.to_dict()

        assert isinstance(result, PartialCorruptionResult)
        assert data["verdict"] == "none"
        assert data["sampled_pixels"] == result.sampled_pixels
        assert set(data) == {
            "verdict",
            "black_samples",
            "sampled_pixels",
            "corruption_ratio",
            "step_x",
            "step_y",
            "processing_time_ms",
        }
