"""
Tests for vignette
"""

import numpy as np
import pytest

from pixelflow import InvalidArgumentError, PixelBuffer, PixelFormat, vignette
from pixelflow.filters.effects import vignette_mask


@pytest.fixture
def white_image():
    """Create a 200x100 white RGB image"""
    return PixelBuffer.blank(200, 100, PixelFormat.RGB24, fill=(255, 255, 255))


class TestVignetteMask:
    """Test darkening factors"""

    def test_center_and_corners(self):
        """Test factor 1 at the center and 1 - intensity at the corners"""
        mask = vignette_mask(200, 100, 0.6)

        assert mask.shape == (100, 200)
        assert mask[50, 100] == pytest.approx(1.0)
        assert mask[0, 0] == pytest.approx(0.4)

    def test_monotonic_from_center(self):
        """Test that factors decrease away from the center"""
        mask = vignette_mask(200, 100, 1.0)
        row = mask[50, 100:]

        assert np.all(np.diff(row) <= 0)


class TestVignette:
    """Test the vignette operation"""

    def test_zero_intensity_is_copy(self, rgb_image):
        """Test that intensity 0 copies the source"""
        result = vignette(rgb_image, 0)

        assert result is not rgb_image
        assert result.same_pixels(rgb_image)

    def test_full_intensity(self, white_image):
        """Test the center and corner of a white image"""
        result = vignette(white_image, 1.0)

        assert result.pixel(100, 50) == (255, 255, 255)
        assert result.pixel(0, 0) == (0, 0, 0)

    def test_darkens_only(self, noise_image):
        """Test that no channel value increases"""
        result = vignette(noise_image, 0.8)
        assert np.all(result.array <= noise_image.array)

    def test_alpha_preserved(self, argb_image):
        """Test that alpha is unchanged"""
        result = vignette(argb_image, 0.5)

        assert result.pixel_format is PixelFormat.ARGB32
        assert np.array_equal(result.alpha_channel(), argb_image.alpha_channel())

    def test_gray(self, gray_image):
        """Test single-channel images"""
        result = vignette(gray_image, 0.5)

        assert result.pixel_format is PixelFormat.GRAY8
        assert result.size == gray_image.size

    @pytest.mark.parametrize("intensity", [-0.5, 2])
    def test_invalid_intensity(self, rgb_image, intensity):
        """Test intensity validation"""
        with pytest.raises(InvalidArgumentError):
            vignette(rgb_image, intensity)
