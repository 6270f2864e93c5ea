"""
Tests for pad and pad_uniform
"""

import numpy as np
import pytest

from pixelflow import (
    InvalidArgumentError,
    PixelFormat,
    UnsupportedError,
    pad,
    pad_uniform,
)


class TestPad:
    """Test padding"""

    def test_dimensions_and_placement(self, rgb_image):
        """Test output size and source offset"""
        result = pad(rgb_image, top=1, right=2, bottom=3, left=4)

        assert result.size == (206, 104)
        assert np.array_equal(result.array[1:101, 4:204], rgb_image.array)

    def test_default_fill_is_zero(self, square_image):
        """Test zero fill without a color"""
        result = pad(square_image, 5, 5, 5, 5)

        assert result.pixel(0, 0) == (0, 0, 0)
        assert result.pixel(5, 5) == (255, 255, 255)

    def test_fill_color(self, square_image):
        """Test the padding color"""
        result = pad(square_image, top=10, color=(0, 255, 0))

        assert result.size == (100, 110)
        assert result.pixel(50, 0) == (0, 255, 0)
        assert result.pixel(50, 10) == square_image.pixel(50, 0)

    def test_fill_uses_channel_order(self, bgr_image):
        """Test fill in BGR layout"""
        result = pad(bgr_image, left=1, color=(255, 0, 0))
        assert result.pixel(0, 0) == (0, 0, 255)

    def test_alpha_fill_is_transparent(self, argb_image):
        """Test zero fill for alpha formats"""
        result = pad(argb_image, 2, 2, 2, 2)

        assert result.pixel_format is PixelFormat.ARGB32
        assert result.pixel(0, 0) == (0, 0, 0, 0)

    def test_gray(self, gray_image):
        """Test padding gray images with a gray level"""
        result = pad(gray_image, 1, 1, 1, 1, color=200)

        assert result.size == (202, 102)
        assert result.pixel(0, 0) == (200,)

    def test_negative_padding_trims(self, rgb_image):
        """Test that negative values crop the source"""
        result = pad(rgb_image, top=-10, left=-20)

        assert result.size == (180, 90)
        assert np.array_equal(result.array, rgb_image.array[10:, 20:])

    def test_mixed_padding(self, rgb_image):
        """Test trimming one side while padding another"""
        result = pad(rgb_image, left=-50, right=10)

        assert result.size == (160, 100)
        assert np.array_equal(result.array[:, :150], rgb_image.array[:, 50:])
        assert not result.array[:, 150:].any()

    def test_zero_padding_is_copy(self, rgb_image):
        """Test that no padding copies the source"""
        result = pad(rgb_image)

        assert result is not rgb_image
        assert result.same_pixels(rgb_image)

    @pytest.mark.parametrize(
        "kwargs",
        [{"left": -200}, {"top": -60, "bottom": -40}, {"right": -250}],
    )
    def test_non_positive_result(self, rgb_image, kwargs):
        """Test that padding to zero or less is unsupported"""
        with pytest.raises(UnsupportedError) as exc_info:
            pad(rgb_image, **kwargs)

        assert isinstance(exc_info.value, InvalidArgumentError)
        assert exc_info.value.operation == "pad"

    def test_too_large(self, rgb_image):
        """Test results above the dimension limit"""
        with pytest.raises(UnsupportedError):
            pad(rgb_image, left=40000)

    def test_invalid_color(self, rgb_image):
        """Test color validation"""
        with pytest.raises(InvalidArgumentError):
            pad(rgb_image, 1, 1, 1, 1, color=(0, 0, 999))


class TestPadUniform:
    """Test uniform padding"""

    def test_uniform(self, rgb_image):
        """Test equal padding on all sides"""
        result = pad_uniform(rgb_image, 10, color=(255, 255, 255))

        assert result.size == (220, 120)
        assert result.pixel(0, 0) == (255, 255, 255)
        assert result.pixel(219, 119) == (255, 255, 255)
        assert np.array_equal(result.array[10:110, 10:210], rgb_image.array)
