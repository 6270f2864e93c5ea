"""
Tests for flip and flop
"""

import numpy as np

from pixelflow import PixelBuffer, PixelFormat, flip, flop


def small_image():
    return PixelBuffer(np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8))


class TestFlip:
    """Test horizontal mirroring"""

    def test_values(self):
        """Test that columns are reversed"""
        assert flip(small_image()).to_array().tolist() == [[3, 2, 1], [6, 5, 4]]

    def test_involution(self, rgb_image):
        """Test that flipping twice restores the image"""
        assert flip(flip(rgb_image)).same_pixels(rgb_image)

    def test_format_kept(self, bgra_image):
        """Test that format and size are unchanged"""
        result = flip(bgra_image)

        assert result.pixel_format is PixelFormat.BGRA32
        assert result.size == bgra_image.size
        assert result.pixel(0, 0) == bgra_image.pixel(199, 0)


class TestFlop:
    """Test vertical mirroring"""

    def test_values(self):
        """Test that rows are reversed"""
        assert flop(small_image()).to_array().tolist() == [[4, 5, 6], [1, 2, 3]]

    def test_involution(self, rgb_image):
        """Test that flopping twice restores the image"""
        assert flop(flop(rgb_image)).same_pixels(rgb_image)

    def test_does_not_modify_source(self, rgb_image):
        """Test that the input is left untouched"""
        before = rgb_image.copy()
        flop(rgb_image)

        assert rgb_image.same_pixels(before)
