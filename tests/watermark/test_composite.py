"""
Tests for RGBA layer compositing
"""

import numpy as np

from pixelflow import PixelBuffer, PixelFormat
from pixelflow.watermark.composite import clip_region, composite


def red_layer(width, height, alpha=255):
    layer = np.zeros((height, width, 4), dtype=np.uint8)
    layer[:, :, 0] = 255
    layer[:, :, 3] = alpha
    return layer


class TestClipRegion:
    """Test rectangle intersection"""

    def test_inside(self):
        """Test a rectangle fully inside the target"""
        assert clip_region(100, 50, 10, 5, 20, 10) == (10, 5, 30, 15)

    def test_partially_outside(self):
        """Test clipping at the edges"""
        assert clip_region(100, 50, -5, 40, 20, 20) == (0, 40, 15, 50)

    def test_outside(self):
        """Test rectangles that miss the target"""
        assert clip_region(100, 50, 100, 0, 10, 10) is None
        assert clip_region(100, 50, -10, 0, 10, 10) is None


class TestComposite:
    """Test source-over blending"""

    def test_opaque_layer(self):
        """Test that an opaque layer replaces the covered pixels"""
        target = PixelBuffer.blank(20, 10, PixelFormat.RGB24)

        assert composite(target, red_layer(5, 5), 2, 3)
        assert target.pixel(2, 3) == (255, 0, 0)
        assert target.pixel(6, 7) == (255, 0, 0)
        assert target.pixel(7, 3) == (0, 0, 0)
        assert target.pixel(1, 3) == (0, 0, 0)

    def test_opacity(self):
        """Test that opacity scales the layer alpha"""
        target = PixelBuffer.blank(4, 4, PixelFormat.RGB24)
        composite(target, red_layer(4, 4), 0, 0, opacity=0.5)

        assert target.pixel(0, 0) == (128, 0, 0)

    def test_zero_opacity(self):
        """Test that an invisible layer changes nothing"""
        target = PixelBuffer.blank(4, 4, PixelFormat.RGB24, fill=(10, 20, 30))
        composite(target, red_layer(4, 4), 0, 0, opacity=0.0)

        assert target.pixel(3, 3) == (10, 20, 30)

    def test_bgr_target(self):
        """Test channel reordering for BGR targets"""
        target = PixelBuffer.blank(4, 4, PixelFormat.BGR24)
        composite(target, red_layer(4, 4), 0, 0)

        assert target.pixel(0, 0) == (0, 0, 255)

    def test_gray_target(self):
        """Test that layers are reduced to luma for gray targets"""
        target = PixelBuffer.blank(4, 4, PixelFormat.GRAY8)
        composite(target, red_layer(4, 4), 0, 0)

        assert target.pixel(0, 0) == (76,)

    def test_transparent_target(self):
        """Test straight-alpha blending onto a transparent target"""
        target = PixelBuffer.blank(4, 4, PixelFormat.ARGB32)
        composite(target, red_layer(4, 4, alpha=128), 0, 0)

        assert target.pixel(0, 0) == (255, 0, 0, 128)

    def test_opaque_alpha_target(self):
        """Test that opaque targets stay opaque"""
        target = PixelBuffer.blank(4, 4, PixelFormat.BGRA32, fill=(0, 0, 0, 255))
        composite(target, red_layer(4, 4, alpha=128), 0, 0)

        blue, green, red, alpha = target.pixel(0, 0)
        assert alpha == 255
        assert (blue, green) == (0, 0)
        assert red == 128

    def test_clipped_layer(self):
        """Test layers hanging over the top-left corner"""
        target = PixelBuffer.blank(10, 10, PixelFormat.RGB24)

        assert composite(target, red_layer(4, 4), -2, -2)
        assert target.pixel(1, 1) == (255, 0, 0)
        assert target.pixel(2, 2) == (0, 0, 0)

    def test_layer_outside(self):
        """Test that a layer outside the target is ignored"""
        target = PixelBuffer.blank(10, 10, PixelFormat.RGB24)

        assert not composite(target, red_layer(4, 4), 20, 20)
        assert not target.array.any()
