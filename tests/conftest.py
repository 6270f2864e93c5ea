"""
Pytest configuration and fixtures for pixelflow tests
"""

import cv2
import numpy as np
import pytest

from pixelflow import PixelBuffer, PixelFormat
from pixelflow.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_array():
    """Create a 200x100 RGB test array with some content"""
    image = np.zeros((100, 200, 3), dtype=np.uint8)
    cv2.rectangle(image, (20, 20), (80, 80), (255, 255, 255), -1)
    cv2.circle(image, (150, 50), 30, (200, 60, 20), -1)
    image[:, :, 2] = np.maximum(image[:, :, 2], np.arange(200, dtype=np.uint8)[np.newaxis, :])
    return image


@pytest.fixture
def rgb_image(test_array):
    """Create a 200x100 RGB24 test image"""
    return PixelBuffer.from_array(test_array, PixelFormat.RGB24)


@pytest.fixture
def bgr_image(test_array):
    """Create a 200x100 BGR24 test image (same pixels as rgb_image)"""
    return PixelBuffer.from_array(test_array[:, :, ::-1], PixelFormat.BGR24)


@pytest.fixture
def gray_image(test_array):
    """Create a 200x100 GRAY8 test image"""
    gray = cv2.cvtColor(test_array, cv2.COLOR_RGB2GRAY)
    return PixelBuffer.from_array(gray, PixelFormat.GRAY8)


@pytest.fixture
def argb_image(test_array):
    """Create a 200x100 ARGB32 test image with a horizontal alpha ramp"""
    alpha = np.tile(np.linspace(0, 255, 200).astype(np.uint8), (100, 1))
    data = np.dstack([test_array, alpha])
    return PixelBuffer.from_array(data, PixelFormat.ARGB32)


@pytest.fixture
def bgra_image(argb_image):
    """Create a 200x100 BGRA32 test image"""
    data = argb_image.to_array()[:, :, [2, 1, 0, 3]]
    return PixelBuffer.from_array(data, PixelFormat.BGRA32)


@pytest.fixture
def square_image():
    """Create a 100x100 RGB24 test image"""
    image = np.full((100, 100, 3), 255, dtype=np.uint8)
    cv2.rectangle(image, (25, 25), (75, 75), (0, 0, 255), -1)
    return PixelBuffer.from_array(image, PixelFormat.RGB24)


@pytest.fixture
def noise_image():
    """Create a 64x48 RGB24 image with random content"""
    rng = np.random.default_rng(42)
    data = rng.integers(0, 256, size=(48, 64, 3), dtype=np.uint8)
    return PixelBuffer.from_array(data, PixelFormat.RGB24)


@pytest.fixture
def logo_image():
    """Create a 40x20 opaque red ARGB32 watermark image"""
    return PixelBuffer.blank(40, 20, PixelFormat.ARGB32, fill=(255, 0, 0, 255))
