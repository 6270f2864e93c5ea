"""
Core modules for pixelflow: pixel buffers, enums, constants, errors and
the shared operation utilities.
"""

from .enums import ExifOrientation, PixelFormat, ResizeMode, ResizeQuality, WatermarkPosition
from .exceptions import (
    ImageProcessError,
    InvalidArgumentError,
    OutOfBoundsError,
    PixelFlowError,
    UnsupportedError,
)
from .image import PixelBuffer

__all__ = [
    "PixelBuffer",
    "PixelFormat",
    "ResizeMode",
    "ResizeQuality",
    "WatermarkPosition",
    "ExifOrientation",
    "PixelFlowError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "UnsupportedError",
    "ImageProcessError",
]
