"""
Image data utilities - modular architecture.

This package provides the shared pixel data layer:
- buffer: PixelBuffer, the in-memory image every operation works on
- color: Color normalization and per-format pixel values
- converters: Format conversions (pixel formats, PIL, float working arrays)
- kernels: Convolution kernels and lookup tables
"""

from pixelflow.core.image.color import luma, to_pixel, to_rgba
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import ImageConverters, require_buffer
from pixelflow.core.image.kernels import Kernel, apply_luts, build_lut, convolve

__all__ = [
    "PixelBuffer",
    "ImageConverters",
    "require_buffer",
    "Kernel",
    "convolve",
    "build_lut",
    "apply_luts",
    "to_rgba",
    "to_pixel",
    "luma",
]
