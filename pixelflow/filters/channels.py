"""
Channel helpers shared by the filters.

Filters compute new color channels and reattach the untouched alpha
channel of the source.
"""

from typing import Optional

import numpy as np

from pixelflow.core.enums import PixelFormat
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.color import luma


def with_color(
    source: PixelBuffer, color: np.ndarray, pixel_format: Optional[PixelFormat] = None
) -> PixelBuffer:
    """
    Build a result buffer from new color channels and the source alpha.

    Args:
        source: Buffer the color was computed from
        color: uint8 array (height, width, color_channels)
        pixel_format: Result format (defaults to the source format)

    Returns:
        New PixelBuffer
    """
    pixel_format = pixel_format or source.pixel_format
    alpha = source.alpha_channel()
    if pixel_format.has_alpha and alpha is not None:
        data = np.dstack([color, alpha])
    else:
        data = np.ascontiguousarray(color)
    return PixelBuffer(data, pixel_format, copy=False)


def map_color(source: PixelBuffer, table: np.ndarray) -> PixelBuffer:
    """Map every color channel through one 256-entry lookup table."""
    return with_color(source, table[source.color_channels()])


def luma_levels(source: PixelBuffer) -> np.ndarray:
    """
    Truncated BT.601 luma of every pixel.

    Returns:
        uint8 array of shape (height, width); GRAY8 data is returned as is
    """
    if source.pixel_format.is_gray:
        return source.array[:, :, 0].copy()

    ri, gi, bi = source.pixel_format.rgb_indices
    data = source.array.astype(np.int32)
    return luma(data[:, :, ri], data[:, :, gi], data[:, :, bi]).astype(np.uint8)


def spread_gray(source: PixelBuffer, levels: np.ndarray) -> PixelBuffer:
    """
    Write gray levels into every color channel of a color result.

    GRAY8 sources produce RGB24 results; other formats keep their layout
    and alpha.
    """
    pixel_format = source.pixel_format.as_color()
    color = np.repeat(levels[:, :, np.newaxis], pixel_format.color_channels, axis=2)
    return with_color(source, color, pixel_format)
