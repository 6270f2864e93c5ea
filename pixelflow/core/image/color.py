"""
Color normalization helpers.

Colors are accepted as a gray level, an (r, g, b) tuple or an (r, g, b, a)
tuple and converted to the channel layout of a given pixel format.
"""

import numbers
from typing import Sequence, Tuple, Union

from pixelflow.core.constants import FilterConstants, ImageConstants
from pixelflow.core.enums import PixelFormat

ColorLike = Union[int, Sequence[int]]
RGBA = Tuple[int, int, int, int]


def to_rgba(color: ColorLike) -> RGBA:
    """
    Normalize a color value to an RGBA tuple.

    Args:
        color: Gray level, (r, g, b) or (r, g, b, a)

    Returns:
        (r, g, b, a) tuple of ints in [0, 255]

    Raises:
        ValueError: If the color has the wrong arity or values out of range
    """
    if isinstance(color, bool):
        raise ValueError(f"Invalid color: {color!r}")

    if isinstance(color, numbers.Integral):
        values = (int(color), int(color), int(color), ImageConstants.CHANNEL_MAX)
    else:
        values = tuple(color)
        if len(values) == 3:
            values = values + (ImageConstants.CHANNEL_MAX,)
        elif len(values) != 4:
            raise ValueError(f"Color must have 3 or 4 components, got {len(values)}")

    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"Color components must be integers, got {value!r}")
        if not ImageConstants.CHANNEL_MIN <= value <= ImageConstants.CHANNEL_MAX:
            raise ValueError(f"Color component {value} outside 0-255")

    return tuple(int(value) for value in values)  # type: ignore[return-value]


def luma(r: int, g: int, b: int) -> int:
    """Truncated BT.601 luma of an RGB triple."""
    wr, wg, wb = FilterConstants.LUMA_WEIGHTS
    return (wr * r + wg * g + wb * b) // FilterConstants.LUMA_WEIGHT_SCALE


def to_pixel(color: ColorLike, pixel_format: PixelFormat) -> Tuple[int, ...]:
    """
    Convert a color to a pixel value in the channel order of a format.

    Args:
        color: Color value (see to_rgba)
        pixel_format: Target pixel format

    Returns:
        Tuple with one value per channel of the format
    """
    r, g, b, a = to_rgba(color)

    if pixel_format.is_gray:
        return (luma(r, g, b),)

    pixel = [0] * pixel_format.channels
    ri, gi, bi = pixel_format.rgb_indices
    pixel[ri], pixel[gi], pixel[bi] = r, g, b
    if pixel_format.has_alpha:
        pixel[pixel_format.alpha_index] = a
    return tuple(pixel)
