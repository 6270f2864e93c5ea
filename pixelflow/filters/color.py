"""
Color remapping filters.

Every filter here is a per-channel value mapping, implemented as 256-entry
lookup tables applied to the color channels (alpha is copied unchanged):
- grayscale (BT.601 luma)
- brightness (multiplicative and additive)
- contrast around mid-gray
- sepia toning
- inversion
"""

import logging

import numpy as np

from pixelflow.core.constants import FilterConstants, ImageConstants
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import clamp_to_uint8, ensure_color
from pixelflow.core.image.kernels import apply_luts
from pixelflow.core.utils.decorators import image_operation
from pixelflow.core.utils.params_processor import prepare_params
from pixelflow.filters.channels import luma_levels, map_color, spread_gray, with_color
from pixelflow.schemas.operations import (
    BrightnessOffsetParams,
    BrightnessParams,
    ContrastParams,
    SepiaParams,
)

logger = logging.getLogger(__name__)

_LEVELS = np.arange(ImageConstants.LUT_SIZE, dtype=np.float64)


def _linear_table(factor: float, offset: float) -> np.ndarray:
    """Lookup table for v * factor + offset, rounded and clamped."""
    return clamp_to_uint8(_LEVELS * factor + offset)


@image_operation("grayscale")
def grayscale(source: PixelBuffer) -> PixelBuffer:
    """
    Convert to grayscale.

    Each color channel receives int(0.299 R + 0.587 G + 0.114 B); the pixel
    format and alpha are preserved. GRAY8 input yields a copy.
    """
    if source.pixel_format.is_gray:
        return source.copy()
    return spread_gray(source, luma_levels(source))


@image_operation("brightness")
def brightness(source: PixelBuffer, factor: float) -> PixelBuffer:
    """
    Multiply every color channel by ``factor`` (1 = unchanged), clamped to 0-255.

    Raises:
        InvalidArgumentError: If factor is NaN or infinite
    """
    params = prepare_params(BrightnessParams, "brightness", source, factor=factor)
    return map_color(source, _linear_table(params.factor, 0.0))


@image_operation("brightness_offset")
def brightness_offset(source: PixelBuffer, offset: float) -> PixelBuffer:
    """
    Add ``offset`` to every color channel, clamped to 0-255.

    Args:
        source: Source image
        offset: Value in [-255, 255]
    """
    params = prepare_params(BrightnessOffsetParams, "brightness_offset", source, offset=offset)
    return map_color(source, _linear_table(1.0, params.offset))


@image_operation("contrast")
def contrast(source: PixelBuffer, factor: float) -> PixelBuffer:
    """
    Scale channel values away from (or toward) mid-gray.

    Computes v * factor + (1 - factor) * 128, clamped. A factor of 1 leaves
    the image unchanged, 0 yields flat mid-gray.
    """
    params = prepare_params(ContrastParams, "contrast", source, factor=factor)
    offset = (1.0 - params.factor) * FilterConstants.CONTRAST_PIVOT
    return map_color(source, _linear_table(params.factor, offset))


def sepia_tables(intensity: float = FilterConstants.DEFAULT_SEPIA_INTENSITY):
    """
    Build the red, green and blue sepia lookup tables.

    Each table is evaluated at a gray input i (the same value in R, G and B)
    and capped at 255. Intermediate intensities blend linearly between the
    identity and the full table, truncating the result.

    Args:
        intensity: Value in [0, 1]

    Returns:
        Tuple of three uint8 arrays (red, green, blue)
    """
    tables = []
    for row in (FilterConstants.SEPIA_RED, FilterConstants.SEPIA_GREEN, FilterConstants.SEPIA_BLUE):
        r_weight, g_weight, b_weight = row
        toned = _LEVELS * r_weight + _LEVELS * g_weight + _LEVELS * b_weight
        full = np.minimum(np.floor(toned), ImageConstants.CHANNEL_MAX)
        if intensity < 1.0:
            full = _LEVELS + (full - _LEVELS) * intensity
        tables.append(clamp_to_uint8(full, round_values=False))
    return tuple(tables)


@image_operation("sepia")
def sepia(
    source: PixelBuffer, intensity: float = FilterConstants.DEFAULT_SEPIA_INTENSITY
) -> PixelBuffer:
    """
    Apply a sepia tone.

    Args:
        source: Source image (GRAY8 is expanded to RGB24 first)
        intensity: 0 returns ``source`` itself, 1 applies full sepia

    Returns:
        Sepia-toned image
    """
    params = prepare_params(SepiaParams, "sepia", source, intensity=intensity)
    if params.intensity == 0:
        return source

    colored = ensure_color(source)
    red, green, blue = sepia_tables(params.intensity)

    tables = [None, None, None]
    ri, gi, bi = colored.pixel_format.rgb_indices
    tables[ri], tables[gi], tables[bi] = red, green, blue

    toned = apply_luts(colored.color_channels(), tables)
    return with_color(colored, toned)


@image_operation("invert")
def invert(source: PixelBuffer) -> PixelBuffer:
    """Invert every color channel (255 - v); alpha is preserved."""
    table = (ImageConstants.CHANNEL_MAX - _LEVELS).astype(np.uint8)
    return map_color(source, table)
