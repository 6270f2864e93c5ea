"""
Source-over compositing of RGBA layers into pixel buffers.

Layers are straight-alpha RGBA arrays. Compositing writes directly into the
target buffer's array; the parts of a layer that fall outside the target
are clipped.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from pixelflow.core.constants import FilterConstants, ImageConstants
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import clamp_to_uint8

logger = logging.getLogger(__name__)

Region = Tuple[int, int, int, int]


def clip_region(
    target_width: int, target_height: int, x: int, y: int, width: int, height: int
) -> Optional[Region]:
    """
    Intersect a placed rectangle with the target.

    Returns:
        (x0, y0, x1, y1) in target coordinates, or None if nothing overlaps
    """
    x0, y0 = max(0, x), max(0, y)
    x1, y1 = min(target_width, x + width), min(target_height, y + height)
    if x0 >= x1 or y0 >= y1:
        return None
    return x0, y0, x1, y1


def _layer_color(layer_rgb: np.ndarray, target: PixelBuffer) -> np.ndarray:
    """Reorder (or reduce to luma) layer RGB for the target's color channels."""
    pixel_format = target.pixel_format
    if pixel_format.is_gray:
        luma = (
            FilterConstants.LUMA_RED * layer_rgb[:, :, 0]
            + FilterConstants.LUMA_GREEN * layer_rgb[:, :, 1]
            + FilterConstants.LUMA_BLUE * layer_rgb[:, :, 2]
        )
        return luma[:, :, np.newaxis]

    color = np.empty_like(layer_rgb)
    ri, gi, bi = pixel_format.rgb_indices
    color[:, :, ri] = layer_rgb[:, :, 0]
    color[:, :, gi] = layer_rgb[:, :, 1]
    color[:, :, bi] = layer_rgb[:, :, 2]
    return color


def composite(
    target: PixelBuffer, layer: np.ndarray, x: int, y: int, opacity: float = 1.0
) -> bool:
    """
    Blend an RGBA layer over ``target`` in place.

    Args:
        target: Buffer to modify
        layer: uint8 array (height, width, 4) in R, G, B, A order
        x: Target column of the layer's left edge (may be negative)
        y: Target row of the layer's top edge (may be negative)
        opacity: Multiplier applied to the layer alpha, in [0, 1]

    Returns:
        True if any pixel of the target was covered
    """
    layer_height, layer_width = layer.shape[:2]
    region = clip_region(target.width, target.height, x, y, layer_width, layer_height)
    if region is None:
        logger.debug(f"Layer {layer_width}x{layer_height} at ({x}, {y}) is outside the target")
        return False

    x0, y0, x1, y1 = region
    scale = float(ImageConstants.CHANNEL_MAX)
    src = layer[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / scale
    src_color = _layer_color(src[:, :, :3], target)
    src_alpha = src[:, :, 3:4] * opacity

    view = target.array[y0:y1, x0:x1]
    color_count = target.pixel_format.color_channels
    dst_color = view[:, :, :color_count].astype(np.float32) / scale

    if target.has_alpha:
        dst_alpha = view[:, :, color_count:].astype(np.float32) / scale
        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
        weighted = src_color * src_alpha + dst_color * dst_alpha * (1.0 - src_alpha)
        out_color = np.divide(
            weighted, out_alpha, out=np.zeros_like(weighted), where=out_alpha > 0
        )
        view[:, :, color_count:] = clamp_to_uint8(out_alpha * scale)
    else:
        out_color = src_color * src_alpha + dst_color * (1.0 - src_alpha)

    view[:, :, :color_count] = clamp_to_uint8(out_color * scale)
    return True
