"""
Resize operations.

Handles:
- Resizing to target dimensions (automatic, fit, fill and exact modes)
- Scaling by a factor
- Quality-dependent interpolation, including progressive downscaling
"""

import logging
from typing import Tuple

import cv2
import numpy as np

from pixelflow.core.constants import GeometryConstants
from pixelflow.core.enums import ResizeMode, ResizeQuality
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.utils.decorators import image_operation, timer
from pixelflow.core.utils.params_processor import params_to_dict, prepare_params
from pixelflow.geometry.dimensions import calculate_resize_dimensions, ensure_representable
from pixelflow.schemas.operations import ResizeParams, ScaleParams

logger = logging.getLogger(__name__)

_INTERPOLATION = {
    ResizeQuality.LOW: cv2.INTER_NEAREST,
    ResizeQuality.MEDIUM: cv2.INTER_LINEAR,
    ResizeQuality.HIGH: cv2.INTER_CUBIC,
    ResizeQuality.ULTRA: cv2.INTER_CUBIC,
}


@image_operation("resize")
def resize(
    source: PixelBuffer,
    target_width: int,
    target_height: int,
    mode: ResizeMode = ResizeMode.AUTOMATIC,
    quality: ResizeQuality = ResizeQuality.HIGH,
) -> PixelBuffer:
    """
    Resize an image.

    Args:
        source: Source image
        target_width: Target width (> 0)
        target_height: Target height (> 0)
        mode: AUTOMATIC/FIT keep the aspect ratio inside the target box,
            FILL keeps the aspect ratio and covers the box (no cropping),
            EXACT stretches to the target size
        quality: Interpolation quality

    Returns:
        Resized image, or ``source`` itself if the target size equals the
        source size. A different target that still yields the source size
        returns a copy.

    Raises:
        InvalidArgumentError: If a target dimension is not positive
        UnsupportedError: If the computed size exceeds the maximum dimension
    """
    params = prepare_params(
        ResizeParams,
        "resize",
        source,
        target_width=target_width,
        target_height=target_height,
        mode=mode,
        quality=quality,
    )

    if (params.target_width, params.target_height) == source.size:
        return source

    width, height = calculate_resize_dimensions(
        source.width, source.height, params.target_width, params.target_height, params.mode
    )
    if (width, height) == source.size:
        return source.copy()

    ensure_representable(width, height, "resize", source.width, source.height)
    logger.debug(
        f"resize: {source.width}x{source.height} -> {width}x{height} {params_to_dict(params)}"
    )

    resized = _resample(source.array, (width, height), params.quality)
    return source.with_data(resized)


@image_operation("scale")
def scale(
    source: PixelBuffer,
    factor: float,
    mode: ResizeMode = ResizeMode.AUTOMATIC,
    quality: ResizeQuality = ResizeQuality.HIGH,
) -> PixelBuffer:
    """
    Scale an image by a factor.

    Target dimensions are ``max(1, int(width * factor))`` and
    ``max(1, int(height * factor))``; the result is produced by resize.

    Args:
        source: Source image
        factor: Scale factor (> 0, finite)
        mode: Resize mode passed to resize
        quality: Interpolation quality

    Returns:
        Scaled image (``source`` itself when the size does not change)
    """
    params = prepare_params(
        ScaleParams, "scale", source, factor=factor, mode=mode, quality=quality
    )
    width = max(1, int(source.width * params.factor))
    height = max(1, int(source.height * params.factor))
    ensure_representable(width, height, "scale", source.width, source.height)
    return resize(source, width, height, params.mode, params.quality)


def _resample(data: np.ndarray, size: Tuple[int, int], quality: ResizeQuality) -> np.ndarray:
    """
    Resample pixel data to ``size`` (width, height).

    ULTRA quality halves the image with area averaging while it is at least
    twice the target size in either dimension, then finishes with bicubic
    interpolation.
    """
    width, height = size
    channels = data.shape[2]

    if quality is ResizeQuality.ULTRA:
        data = _progressive_downscale(data, width, height)

    current_height, current_width = data.shape[:2]
    if (current_width, current_height) != (width, height):
        data = cv2.resize(data, (width, height), interpolation=_INTERPOLATION[quality])

    # cv2 drops the channel axis of single-channel images
    return data.reshape(height, width, channels)


@timer
def _progressive_downscale(data: np.ndarray, width: int, height: int) -> np.ndarray:
    channels = data.shape[2]
    step = GeometryConstants.PROGRESSIVE_STEP_FACTOR
    current_height, current_width = data.shape[:2]

    while current_width >= width * step or current_height >= height * step:
        next_width = max(width, int(current_width / step))
        next_height = max(height, int(current_height / step))
        if (next_width, next_height) == (current_width, current_height):
            break
        data = cv2.resize(data, (next_width, next_height), interpolation=cv2.INTER_AREA)
        data = data.reshape(next_height, next_width, channels)
        current_width, current_height = next_width, next_height

    return data
