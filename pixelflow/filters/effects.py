"""
Spatial effects computed per pixel from its position.
"""

import logging
import math

import numpy as np

from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import clamp_to_uint8
from pixelflow.core.utils.decorators import image_operation
from pixelflow.core.utils.params_processor import prepare_params
from pixelflow.filters.channels import with_color
from pixelflow.schemas.operations import VignetteParams

logger = logging.getLogger(__name__)


def vignette_mask(width: int, height: int, intensity: float) -> np.ndarray:
    """
    Per-pixel darkening factors for a vignette.

    Args:
        width: Image width
        height: Image height
        intensity: Darkening strength in [0, 1]

    Returns:
        float64 array (height, width) of factors in [0, 1]: 1 at the center
        (width / 2, height / 2), 1 - intensity at the corners
    """
    center_x = width / 2.0
    center_y = height / 2.0
    max_distance = math.sqrt(center_x * center_x + center_y * center_y)

    dx = np.arange(width, dtype=np.float64) - center_x
    dy = np.arange(height, dtype=np.float64) - center_y
    distance = np.sqrt(dx[np.newaxis, :] ** 2 + dy[:, np.newaxis] ** 2)

    return np.clip(1.0 - (distance / max_distance) * intensity, 0.0, 1.0)


@image_operation("vignette")
def vignette(source: PixelBuffer, intensity: float) -> PixelBuffer:
    """
    Darken the image progressively toward its corners.

    Args:
        source: Source image
        intensity: Value in [0, 1]; 0 returns an unchanged copy

    Returns:
        Vignetted image (channel values truncated, alpha preserved)
    """
    params = prepare_params(VignetteParams, "vignette", source, intensity=intensity)
    if params.intensity == 0:
        return source.copy()

    mask = vignette_mask(source.width, source.height, params.intensity)
    darkened = source.color_channels() * mask[:, :, np.newaxis]
    return with_color(source, clamp_to_uint8(darkened, round_values=False))
