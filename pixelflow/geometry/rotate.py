"""
Rotation operation.

Multiples of 90 degrees relocate pixels losslessly; any other angle is
resampled bilinearly into the bounding box of the rotated image.
"""

import logging
from typing import Optional

import cv2
import numpy as np

from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.color import ColorLike, to_pixel
from pixelflow.core.utils.decorators import image_operation
from pixelflow.core.utils.params_processor import prepare_params
from pixelflow.geometry.dimensions import (
    ensure_representable,
    normalize_degrees,
    quarter_turns,
    rotated_bounds,
)
from pixelflow.schemas.operations import RotateParams

logger = logging.getLogger(__name__)


@image_operation("rotate")
def rotate(
    source: PixelBuffer, degrees: float, background: Optional[ColorLike] = None
) -> PixelBuffer:
    """
    Rotate an image clockwise.

    Args:
        source: Source image
        degrees: Clockwise angle; any finite value, normalized into [0, 360)
        background: Fill color for pixels not covered by the source
            (None leaves them zero, i.e. transparent for alpha formats)

    Returns:
        Rotated image. 0 (and 360) returns a copy; 90 and 270 swap width
        and height; other angles enlarge the canvas to the rotated bounding box.
    """
    params = prepare_params(
        RotateParams, "rotate", source, degrees=degrees, background=background
    )
    angle = normalize_degrees(params.degrees)

    turns = quarter_turns(angle)
    if turns == 0:
        return source.copy()
    if turns > 0:
        # np.rot90 turns counter-clockwise for positive k
        rotated = np.rot90(source.array, k=-turns, axes=(0, 1))
        return source.with_data(np.ascontiguousarray(rotated))

    width, height = rotated_bounds(source.width, source.height, angle)
    ensure_representable(width, height, "rotate", source.width, source.height)
    logger.debug(f"rotate: {angle:.3f} degrees, canvas {width}x{height}")

    # OpenCV pixel centers sit on integer coordinates and its angles are
    # counter-clockwise
    center_x = (source.width - 1) / 2.0
    center_y = (source.height - 1) / 2.0
    matrix = cv2.getRotationMatrix2D((center_x, center_y), -angle, 1.0)
    matrix[0, 2] += (width - 1) / 2.0 - center_x
    matrix[1, 2] += (height - 1) / 2.0 - center_y

    fill = [0.0, 0.0, 0.0, 0.0]
    if params.background is not None:
        for index, value in enumerate(to_pixel(params.background, source.pixel_format)):
            fill[index] = float(value)

    rotated = cv2.warpAffine(
        source.array,
        matrix,
        (width, height),
        flags=cv2.INTER_LINEAR,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=tuple(fill),
    )
    return source.with_data(rotated.reshape(height, width, source.channels))
