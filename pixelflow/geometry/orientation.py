"""
EXIF orientation normalization.

Cameras often store pixels in sensor order and record the intended
orientation in the EXIF Orientation tag (0x0112). auto_orient applies the
mirror and clockwise rotation that make such an image upright.
"""

import logging
from typing import Union

import numpy as np
from PIL import Image

from pixelflow.core.enums import ExifOrientation
from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.utils.decorators import image_operation

logger = logging.getLogger(__name__)

EXIF_ORIENTATION_TAG = 0x0112


def read_orientation(image: Image.Image) -> ExifOrientation:
    """
    Read the orientation tag of a PIL image.

    Args:
        image: PIL Image, typically freshly opened by the I/O layer

    Returns:
        Stored orientation, TOP_LEFT if the tag is absent or unknown
    """
    value = image.getexif().get(EXIF_ORIENTATION_TAG, ExifOrientation.TOP_LEFT.value)
    return ExifOrientation.from_tag(value)


@image_operation("auto_orient")
def auto_orient(
    source: PixelBuffer, orientation: Union[ExifOrientation, int]
) -> PixelBuffer:
    """
    Transform an image so that it displays upright.

    Args:
        source: Source image in stored (sensor) orientation
        orientation: ExifOrientation or raw tag value 1-8; unknown values
            are treated as TOP_LEFT

    Returns:
        Upright image (a copy when no transformation is needed)
    """
    if isinstance(orientation, bool) or not isinstance(orientation, (int, ExifOrientation)):
        raise InvalidArgumentError(
            f"Orientation must be an ExifOrientation or tag value, got {orientation!r}",
            "auto_orient",
            source.width,
            source.height,
        )
    orientation = ExifOrientation.from_tag(orientation)

    if not orientation.requires_transformation:
        return source.copy()

    logger.debug(
        f"auto_orient: {orientation.name} (rotate {orientation.rotation_degrees}, "
        f"mirror h={orientation.flip_horizontal} v={orientation.flip_vertical})"
    )

    data = source.array
    if orientation.flip_horizontal:
        data = np.flip(data, axis=1)
    if orientation.flip_vertical:
        data = np.flip(data, axis=0)

    turns = orientation.rotation_degrees // 90
    if turns:
        data = np.rot90(data, k=-turns, axes=(0, 1))

    return source.with_data(np.ascontiguousarray(data))
