"""
Dimension calculations for geometric operations.

Pure integer/float math with no pixel access: aspect-ratio handling for the
resize modes, bounding boxes of rotated rectangles and the size limit
shared by every operation that allocates a larger image.
"""

import math
from typing import Tuple

from pixelflow.core.constants import GeometryConstants, ImageConstants
from pixelflow.core.enums import ResizeMode
from pixelflow.core.exceptions import UnsupportedError


def calculate_resize_dimensions(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
    mode: ResizeMode,
) -> Tuple[int, int]:
    """
    Compute output dimensions for a resize.

    Args:
        source_width: Source width (> 0)
        source_height: Source height (> 0)
        target_width: Requested width (> 0)
        target_height: Requested height (> 0)
        mode: Resize mode

    Returns:
        (width, height), each at least 1

    Example:
        >>> calculate_resize_dimensions(200, 100, 150, 150, ResizeMode.FIT)
        (150, 75)
        >>> calculate_resize_dimensions(200, 100, 150, 150, ResizeMode.FILL)
        (300, 150)
    """
    if mode is ResizeMode.EXACT:
        return target_width, target_height

    source_aspect = source_width / source_height
    target_aspect = target_width / target_height

    if mode is ResizeMode.FILL:
        # Scale by the larger ratio: the result covers the target
        if source_aspect > target_aspect:
            width = int(target_height * source_aspect)
            height = target_height
        else:
            width = target_width
            height = int(target_width / source_aspect)
    else:
        # FIT and AUTOMATIC: scale by the smaller ratio
        if source_aspect > target_aspect:
            width = target_width
            height = int(target_width / source_aspect)
        else:
            width = int(target_height * source_aspect)
            height = target_height

    return max(1, width), max(1, height)


def normalize_degrees(degrees: float) -> float:
    """Normalize an angle into [0, 360)."""
    normalized = math.fmod(degrees, GeometryConstants.FULL_TURN_DEGREES)
    if normalized < 0:
        normalized += GeometryConstants.FULL_TURN_DEGREES
    if normalized >= GeometryConstants.FULL_TURN_DEGREES:
        normalized = 0.0
    return normalized


def quarter_turns(degrees: float) -> int:
    """
    Number of clockwise quarter turns an angle corresponds to.

    Args:
        degrees: Angle normalized into [0, 360)

    Returns:
        0-3 if the angle is within ROTATION_EPSILON of a multiple of 90
        (360 counts as 0), otherwise -1
    """
    for turns in range(5):
        if abs(degrees - 90.0 * turns) < GeometryConstants.ROTATION_EPSILON:
            return turns % 4
    return -1


def rotated_bounds(width: int, height: int, degrees: float) -> Tuple[int, int]:
    """
    Bounding box of a width x height rectangle rotated by ``degrees``.

    Returns:
        (ceil(|w cos| + |h sin|), ceil(|w sin| + |h cos|))
    """
    radians = math.radians(degrees)
    cos = abs(math.cos(radians))
    sin = abs(math.sin(radians))
    new_width = math.ceil(width * cos + height * sin)
    new_height = math.ceil(width * sin + height * cos)
    return max(1, new_width), max(1, new_height)


def ensure_representable(
    width: int, height: int, operation: str, source_width: int = -1, source_height: int = -1
) -> None:
    """
    Check that an output size can be allocated and processed.

    Raises:
        UnsupportedError: If either dimension is non-positive or larger than
            ImageConstants.MAX_IMAGE_DIMENSION
    """
    if width < ImageConstants.MIN_IMAGE_DIMENSION or height < ImageConstants.MIN_IMAGE_DIMENSION:
        raise UnsupportedError(
            f"Resulting dimensions must be positive: width={width}, height={height}",
            operation,
            source_width,
            source_height,
        )
    limit = ImageConstants.MAX_IMAGE_DIMENSION
    if width > limit or height > limit:
        raise UnsupportedError(
            f"Resulting dimensions {width}x{height} exceed the maximum of {limit} pixels per side",
            operation,
            source_width,
            source_height,
        )
