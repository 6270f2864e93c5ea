"""
Watermark anchor calculation.
"""

from typing import Tuple, Union

from pixelflow.core.enums import WatermarkPosition
from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.utils.enum_converter import parse_enum


def calculate_position(
    image_width: int,
    image_height: int,
    content_width: int,
    content_height: int,
    position: Union[WatermarkPosition, str],
    margin: int = 0,
) -> Tuple[int, int]:
    """
    Compute the top-left corner of watermark content inside an image.

    Edge-aligned axes are inset by ``margin``; centered axes ignore it and
    use (dimension - content) // 2. Content larger than the image yields
    negative coordinates; compositing clips it.

    Args:
        image_width: Target image width (> 0)
        image_height: Target image height (> 0)
        content_width: Watermark content width (> 0)
        content_height: Watermark content height (> 0)
        position: Anchor on the nine-point grid (enum or name)
        margin: Inset from the edges (>= 0)

    Returns:
        (x, y) of the content's top-left corner

    Raises:
        InvalidArgumentError: For non-positive dimensions, negative margin or
            an unknown position name

    Example:
        >>> calculate_position(200, 100, 40, 20, WatermarkPosition.CENTER, 10)
        (80, 40)
        >>> calculate_position(200, 100, 40, 20, WatermarkPosition.BOTTOM_RIGHT, 10)
        (150, 70)
    """
    if image_width <= 0 or image_height <= 0:
        raise InvalidArgumentError(
            f"Image dimensions must be positive: width={image_width}, height={image_height}",
            "watermark",
        )
    if content_width <= 0 or content_height <= 0:
        raise InvalidArgumentError(
            f"Watermark dimensions must be positive: width={content_width}, "
            f"height={content_height}",
            "watermark",
            image_width,
            image_height,
        )
    if margin < 0:
        raise InvalidArgumentError(
            f"Margin cannot be negative, got {margin}", "watermark", image_width, image_height
        )

    try:
        position = parse_enum(position, WatermarkPosition)
    except ValueError as e:
        raise InvalidArgumentError(str(e), "watermark", image_width, image_height) from e

    horizontal = position.horizontal
    if horizontal == "left":
        x = margin
    elif horizontal == "right":
        x = image_width - content_width - margin
    else:
        x = (image_width - content_width) // 2

    vertical = position.vertical
    if vertical == "top":
        y = margin
    elif vertical == "bottom":
        y = image_height - content_height - margin
    else:
        y = (image_height - content_height) // 2

    return x, y
