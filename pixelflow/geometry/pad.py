"""
Padding operations.

Handles:
- Adding borders of independent size on each side
- Uniform borders
- Negative padding, which trims the corresponding edge
"""

import logging
from typing import Optional

from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.color import ColorLike
from pixelflow.core.utils.decorators import image_operation
from pixelflow.core.utils.params_processor import prepare_params
from pixelflow.geometry.dimensions import ensure_representable
from pixelflow.schemas.operations import PadParams

logger = logging.getLogger(__name__)


@image_operation("pad")
def pad(
    source: PixelBuffer,
    top: int = 0,
    right: int = 0,
    bottom: int = 0,
    left: int = 0,
    color: Optional[ColorLike] = None,
) -> PixelBuffer:
    """
    Add borders around an image.

    Args:
        source: Source image
        top: Rows added above (negative trims rows)
        right: Columns added to the right
        bottom: Rows added below
        left: Columns added to the left
        color: Border fill color (None = zero fill)

    Returns:
        New image of size (width + left + right) x (height + top + bottom)
        with the source placed at (left, top)

    Raises:
        UnsupportedError: If the resulting width or height is not positive
            or exceeds the maximum dimension
    """
    params = prepare_params(
        PadParams, "pad", source, top=top, right=right, bottom=bottom, left=left, color=color
    )

    width = source.width + params.left + params.right
    height = source.height + params.top + params.bottom
    ensure_representable(width, height, "pad", source.width, source.height)

    result = PixelBuffer.blank(width, height, source.pixel_format, params.color)

    # Negative padding shifts the visible window into the source
    src_x = max(0, -params.left)
    src_y = max(0, -params.top)
    dst_x = max(0, params.left)
    dst_y = max(0, params.top)
    copy_width = min(source.width - src_x, width - dst_x)
    copy_height = min(source.height - src_y, height - dst_y)

    if copy_width > 0 and copy_height > 0:
        result.array[dst_y : dst_y + copy_height, dst_x : dst_x + copy_width] = source.array[
            src_y : src_y + copy_height, src_x : src_x + copy_width
        ]
    else:
        logger.debug("pad: source trimmed away entirely, result is fill only")

    return result


def pad_uniform(
    source: PixelBuffer, padding: int, color: Optional[ColorLike] = None
) -> PixelBuffer:
    """Pad all four sides by the same amount."""
    return pad(source, padding, padding, padding, padding, color)
