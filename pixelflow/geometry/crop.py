"""
Crop operation: extract a rectangular region as an independent image.
"""

import logging

from pixelflow.core.exceptions import OutOfBoundsError
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.utils.decorators import image_operation
from pixelflow.core.utils.params_processor import prepare_params
from pixelflow.schemas.operations import CropParams

logger = logging.getLogger(__name__)


@image_operation("crop")
def crop(source: PixelBuffer, x: int, y: int, width: int, height: int) -> PixelBuffer:
    """
    Extract the region with top-left corner (x, y) and size width x height.

    Args:
        source: Source image
        x: Left edge (>= 0)
        y: Top edge (>= 0)
        width: Region width (> 0)
        height: Region height (> 0)

    Returns:
        New buffer holding a copy of the region (never a view of the source)

    Raises:
        InvalidArgumentError: If width/height <= 0 or x/y < 0
        OutOfBoundsError: If the region extends past the source edges
    """
    params = prepare_params(CropParams, "crop", source, x=x, y=y, width=width, height=height)

    x2 = params.x + params.width
    y2 = params.y + params.height
    if x2 > source.width or y2 > source.height:
        message = (
            f"Crop region ({params.x}, {params.y}, {params.width}x{params.height}) "
            f"exceeds image bounds {source.width}x{source.height}"
        )
        logger.warning(message)
        raise OutOfBoundsError(message, "crop", source.width, source.height)

    region = source.array[params.y : y2, params.x : x2]
    return source.with_data(region.copy())
