"""
Mirror transforms.
"""

import numpy as np

from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.utils.decorators import image_operation


@image_operation("flip")
def flip(source: PixelBuffer) -> PixelBuffer:
    """Mirror horizontally (left and right swap)."""
    return source.with_data(np.flip(source.array, axis=1).copy())


@image_operation("flop")
def flop(source: PixelBuffer) -> PixelBuffer:
    """Mirror vertically (top and bottom swap)."""
    return source.with_data(np.flip(source.array, axis=0).copy())
