"""
Convolution filters: Gaussian blur, sharpen and Sobel edge detection.

Pixels closer to an edge than the kernel radius are copied from the source
unchanged. Alpha is never convolved.
"""

import logging

import numpy as np

from pixelflow.core.constants import FilterConstants
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import clamp_to_uint8
from pixelflow.core.image.kernels import Kernel, convolve
from pixelflow.core.utils.decorators import image_operation
from pixelflow.core.utils.params_processor import prepare_params
from pixelflow.filters.channels import luma_levels, spread_gray, with_color
from pixelflow.schemas.operations import BlurParams, SharpenParams

logger = logging.getLogger(__name__)


def _apply_kernel(source: PixelBuffer, kernel: Kernel) -> PixelBuffer:
    filtered = convolve(source.color_channels(), kernel)
    return with_color(source, clamp_to_uint8(filtered))


@image_operation("blur")
def blur(source: PixelBuffer, radius: float) -> PixelBuffer:
    """
    Apply a Gaussian blur.

    Args:
        source: Source image
        radius: Blur radius (> 0); kernel size is max(3, int(2 * radius + 1))
            rounded up to odd, sigma is radius / 3

    Returns:
        Blurred image
    """
    params = prepare_params(BlurParams, "blur", source, radius=radius)
    kernel = Kernel.gaussian(params.radius)
    logger.debug(f"blur: radius={params.radius}, kernel {kernel.size}x{kernel.size}")
    return _apply_kernel(source, kernel)


@image_operation("sharpen")
def sharpen(
    source: PixelBuffer, strength: float = FilterConstants.DEFAULT_SHARPEN_STRENGTH
) -> PixelBuffer:
    """
    Sharpen with a 3x3 kernel (center 1 + 4 * strength, edge neighbors -strength).

    Args:
        source: Source image
        strength: Sharpening strength (>= 0, 0 leaves the image unchanged)

    Returns:
        Sharpened image
    """
    params = prepare_params(SharpenParams, "sharpen", source, strength=strength)
    return _apply_kernel(source, Kernel.sharpen(params.strength))


@image_operation("edge_detect")
def edge_detect(source: PixelBuffer) -> PixelBuffer:
    """
    Sobel edge magnitude of the image luma.

    Returns:
        Gray-valued image with min(255, sqrt(h^2 + v^2)) in every color
        channel. GRAY8 input yields RGB24; formats with alpha keep their
        layout and alpha.
    """
    levels = luma_levels(source)[:, :, np.newaxis]
    horizontal = convolve(levels, Kernel.sobel_horizontal())
    vertical = convolve(levels, Kernel.sobel_vertical())

    magnitude = np.sqrt(horizontal * horizontal + vertical * vertical)
    edges = clamp_to_uint8(magnitude, round_values=False)
    return spread_gray(source, edges[:, :, 0])
