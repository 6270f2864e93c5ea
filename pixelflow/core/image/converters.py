"""
Pixel format conversion utilities.

Handles conversions between:
- PixelBuffer formats (gray, RGB, BGR, with and without alpha)
- PIL Images (L, RGB, RGBA modes)
- Float working arrays used by filters and compositing
"""

import logging

import cv2
import numpy as np
from PIL import Image

from pixelflow.core.constants import ImageConstants
from pixelflow.core.enums import PixelFormat
from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.image.buffer import PixelBuffer

logger = logging.getLogger(__name__)

F = PixelFormat

_CONVERSION_CODES = {
    (F.GRAY8, F.RGB24): cv2.COLOR_GRAY2RGB,
    (F.GRAY8, F.BGR24): cv2.COLOR_GRAY2BGR,
    (F.GRAY8, F.ARGB32): cv2.COLOR_GRAY2RGBA,
    (F.GRAY8, F.BGRA32): cv2.COLOR_GRAY2BGRA,
    (F.RGB24, F.GRAY8): cv2.COLOR_RGB2GRAY,
    (F.RGB24, F.BGR24): cv2.COLOR_RGB2BGR,
    (F.RGB24, F.ARGB32): cv2.COLOR_RGB2RGBA,
    (F.RGB24, F.BGRA32): cv2.COLOR_RGB2BGRA,
    (F.BGR24, F.GRAY8): cv2.COLOR_BGR2GRAY,
    (F.BGR24, F.RGB24): cv2.COLOR_BGR2RGB,
    (F.BGR24, F.ARGB32): cv2.COLOR_BGR2RGBA,
    (F.BGR24, F.BGRA32): cv2.COLOR_BGR2BGRA,
    (F.ARGB32, F.GRAY8): cv2.COLOR_RGBA2GRAY,
    (F.ARGB32, F.RGB24): cv2.COLOR_RGBA2RGB,
    (F.ARGB32, F.BGR24): cv2.COLOR_RGBA2BGR,
    (F.ARGB32, F.BGRA32): cv2.COLOR_RGBA2BGRA,
    (F.BGRA32, F.GRAY8): cv2.COLOR_BGRA2GRAY,
    (F.BGRA32, F.RGB24): cv2.COLOR_BGRA2RGB,
    (F.BGRA32, F.BGR24): cv2.COLOR_BGRA2BGR,
    (F.BGRA32, F.ARGB32): cv2.COLOR_BGRA2RGBA,
}

_PIL_MODES = {
    F.GRAY8: "L",
    F.RGB24: "RGB",
    F.ARGB32: "RGBA",
}


class ImageConverters:
    """Utilities for converting between pixel formats and image libraries."""

    @staticmethod
    def convert(buffer: PixelBuffer, pixel_format: PixelFormat) -> PixelBuffer:
        """
        Convert a buffer to another pixel format.

        Args:
            buffer: Source buffer
            pixel_format: Target format

        Returns:
            New buffer in the target format (a copy if the format already matches)
        """
        pixel_format = PixelFormat(pixel_format)
        if buffer.pixel_format is pixel_format:
            return buffer.copy()

        code = _CONVERSION_CODES[(buffer.pixel_format, pixel_format)]
        converted = cv2.cvtColor(buffer.to_array(copy=False), code)
        return PixelBuffer(converted, pixel_format, copy=False)

    @staticmethod
    def to_pil(buffer: PixelBuffer) -> Image.Image:
        """
        Convert a PixelBuffer to a PIL Image.

        Args:
            buffer: Source buffer (BGR layouts are reordered to RGB)

        Returns:
            PIL Image in L, RGB or RGBA mode
        """
        if buffer.pixel_format not in _PIL_MODES:
            target = F.ARGB32 if buffer.has_alpha else F.RGB24
            buffer = ImageConverters.convert(buffer, target)

        return Image.fromarray(buffer.to_array(copy=True))

    @staticmethod
    def from_pil(image: Image.Image, bgr: bool = False) -> PixelBuffer:
        """
        Convert a PIL Image to a PixelBuffer.

        Args:
            image: PIL Image in any mode
            bgr: If True, produce OpenCV channel order (BGR24 / BGRA32)

        Returns:
            New PixelBuffer
        """
        if image.mode not in ("L", "RGB", "RGBA"):
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            image = image.convert("RGBA" if has_alpha else "RGB")

        array = np.array(image, dtype=np.uint8)
        buffer = PixelBuffer(array, copy=False)

        if bgr and buffer.pixel_format is not F.GRAY8:
            target = F.BGRA32 if buffer.has_alpha else F.BGR24
            buffer = ImageConverters.convert(buffer, target)

        return buffer

    @staticmethod
    def ensure_color(buffer: PixelBuffer) -> PixelBuffer:
        """
        Ensure buffer has three color channels (expand gray to RGB).

        Returns the same buffer if it already carries color channels.
        """
        if buffer.pixel_format.is_gray:
            return ImageConverters.convert(buffer, F.RGB24)
        return buffer

    @staticmethod
    def ensure_alpha(buffer: PixelBuffer) -> PixelBuffer:
        """
        Ensure buffer carries an alpha channel (opaque where added).

        Returns the same buffer if it already has alpha.
        """
        if buffer.has_alpha:
            return buffer
        return ImageConverters.convert(buffer, buffer.pixel_format.with_alpha())

    @staticmethod
    def to_rgba_float(buffer: PixelBuffer) -> np.ndarray:
        """
        Convert a buffer to a float32 RGBA array scaled to [0, 1].

        Args:
            buffer: Source buffer in any format

        Returns:
            Array of shape (height, width, 4)
        """
        if buffer.pixel_format is not F.ARGB32:
            buffer = ImageConverters.convert(buffer, F.ARGB32)
        return buffer.array.astype(np.float32) / ImageConstants.CHANNEL_MAX

    @staticmethod
    def clamp_to_uint8(values: np.ndarray, round_values: bool = True) -> np.ndarray:
        """
        Clamp floating point channel values into a uint8 array.

        Args:
            values: Float array of channel values on the 0-255 scale
            round_values: Round to nearest (default) instead of truncating

        Returns:
            uint8 array of the same shape
        """
        if round_values:
            values = np.rint(values)
        else:
            values = np.floor(values)
        return np.clip(values, ImageConstants.CHANNEL_MIN, ImageConstants.CHANNEL_MAX).astype(
            np.uint8
        )


def require_buffer(source, operation: str) -> PixelBuffer:
    """
    Validate that ``source`` is a PixelBuffer.

    Raises:
        InvalidArgumentError: If source is None or not a PixelBuffer
    """
    if source is None:
        raise InvalidArgumentError("Source image cannot be None", operation)
    if not isinstance(source, PixelBuffer):
        raise InvalidArgumentError(
            f"Source image must be a PixelBuffer, got {type(source).__name__}", operation
        )
    return source


# Module-level aliases for direct imports
convert = ImageConverters.convert
to_pil = ImageConverters.to_pil
from_pil = ImageConverters.from_pil
ensure_color = ImageConverters.ensure_color
ensure_alpha = ImageConverters.ensure_alpha
to_rgba_float = ImageConverters.to_rgba_float
clamp_to_uint8 = ImageConverters.clamp_to_uint8
