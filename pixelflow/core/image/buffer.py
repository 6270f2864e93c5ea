"""
Pixel buffer - the in-memory image representation shared by every operation.

A PixelBuffer owns a contiguous ``uint8`` NumPy array of shape
``(height, width, channels)`` together with the PixelFormat describing the
channel layout. Geometry and filter operations never modify a buffer they
receive; they return a new one. Watermark application is the only place
that writes into an existing buffer (through ``PixelBuffer.array``).
"""

import logging
from typing import Optional, Tuple

import numpy as np

from pixelflow.core.enums import PixelFormat
from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.image.color import ColorLike, to_pixel

logger = logging.getLogger(__name__)

_DEFAULT_FORMATS = {
    1: PixelFormat.GRAY8,
    3: PixelFormat.RGB24,
    4: PixelFormat.ARGB32,
}


class PixelBuffer:
    """2D grid of 8-bit pixels with a fixed pixel format."""

    __slots__ = ("_data", "_format")

    def __init__(
        self,
        data: np.ndarray,
        pixel_format: Optional[PixelFormat] = None,
        copy: bool = True,
    ):
        """
        Create a pixel buffer from a NumPy array.

        Args:
            data: uint8 array of shape (height, width) or (height, width, channels)
            pixel_format: Channel layout; inferred from the channel count if None
                (1 -> GRAY8, 3 -> RGB24, 4 -> ARGB32)
            copy: If True (default) the buffer takes a private copy of ``data``

        Raises:
            InvalidArgumentError: If the array shape, dtype or format is invalid
        """
        if not isinstance(data, np.ndarray):
            raise InvalidArgumentError(
                f"Pixel data must be a numpy array, got {type(data).__name__}", "create"
            )
        if data.dtype != np.uint8:
            raise InvalidArgumentError(f"Pixel data must be uint8, got {data.dtype}", "create")

        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        elif data.ndim != 3:
            raise InvalidArgumentError(
                f"Pixel data must be 2D or 3D, got {data.ndim} dimensions", "create"
            )

        height, width, channels = data.shape
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(
                f"Image dimensions must be positive: width={width}, height={height}", "create"
            )

        if pixel_format is None:
            pixel_format = _DEFAULT_FORMATS.get(channels)
            if pixel_format is None:
                raise InvalidArgumentError(
                    f"Cannot infer pixel format for {channels} channels", "create", width, height
                )
        else:
            pixel_format = PixelFormat(pixel_format)
            if pixel_format.channels != channels:
                raise InvalidArgumentError(
                    f"Pixel format {pixel_format.value} expects {pixel_format.channels} "
                    f"channels, got {channels}",
                    "create",
                    width,
                    height,
                )

        self._data = np.array(data, copy=True, order="C") if copy else np.ascontiguousarray(data)
        self._format = pixel_format

    @classmethod
    def from_array(
        cls, data: np.ndarray, pixel_format: Optional[PixelFormat] = None
    ) -> "PixelBuffer":
        """Create a buffer holding a private copy of ``data``."""
        return cls(data, pixel_format, copy=True)

    @classmethod
    def from_pil(cls, image, bgr: bool = False) -> "PixelBuffer":
        """Create a buffer from a PIL Image (see ImageConverters.from_pil)."""
        from pixelflow.core.image.converters import ImageConverters

        return ImageConverters.from_pil(image, bgr=bgr)

    def to_pil(self):
        """Export as a PIL Image (see ImageConverters.to_pil)."""
        from pixelflow.core.image.converters import ImageConverters

        return ImageConverters.to_pil(self)

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        pixel_format: PixelFormat = PixelFormat.RGB24,
        fill: Optional[ColorLike] = None,
    ) -> "PixelBuffer":
        """
        Allocate a new buffer.

        Args:
            width: Width in pixels (> 0)
            height: Height in pixels (> 0)
            pixel_format: Channel layout
            fill: Optional fill color; zero (transparent black) if None

        Returns:
            Newly allocated PixelBuffer
        """
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(
                f"Image dimensions must be positive: width={width}, height={height}", "create"
            )
        pixel_format = PixelFormat(pixel_format)
        data = np.zeros((height, width, pixel_format.channels), dtype=np.uint8)
        if fill is not None:
            try:
                data[:, :] = to_pixel(fill, pixel_format)
            except ValueError as e:
                raise InvalidArgumentError(str(e), "create", width, height) from e
        return cls(data, pixel_format, copy=False)

    # Properties

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def pixel_format(self) -> PixelFormat:
        return self._format

    @property
    def has_alpha(self) -> bool:
        return self._format.has_alpha

    @property
    def array(self) -> np.ndarray:
        """
        The underlying (height, width, channels) array.

        Writing to this array mutates the buffer in place; pure operations
        only read from it.
        """
        return self._data

    # Accessors

    def to_array(self, copy: bool = True, squeeze: bool = True) -> np.ndarray:
        """
        Export the pixel data.

        Args:
            copy: Return a copy (default) instead of a view
            squeeze: Return GRAY8 data as a 2D array

        Returns:
            NumPy array
        """
        data = self._data
        if squeeze and self.channels == 1:
            data = data[:, :, 0]
        return data.copy() if copy else data

    def color_channels(self) -> np.ndarray:
        """View of the color channels (alpha excluded)."""
        return self._data[:, :, : self._format.color_channels]

    def alpha_channel(self) -> Optional[np.ndarray]:
        """View of the alpha channel, or None for opaque formats."""
        if not self.has_alpha:
            return None
        return self._data[:, :, self._format.alpha_index]

    def pixel(self, x: int, y: int) -> Tuple[int, ...]:
        """Channel values at (x, y) in the buffer's channel order."""
        return tuple(int(v) for v in self._data[y, x])

    def copy(self) -> "PixelBuffer":
        """Return an independent copy of this buffer."""
        return PixelBuffer(self._data, self._format, copy=True)

    def with_data(self, data: np.ndarray, pixel_format: Optional[PixelFormat] = None) -> "PixelBuffer":
        """Wrap freshly computed data (taking ownership, no copy)."""
        return PixelBuffer(data, pixel_format or self._format, copy=False)

    def same_pixels(self, other: "PixelBuffer") -> bool:
        """True if both buffers have the same format, size and pixel values."""
        return (
            isinstance(other, PixelBuffer)
            and self._format is other._format
            and np.array_equal(self._data, other._data)
        )

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height}, {self._format.value})"
