"""
Convolution kernels and lookup tables shared by the filters.

Convolution uses an edge policy that leaves border pixels untouched: any
output pixel whose kernel window would extend past the image edge is copied
from the source instead of being computed from extended or wrapped data.
"""

import math
from typing import Sequence

import cv2
import numpy as np

from pixelflow.core.constants import FilterConstants, ImageConstants


class Kernel:
    """Square, odd-sized matrix of convolution weights."""

    __slots__ = ("_weights",)

    def __init__(self, weights: Sequence[Sequence[float]]):
        array = np.array(weights, dtype=np.float64)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Kernel must be a square matrix, got shape {array.shape}")
        if array.shape[0] % 2 == 0:
            raise ValueError(f"Kernel size must be odd, got {array.shape[0]}")
        array.flags.writeable = False
        self._weights = array

    @property
    def size(self) -> int:
        return self._weights.shape[0]

    @property
    def radius(self) -> int:
        """Number of pixels the window extends on each side of its center."""
        return self.size // 2

    @property
    def weights(self) -> np.ndarray:
        """Read-only weight matrix."""
        return self._weights

    @property
    def total(self) -> float:
        return float(self._weights.sum())

    def normalized(self) -> "Kernel":
        """Return a copy whose weights sum to 1."""
        total = self.total
        if total == 0:
            raise ValueError("Cannot normalize a kernel whose weights sum to zero")
        return Kernel(self._weights / total)

    @classmethod
    def gaussian(cls, radius: float) -> "Kernel":
        """
        Build a normalized 2D Gaussian blur kernel.

        The kernel size is max(3, int(2 * radius + 1)), bumped to the next odd
        number, and sigma is radius / 3.

        Args:
            radius: Blur radius (> 0)

        Returns:
            Kernel whose weights sum to 1
        """
        if radius <= 0:
            raise ValueError(f"Blur radius must be greater than 0, got {radius}")

        size = max(FilterConstants.MIN_KERNEL_SIZE, int(radius * 2 + 1))
        if size % 2 == 0:
            size += 1

        sigma = radius / FilterConstants.GAUSSIAN_SIGMA_DIVISOR
        two_sigma_sq = 2.0 * sigma * sigma
        if two_sigma_sq == 0:
            # sigma underflowed; the limit of the Gaussian is the identity
            return cls.identity()
        half = size // 2

        offsets = np.arange(size, dtype=np.float64) - half
        dx, dy = np.meshgrid(offsets, offsets)
        weights = np.exp(-(dx * dx + dy * dy) / two_sigma_sq) / math.sqrt(two_sigma_sq * math.pi)
        return cls(weights).normalized()

    @classmethod
    def identity(cls, size: int = FilterConstants.MIN_KERNEL_SIZE) -> "Kernel":
        """Kernel that leaves every pixel unchanged."""
        weights = np.zeros((size, size), dtype=np.float64)
        weights[size // 2, size // 2] = 1.0
        return cls(weights)

    @classmethod
    def sharpen(cls, strength: float = FilterConstants.DEFAULT_SHARPEN_STRENGTH) -> "Kernel":
        """3x3 sharpen kernel: center 1 + 4*strength, edge neighbors -strength."""
        if strength < 0:
            raise ValueError(f"Strength cannot be negative, got {strength}")
        edge = -strength
        return cls(
            [
                [0.0, edge, 0.0],
                [edge, 1.0 + 4.0 * strength, edge],
                [0.0, edge, 0.0],
            ]
        )

    @classmethod
    def sobel_horizontal(cls) -> "Kernel":
        return cls(FilterConstants.SOBEL_HORIZONTAL)

    @classmethod
    def sobel_vertical(cls) -> "Kernel":
        return cls(FilterConstants.SOBEL_VERTICAL)

    def __repr__(self) -> str:
        return f"Kernel(size={self.size}, total={self.total:.4f})"


def convolve(channels: np.ndarray, kernel: Kernel) -> np.ndarray:
    """
    Convolve each channel with a kernel, copying border pixels through.

    Args:
        channels: Array of shape (height, width, n) with 1-4 channels
        kernel: Convolution kernel

    Returns:
        float32 array of the same shape (unclamped)
    """
    source = channels.astype(np.float32)
    # filter2D correlates; flipping the kernel turns it into a true convolution
    flipped = np.ascontiguousarray(kernel.weights[::-1, ::-1], dtype=np.float32)
    result = cv2.filter2D(source, -1, flipped, borderType=cv2.BORDER_REPLICATE)
    result = result.reshape(source.shape)

    r = kernel.radius
    if r > 0:
        result[:r] = source[:r]
        result[-r:] = source[-r:]
        result[:, :r] = source[:, :r]
        result[:, -r:] = source[:, -r:]
    return result


def build_lut(mapping) -> np.ndarray:
    """
    Build a 256-entry uint8 lookup table from a per-value function.

    Args:
        mapping: Callable taking an int in [0, 255] and returning a number;
            results are clamped to [0, 255] and truncated

    Returns:
        uint8 array of length 256
    """
    values = np.array([mapping(i) for i in range(ImageConstants.LUT_SIZE)], dtype=np.float64)
    return np.clip(
        np.floor(values), ImageConstants.CHANNEL_MIN, ImageConstants.CHANNEL_MAX
    ).astype(np.uint8)


def apply_luts(channels: np.ndarray, tables: Sequence[np.ndarray]) -> np.ndarray:
    """
    Map each channel through its own lookup table.

    Args:
        channels: uint8 array of shape (height, width, n)
        tables: n lookup tables of 256 entries each

    Returns:
        New uint8 array of the same shape
    """
    if len(tables) != channels.shape[2]:
        raise ValueError(f"Expected {channels.shape[2]} lookup tables, got {len(tables)}")

    result = np.empty_like(channels)
    for index, table in enumerate(tables):
        result[:, :, index] = table[channels[:, :, index]]
    return result
