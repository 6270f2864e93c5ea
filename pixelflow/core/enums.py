"""
Centralized enumerations for pixelflow.

All enums are string-valued so they can be parsed from configuration
and serialized without conversion.
"""

from enum import Enum
from typing import Tuple


class PixelFormat(str, Enum):
    """Channel layout of a pixel buffer (8 bits per channel)."""

    GRAY8 = "gray8"
    RGB24 = "rgb24"
    BGR24 = "bgr24"
    ARGB32 = "argb32"  # straight alpha, stored channel-last as R, G, B, A
    BGRA32 = "bgra32"

    @property
    def channels(self) -> int:
        return _CHANNELS[self]

    @property
    def has_alpha(self) -> bool:
        return self in (PixelFormat.ARGB32, PixelFormat.BGRA32)

    @property
    def is_gray(self) -> bool:
        return self is PixelFormat.GRAY8

    @property
    def color_channels(self) -> int:
        """Number of color (non-alpha) channels."""
        return self.channels - 1 if self.has_alpha else self.channels

    @property
    def rgb_indices(self) -> Tuple[int, int, int]:
        """
        Array indices of the red, green and blue channels.

        Gray buffers report index 0 for all three.
        """
        return _RGB_INDICES[self]

    @property
    def alpha_index(self) -> int:
        """Array index of the alpha channel, or -1 when there is none."""
        return self.channels - 1 if self.has_alpha else -1

    def with_alpha(self) -> "PixelFormat":
        """Return the closest format that carries an alpha channel."""
        if self.has_alpha:
            return self
        if self is PixelFormat.BGR24:
            return PixelFormat.BGRA32
        return PixelFormat.ARGB32

    def as_color(self) -> "PixelFormat":
        """Return the closest format that carries three color channels."""
        if self is PixelFormat.GRAY8:
            return PixelFormat.RGB24
        return self


_CHANNELS = {
    PixelFormat.GRAY8: 1,
    PixelFormat.RGB24: 3,
    PixelFormat.BGR24: 3,
    PixelFormat.ARGB32: 4,
    PixelFormat.BGRA32: 4,
}

_RGB_INDICES = {
    PixelFormat.GRAY8: (0, 0, 0),
    PixelFormat.RGB24: (0, 1, 2),
    PixelFormat.BGR24: (2, 1, 0),
    PixelFormat.ARGB32: (0, 1, 2),
    PixelFormat.BGRA32: (2, 1, 0),
}


class ResizeMode(str, Enum):
    """How target dimensions are interpreted by resize."""

    AUTOMATIC = "automatic"  # same as FIT
    FIT = "fit"  # fit inside the target, preserving aspect ratio
    FILL = "fill"  # cover the target, preserving aspect ratio (no crop)
    EXACT = "exact"  # use the target dimensions verbatim


class ResizeQuality(str, Enum):
    """Resampling quality used by resize."""

    LOW = "low"  # nearest neighbor
    MEDIUM = "medium"  # bilinear
    HIGH = "high"  # bicubic
    ULTRA = "ultra"  # progressive area downscale + bicubic


class WatermarkPosition(str, Enum):
    """Nine-point anchor grid for watermark placement."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    CENTER = "center"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def horizontal(self) -> str:
        """Horizontal alignment: 'left', 'center' or 'right'."""
        if self is WatermarkPosition.CENTER:
            return "center"
        return self.value.split("_")[1]

    @property
    def vertical(self) -> str:
        """Vertical alignment: 'top', 'middle' or 'bottom'."""
        if self is WatermarkPosition.CENTER:
            return "middle"
        return self.value.split("_")[0]


class ExifOrientation(int, Enum):
    """
    EXIF orientation tag values.

    Each member describes the transformation that brings the stored pixels
    upright: an optional mirror followed by a clockwise rotation.
    """

    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3
    BOTTOM_LEFT = 4
    LEFT_TOP = 5
    RIGHT_TOP = 6
    RIGHT_BOTTOM = 7
    LEFT_BOTTOM = 8

    @property
    def rotation_degrees(self) -> int:
        return _ORIENTATION_TRANSFORMS[self][0]

    @property
    def flip_horizontal(self) -> bool:
        return _ORIENTATION_TRANSFORMS[self][1]

    @property
    def flip_vertical(self) -> bool:
        return _ORIENTATION_TRANSFORMS[self][2]

    @property
    def requires_transformation(self) -> bool:
        return self.rotation_degrees != 0 or self.flip_horizontal or self.flip_vertical

    @classmethod
    def from_tag(cls, value: int) -> "ExifOrientation":
        """Map a raw tag value to an orientation; unknown values mean upright."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.TOP_LEFT


# (rotation degrees clockwise, mirror horizontally, mirror vertically)
_ORIENTATION_TRANSFORMS = {
    ExifOrientation.TOP_LEFT: (0, False, False),
    ExifOrientation.TOP_RIGHT: (0, True, False),
    ExifOrientation.BOTTOM_RIGHT: (180, False, False),
    ExifOrientation.BOTTOM_LEFT: (0, False, True),
    ExifOrientation.LEFT_TOP: (270, True, False),
    ExifOrientation.RIGHT_TOP: (90, False, False),
    ExifOrientation.RIGHT_BOTTOM: (90, True, False),
    ExifOrientation.LEFT_BOTTOM: (270, False, False),
}
