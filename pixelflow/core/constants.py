"""
Constants and configuration values for the pixelflow engine.
Centralizes all magic numbers used by geometry, filter and watermark operations.
"""


# Image Constants
class ImageConstants:
    """Constants related to pixel buffers."""

    # Channel value range (8 bits per channel)
    CHANNEL_MIN = 0
    CHANNEL_MAX = 255
    LUT_SIZE = 256

    # Largest width/height OpenCV can remap (SHRT_MAX)
    MAX_IMAGE_DIMENSION = 32767
    MIN_IMAGE_DIMENSION = 1


# Geometry Constants
class GeometryConstants:
    """Constants for resize, rotate and pad operations."""

    # Angles within this tolerance of 90/180/270 use the lossless fast paths
    ROTATION_EPSILON = 0.001
    FULL_TURN_DEGREES = 360.0

    # ULTRA quality halves the image with area averaging until within this
    # factor of the target, then finishes with a bicubic pass
    PROGRESSIVE_STEP_FACTOR = 2.0


# Filter Constants
class FilterConstants:
    """Constants for pixel filters."""

    # ITU-R BT.601 luma coefficients
    LUMA_RED = 0.299
    LUMA_GREEN = 0.587
    LUMA_BLUE = 0.114
    # Same coefficients in thousandths, for exact integer luma
    LUMA_WEIGHTS = (299, 587, 114)
    LUMA_WEIGHT_SCALE = 1000

    # Sepia tone matrix rows (applied to a gray input value)
    SEPIA_RED = (0.393, 0.769, 0.189)
    SEPIA_GREEN = (0.349, 0.686, 0.168)
    SEPIA_BLUE = (0.272, 0.534, 0.131)

    # Blur kernel sizing
    MIN_KERNEL_SIZE = 3
    GAUSSIAN_SIGMA_DIVISOR = 3.0

    # Contrast pivot (mid-gray)
    CONTRAST_PIVOT = 128.0

    # Brightness offset range
    MIN_BRIGHTNESS_OFFSET = -255.0
    MAX_BRIGHTNESS_OFFSET = 255.0

    DEFAULT_SHARPEN_STRENGTH = 1.0
    DEFAULT_SEPIA_INTENSITY = 1.0

    SOBEL_HORIZONTAL = (
        (-1.0, 0.0, 1.0),
        (-2.0, 0.0, 2.0),
        (-1.0, 0.0, 1.0),
    )
    SOBEL_VERTICAL = (
        (-1.0, -2.0, -1.0),
        (0.0, 0.0, 0.0),
        (1.0, 2.0, 1.0),
    )


# Watermark Constants
class WatermarkConstants:
    """Default values for watermark configuration."""

    TEXT_DEFAULT_OPACITY = 0.7
    TEXT_DEFAULT_MARGIN = 5
    TEXT_DEFAULT_FONT_SIZE = 24
    TEXT_DEFAULT_FONT_FAMILY = "DejaVuSans"

    IMAGE_DEFAULT_OPACITY = 0.5
    IMAGE_DEFAULT_SCALE = 0.25
    IMAGE_DEFAULT_MARGIN = 0


# System Constants
class SystemConstants:
    """Constants for logging and environment handling."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ENVIRONMENT_DEFAULT = "development"
    ENV_PREFIX = "PIXELFLOW_"


# Color Constants (RGBA)
class Colors:
    """Standard colors for fills and watermarks (RGBA format)."""

    WHITE = (255, 255, 255, 255)
    BLACK = (0, 0, 0, 255)
    TRANSPARENT = (0, 0, 0, 0)
    RED = (255, 0, 0, 255)
    GREEN = (0, 255, 0, 255)
    BLUE = (0, 0, 255, 255)
    GRAY = (128, 128, 128, 255)
