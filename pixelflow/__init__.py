"""
pixelflow - in-memory image transformation engine.

Geometry (resize, crop, rotate, pad), pixel filters (blur, sharpen, color
remaps, edge detection, vignette) and watermarking over NumPy-backed pixel
buffers.

Example:
    >>> import pixelflow as pf
    >>> image = pf.PixelBuffer.from_array(array)
    >>> thumb = pf.resize(image, 150, 150, pf.ResizeMode.FIT)
    >>> pf.TextWatermark.of("(c) pixelflow").apply(thumb)
"""

from .core import (
    ExifOrientation,
    ImageProcessError,
    InvalidArgumentError,
    OutOfBoundsError,
    PixelBuffer,
    PixelFlowError,
    PixelFormat,
    ResizeMode,
    ResizeQuality,
    UnsupportedError,
    WatermarkPosition,
)
from .filters import (
    blur,
    brightness,
    brightness_offset,
    contrast,
    edge_detect,
    flip,
    flop,
    grayscale,
    invert,
    sepia,
    sharpen,
    vignette,
)
from .geometry import auto_orient, crop, pad, pad_uniform, resize, rotate, scale
from .schemas import FontSpec
from .watermark import (
    ImageWatermark,
    SupportsWatermark,
    TextWatermark,
    Watermark,
    apply_watermark,
    calculate_position,
)

__version__ = "1.0.0"

__all__ = [
    # Geometry
    "resize",
    "scale",
    "crop",
    "rotate",
    "pad",
    "pad_uniform",
    "auto_orient",
    # Filters
    "blur",
    "sharpen",
    "grayscale",
    "brightness",
    "brightness_offset",
    "contrast",
    "sepia",
    "edge_detect",
    "vignette",
    "invert",
    "flip",
    "flop",
    # Watermark
    "calculate_position",
    "TextWatermark",
    "ImageWatermark",
    "Watermark",
    "SupportsWatermark",
    "apply_watermark",
    # Types
    "PixelBuffer",
    "PixelFormat",
    "ResizeMode",
    "ResizeQuality",
    "WatermarkPosition",
    "ExifOrientation",
    "FontSpec",
    # Errors
    "PixelFlowError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "UnsupportedError",
    "ImageProcessError",
]
