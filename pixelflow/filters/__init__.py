"""
Pixel filters.

Modules:
- channels: Alpha-preserving result assembly and luma helpers
- convolution: blur, sharpen, edge_detect
- color: grayscale, brightness, brightness_offset, contrast, sepia, invert
- effects: vignette
- transform: flip, flop
"""

from .color import brightness, brightness_offset, contrast, grayscale, invert, sepia
from .convolution import blur, edge_detect, sharpen
from .effects import vignette
from .transform import flip, flop

__all__ = [
    "blur",
    "sharpen",
    "edge_detect",
    "grayscale",
    "brightness",
    "brightness_offset",
    "contrast",
    "sepia",
    "invert",
    "vignette",
    "flip",
    "flop",
]
