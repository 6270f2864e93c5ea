"""
Geometry operations.

Modules:
- dimensions: Aspect-ratio, rotation bounding box and size limit math
- resize: resize and scale
- crop: Region extraction
- rotate: Clockwise rotation
- pad: Borders (and trimming with negative padding)
- orientation: EXIF orientation normalization
"""

from .crop import crop
from .dimensions import calculate_resize_dimensions, rotated_bounds
from .orientation import auto_orient, read_orientation
from .pad import pad, pad_uniform
from .resize import resize, scale
from .rotate import rotate

__all__ = [
    "resize",
    "scale",
    "crop",
    "rotate",
    "pad",
    "pad_uniform",
    "auto_orient",
    "read_orientation",
    "calculate_resize_dimensions",
    "rotated_bounds",
]
