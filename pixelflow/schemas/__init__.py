"""
Schemas Package

Pydantic models for parameter validation, organized by domain:
- base: shared base model and validators
- operations: geometry and filter parameters
- watermark: watermark configuration
"""

from .base import BaseOperationParams
from .operations import (
    BlurParams,
    BrightnessOffsetParams,
    BrightnessParams,
    ContrastParams,
    CropParams,
    PadParams,
    ResizeParams,
    RotateParams,
    ScaleParams,
    SepiaParams,
    SharpenParams,
    VignetteParams,
)
from .watermark import FontSpec

__all__ = [
    "BaseOperationParams",
    # Geometry
    "ResizeParams",
    "ScaleParams",
    "CropParams",
    "RotateParams",
    "PadParams",
    # Filters
    "BlurParams",
    "SharpenParams",
    "BrightnessParams",
    "BrightnessOffsetParams",
    "ContrastParams",
    "SepiaParams",
    "VignetteParams",
    # Watermark
    "FontSpec",
]
