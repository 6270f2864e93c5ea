"""
Parameter models for geometry and filter operations.

Each model documents and enforces the valid range of one operation's
parameters; operations build the model before allocating anything.
"""

from typing import Optional, Tuple

from pydantic import Field, field_validator

from pixelflow.core.constants import FilterConstants
from pixelflow.core.enums import ResizeMode, ResizeQuality
from pixelflow.core.utils.enum_converter import parse_enum

from .base import BaseOperationParams, validate_color

RGBAColor = Tuple[int, int, int, int]


# === Geometry ===


class ResizeParams(BaseOperationParams):
    """Parameters for resize."""

    target_width: int = Field(..., gt=0, description="Target width in pixels")
    target_height: int = Field(..., gt=0, description="Target height in pixels")
    mode: ResizeMode = Field(default=ResizeMode.AUTOMATIC, description="Resize mode")
    quality: ResizeQuality = Field(default=ResizeQuality.HIGH, description="Resampling quality")

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value):
        return parse_enum(value, ResizeMode, ResizeMode.AUTOMATIC)

    @field_validator("quality", mode="before")
    @classmethod
    def parse_quality(cls, value):
        return parse_enum(value, ResizeQuality, ResizeQuality.HIGH)


class ScaleParams(BaseOperationParams):
    """Parameters for scale (resize by factor)."""

    factor: float = Field(..., gt=0, allow_inf_nan=False, description="Scale factor")
    mode: ResizeMode = Field(default=ResizeMode.AUTOMATIC, description="Resize mode")
    quality: ResizeQuality = Field(default=ResizeQuality.HIGH, description="Resampling quality")

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value):
        return parse_enum(value, ResizeMode, ResizeMode.AUTOMATIC)

    @field_validator("quality", mode="before")
    @classmethod
    def parse_quality(cls, value):
        return parse_enum(value, ResizeQuality, ResizeQuality.HIGH)


class CropParams(BaseOperationParams):
    """Parameters for crop."""

    x: int = Field(..., ge=0, description="Left edge of the region")
    y: int = Field(..., ge=0, description="Top edge of the region")
    width: int = Field(..., gt=0, description="Region width")
    height: int = Field(..., gt=0, description="Region height")


class RotateParams(BaseOperationParams):
    """Parameters for rotate."""

    degrees: float = Field(..., allow_inf_nan=False, description="Clockwise rotation angle")
    background: Optional[RGBAColor] = Field(
        default=None, description="Fill color for uncovered pixels (None = zero fill)"
    )

    @field_validator("background", mode="before")
    @classmethod
    def parse_background(cls, value):
        return validate_color(value)


class PadParams(BaseOperationParams):
    """Parameters for pad."""

    top: int = Field(default=0, description="Rows added above")
    right: int = Field(default=0, description="Columns added to the right")
    bottom: int = Field(default=0, description="Rows added below")
    left: int = Field(default=0, description="Columns added to the left")
    color: Optional[RGBAColor] = Field(
        default=None, description="Fill color for the padding (None = zero fill)"
    )

    @field_validator("color", mode="before")
    @classmethod
    def parse_color(cls, value):
        return validate_color(value)


# === Filters ===


class BlurParams(BaseOperationParams):
    """Parameters for Gaussian blur."""

    radius: float = Field(..., gt=0, allow_inf_nan=False, description="Blur radius")


class SharpenParams(BaseOperationParams):
    """Parameters for sharpen."""

    strength: float = Field(
        default=FilterConstants.DEFAULT_SHARPEN_STRENGTH,
        ge=0,
        allow_inf_nan=False,
        description="Sharpening strength (0 = no change)",
    )


class BrightnessParams(BaseOperationParams):
    """Parameters for multiplicative brightness."""

    factor: float = Field(..., allow_inf_nan=False, description="Channel multiplier")


class BrightnessOffsetParams(BaseOperationParams):
    """Parameters for additive brightness."""

    offset: float = Field(
        ...,
        ge=FilterConstants.MIN_BRIGHTNESS_OFFSET,
        le=FilterConstants.MAX_BRIGHTNESS_OFFSET,
        allow_inf_nan=False,
        description="Value added to each channel",
    )


class ContrastParams(BaseOperationParams):
    """Parameters for contrast."""

    factor: float = Field(..., allow_inf_nan=False, description="Contrast factor (1 = no change)")


class SepiaParams(BaseOperationParams):
    """Parameters for sepia toning."""

    intensity: float = Field(
        default=FilterConstants.DEFAULT_SEPIA_INTENSITY,
        ge=0,
        le=1,
        allow_inf_nan=False,
        description="Sepia intensity (0 = unchanged, 1 = full sepia)",
    )


class VignetteParams(BaseOperationParams):
    """Parameters for vignette."""

    intensity: float = Field(
        ..., ge=0, le=1, allow_inf_nan=False, description="Darkening strength at the corners"
    )
