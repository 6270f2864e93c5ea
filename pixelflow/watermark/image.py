"""
Image watermarks: a (scaled) logo blended onto the target.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pixelflow.core.constants import WatermarkConstants
from pixelflow.core.enums import PixelFormat, ResizeMode, ResizeQuality, WatermarkPosition
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.converters import convert, require_buffer
from pixelflow.core.utils.enum_converter import parse_enum
from pixelflow.core.utils.params_processor import invalid_argument_from
from pixelflow.geometry.resize import resize
from pixelflow.watermark.composite import composite
from pixelflow.watermark.position import calculate_position

logger = logging.getLogger(__name__)


class ImageWatermark(BaseModel):
    """
    Immutable image watermark configuration.

    The watermark image is scaled by ``scale`` relative to its own size,
    anchored on the target and blended at ``opacity``. Its alpha channel,
    if any, is respected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    image: PixelBuffer = Field(..., description="Watermark image")
    position: WatermarkPosition = Field(
        default=WatermarkPosition.BOTTOM_RIGHT, description="Anchor on the target"
    )
    opacity: float = Field(
        default=WatermarkConstants.IMAGE_DEFAULT_OPACITY,
        ge=0,
        le=1,
        allow_inf_nan=False,
        description="Layer opacity",
    )
    scale: float = Field(
        default=WatermarkConstants.IMAGE_DEFAULT_SCALE,
        gt=0,
        le=1,
        allow_inf_nan=False,
        description="Size relative to the watermark image",
    )
    margin: int = Field(
        default=WatermarkConstants.IMAGE_DEFAULT_MARGIN, ge=0, description="Inset from the edges"
    )
    quality: ResizeQuality = Field(
        default=ResizeQuality.HIGH, description="Interpolation used when scaling the image"
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise invalid_argument_from(e, "image_watermark") from e

    @field_validator("position", mode="before")
    @classmethod
    def parse_position(cls, value):
        return parse_enum(value, WatermarkPosition)

    @field_validator("quality", mode="before")
    @classmethod
    def parse_quality(cls, value):
        return parse_enum(value, ResizeQuality)

    @property
    def scaled_size(self):
        """(width, height) of the watermark as drawn."""
        return (
            max(1, int(self.image.width * self.scale)),
            max(1, int(self.image.height * self.scale)),
        )

    def apply(self, target: PixelBuffer) -> None:
        """
        Blend the watermark into ``target`` (modified in place).

        Parts of the watermark falling outside the target are clipped.
        """
        require_buffer(target, "image_watermark")
        width, height = self.scaled_size
        scaled = resize(self.image, width, height, ResizeMode.EXACT, self.quality)
        layer = convert(scaled, PixelFormat.ARGB32).array

        x, y = calculate_position(
            target.width, target.height, width, height, self.position, self.margin
        )
        composite(target, layer, x, y, self.opacity)
        logger.debug(
            f"Image watermark {width}x{height} at ({x}, {y}) on {target.width}x{target.height}"
        )
