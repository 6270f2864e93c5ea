"""
Text watermarks rendered with Pillow.

The text is drawn onto a transparent RGBA layer the size of the target and
blended into the target at the configured opacity.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pixelflow.core.constants import Colors, WatermarkConstants
from pixelflow.core.enums import WatermarkPosition
from pixelflow.core.exceptions import ImageProcessError, PixelFlowError
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.image.color import to_rgba
from pixelflow.core.image.converters import require_buffer
from pixelflow.core.utils.enum_converter import parse_enum
from pixelflow.core.utils.params_processor import invalid_argument_from
from pixelflow.schemas.watermark import FontSpec
from pixelflow.watermark.composite import composite
from pixelflow.watermark.fonts import load_font
from pixelflow.watermark.position import calculate_position

logger = logging.getLogger(__name__)

RGBAColor = Tuple[int, int, int, int]


class TextWatermark(BaseModel):
    """
    Immutable text watermark configuration.

    Invalid values raise InvalidArgumentError at construction.

    Example:
        >>> wm = TextWatermark(text="(c) 2024", position="bottom_right", opacity=0.5)
        >>> wm.apply(image)  # draws into image
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str = Field(..., min_length=1, description="Text to draw")
    font: FontSpec = Field(default_factory=FontSpec, description="Font family and size")
    color: RGBAColor = Field(default=Colors.WHITE, description="Text color (RGBA)")
    background_color: Optional[RGBAColor] = Field(
        default=None, description="Box painted behind the text (None = no box)"
    )
    position: WatermarkPosition = Field(
        default=WatermarkPosition.BOTTOM_RIGHT, description="Anchor on the target"
    )
    opacity: float = Field(
        default=WatermarkConstants.TEXT_DEFAULT_OPACITY,
        ge=0,
        le=1,
        allow_inf_nan=False,
        description="Layer opacity",
    )
    margin: int = Field(
        default=WatermarkConstants.TEXT_DEFAULT_MARGIN,
        ge=0,
        description="Inset from the edges and background box padding",
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise invalid_argument_from(e, "text_watermark") from e

    @field_validator("color", mode="before")
    @classmethod
    def parse_color(cls, value):
        return to_rgba(value)

    @field_validator("background_color", mode="before")
    @classmethod
    def parse_background_color(cls, value):
        return None if value is None else to_rgba(value)

    @field_validator("position", mode="before")
    @classmethod
    def parse_position(cls, value):
        return parse_enum(value, WatermarkPosition)

    @classmethod
    def of(cls, text: str) -> "TextWatermark":
        """Text watermark with default font, color, position and opacity."""
        return cls(text=text)

    def measure(self, font=None) -> Tuple[int, int, int]:
        """
        Size of the rendered text.

        Args:
            font: Pillow font (loaded from ``self.font`` if None)

        Returns:
            (width, height, ascent) where width is the advance width and
            height is ascent + descent
        """
        font = font or load_font(self.font)
        ascent, descent = font.getmetrics()
        width = max(1, math.ceil(font.getlength(self.text)))
        height = max(1, ascent + descent)
        return width, height, ascent

    def apply(self, target: PixelBuffer) -> None:
        """
        Draw the watermark into ``target`` (modified in place).

        The text box is anchored with calculate_position; the glyphs sit on
        a baseline ``ascent`` pixels below the anchor. When a background
        color is set, a box extending ``margin`` pixels around the text is
        painted first.
        """
        require_buffer(target, "text_watermark")
        try:
            layer, (x, y, width, height) = self._render(target)
        except PixelFlowError:
            raise
        except Exception as e:
            message = (
                f"Failed to render text watermark on image "
                f"{target.width}x{target.height}: {e}"
            )
            logger.error(message, exc_info=True)
            raise ImageProcessError(
                message, "text_watermark", target.width, target.height
            ) from e

        composite(target, layer, 0, 0, self.opacity)
        logger.debug(
            f"Text watermark '{self.text}' ({width}x{height}) at ({x}, {y}) "
            f"on {target.width}x{target.height}"
        )

    def _render(self, target: PixelBuffer):
        """Draw the text onto a transparent RGBA layer the size of ``target``."""
        font = load_font(self.font)
        width, height, _ = self.measure(font)
        x, y = calculate_position(
            target.width, target.height, width, height, self.position, self.margin
        )

        layer = Image.new("RGBA", (target.width, target.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        if self.background_color is not None:
            draw.rectangle(
                (
                    x - self.margin,
                    y - self.margin,
                    x + width + self.margin - 1,
                    y + height + self.margin - 1,
                ),
                fill=self.background_color,
            )
        # Pillow's default "la" anchor puts the ascender line at y
        draw.text((x, y), self.text, font=font, fill=self.color)
        return np.asarray(layer, dtype=np.uint8), (x, y, width, height)
