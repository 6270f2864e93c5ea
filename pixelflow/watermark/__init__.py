"""
Watermark engine.

Modules:
- position: Nine-point anchor calculation
- composite: Source-over blending into a target buffer
- fonts: Font resolution for text watermarks
- text: TextWatermark
- image: ImageWatermark

Watermark.apply draws into its target; apply_watermark leaves the target
untouched and returns a watermarked copy.
"""

from typing import Protocol, Union

from pixelflow.core.enums import WatermarkPosition
from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.image.buffer import PixelBuffer
from pixelflow.core.utils.decorators import image_operation

from .fonts import load_font
from .image import ImageWatermark
from .position import calculate_position
from .text import TextWatermark

Watermark = Union[TextWatermark, ImageWatermark]


class SupportsWatermark(Protocol):
    """Structural type shared by the watermark variants."""

    position: WatermarkPosition
    opacity: float

    def apply(self, target: PixelBuffer) -> None: ...


@image_operation("watermark")
def apply_watermark(target: PixelBuffer, watermark: SupportsWatermark) -> PixelBuffer:
    """
    Return a copy of ``target`` with ``watermark`` applied.

    Args:
        target: Image to watermark (not modified)
        watermark: TextWatermark, ImageWatermark or any object with apply()

    Returns:
        New watermarked image
    """
    if not callable(getattr(watermark, "apply", None)):
        raise InvalidArgumentError(
            f"Watermark must provide apply(), got {type(watermark).__name__}",
            "watermark",
            target.width,
            target.height,
        )
    result = target.copy()
    watermark.apply(result)
    return result


__all__ = [
    "Watermark",
    "SupportsWatermark",
    "TextWatermark",
    "ImageWatermark",
    "apply_watermark",
    "calculate_position",
    "load_font",
]
