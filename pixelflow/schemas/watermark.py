"""
Watermark configuration models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FontSpec(BaseModel):
    """
    Font used to render a text watermark.

    ``family`` is either a path to a TrueType/OpenType file or a font name
    resolved against the configured font search paths. Unset fields fall
    back to the configured defaults (see pixelflow.config.FontSettings).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    family: Optional[str] = Field(
        default=None, min_length=1, description="Font file path or family name"
    )
    size: Optional[int] = Field(default=None, gt=0, description="Font size in pixels")
