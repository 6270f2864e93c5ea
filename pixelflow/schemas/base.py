"""
Base schema shared by all operation parameter models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from pixelflow.core.image.color import to_rgba


class BaseOperationParams(BaseModel):
    """
    Base class for operation parameters.

    Parameter models are immutable and reject unknown fields so that a
    misspelled keyword fails loudly instead of being ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


def validate_color(value: Any) -> Any:
    """Normalize an optional color to an RGBA tuple (for field validators)."""
    if value is None:
        return None
    return to_rgba(value)
