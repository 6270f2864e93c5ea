"""
Exception hierarchy for pixelflow operations.

Every error carries the name of the failing operation and, where known,
the dimensions of the image involved so callers can report failures
without inspecting the buffers themselves.
"""

from typing import Optional


class PixelFlowError(Exception):
    """Base class for all pixelflow errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        image_width: int = -1,
        image_height: int = -1,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.image_width = image_width
        self.image_height = image_height

    @property
    def has_dimensions(self) -> bool:
        return self.image_width > 0 and self.image_height > 0

    def to_dict(self) -> dict:
        """Structured form for external error reporting."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "operation": self.operation,
            "image_width": self.image_width if self.has_dimensions else None,
            "image_height": self.image_height if self.has_dimensions else None,
        }

    def __str__(self) -> str:
        text = self.message
        if self.operation:
            text += f" [operation: {self.operation}]"
        if self.has_dimensions:
            text += f" [image: {self.image_width}x{self.image_height}]"
        return text


class InvalidArgumentError(PixelFlowError, ValueError):
    """Absent buffer, non-positive dimensions or out-of-range parameter."""


class OutOfBoundsError(PixelFlowError, IndexError):
    """A requested region extends beyond the source image."""


class UnsupportedError(InvalidArgumentError):
    """Parameters produce a non-positive or unrepresentable result."""


class ImageProcessError(PixelFlowError):
    """The numeric backend failed while executing an operation."""
