"""
Parameter processing utilities.

Builds pydantic parameter models for an operation and translates
validation failures into InvalidArgumentError carrying the operation name
and the dimensions of the image involved.
"""

import logging
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.utils.enum_converter import enum_to_string

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def format_validation_error(error: ValidationError) -> str:
    """
    Render a pydantic ValidationError as a single readable line.

    Example:
        >>> format_validation_error(err)
        >>> # Returns "radius: Input should be greater than 0"
    """
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "value"
        message = item.get("msg", "invalid value")
        # Errors raised inside custom validators are prefixed by pydantic
        message = message.replace("Value error, ", "")
        parts.append(f"{location}: {message}")
    return "; ".join(parts)


def invalid_argument_from(
    error: ValidationError,
    operation: str,
    image_width: int = -1,
    image_height: int = -1,
) -> InvalidArgumentError:
    """Translate a pydantic ValidationError into an InvalidArgumentError."""
    message = f"Invalid {operation} parameters: {format_validation_error(error)}"
    logger.warning(message)
    return InvalidArgumentError(message, operation, image_width, image_height)


def prepare_params(
    params_class: Type[T],
    operation: str,
    source: Optional[Any] = None,
    **values: Any,
) -> T:
    """
    Build and validate an operation's parameter model.

    Args:
        params_class: Pydantic parameter class
        operation: Operation name used in error reports
        source: Source buffer (for error dimensions), may be None
        **values: Raw parameter values

    Returns:
        Validated parameters instance

    Raises:
        InvalidArgumentError: If any parameter is out of range

    Example:
        >>> params = prepare_params(BlurParams, "blur", image, radius=2.0)
    """
    try:
        return params_class(**values)
    except ValidationError as e:
        width = getattr(source, "width", -1)
        height = getattr(source, "height", -1)
        raise invalid_argument_from(e, operation, width, height) from e


def params_to_dict(params: BaseModel, convert_enums: bool = True) -> dict:
    """
    Convert pydantic params to a dictionary (for logging).

    Args:
        params: Pydantic parameter model instance
        convert_enums: Whether to convert enum values to strings

    Returns:
        Dictionary representation of parameters
    """
    data = params.model_dump(exclude_none=True)

    if convert_enums:
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = enum_to_string(value)

    return data
