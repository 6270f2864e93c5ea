"""
Utility modules for core functionality.

Modules:
- decorators: Operation wrapper (validation, logging, error wrapping) and timer
- enum_converter: Case-insensitive enum parsing
- params_processor: Parameter model validation and error translation
"""

from .decorators import image_operation, timer
from .enum_converter import EnumConverter, enum_to_string, parse_enum
from .params_processor import (
    format_validation_error,
    invalid_argument_from,
    params_to_dict,
    prepare_params,
)

__all__ = [
    "image_operation",
    "timer",
    "EnumConverter",
    "parse_enum",
    "enum_to_string",
    "prepare_params",
    "params_to_dict",
    "format_validation_error",
    "invalid_argument_from",
]
