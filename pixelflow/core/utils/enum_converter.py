"""
Enum conversion utilities.

Provides standardized methods for converting between enums and strings,
with support for case-insensitive parsing of user-supplied names.
"""

from enum import Enum
from typing import Any, Optional, Type, TypeVar

T = TypeVar("T", bound=Enum)


class EnumConverter:
    """Parse enum members from names, values or existing members."""

    @staticmethod
    def parse_enum(value: Any, enum_class: Type[T], default: Optional[T] = None) -> T:
        """
        Parse value to enum.

        Accepts an enum member, its value (``"fit"``) or its name (``"FIT"``),
        case-insensitively for strings.

        Args:
            value: Value to parse (string, enum, or None)
            enum_class: Enum class to parse to
            default: Value returned when ``value`` is None

        Returns:
            Parsed enum value

        Raises:
            ValueError: If the value does not name a member (or is None without default)

        Example:
            >>> EnumConverter.parse_enum("Bottom_Right", WatermarkPosition)
            >>> # Returns WatermarkPosition.BOTTOM_RIGHT
        """
        if isinstance(value, enum_class):
            return value

        if value is None:
            if default is None:
                raise ValueError(f"A {enum_class.__name__} value is required")
            return default

        if isinstance(value, str):
            key = value.strip()
            for member in enum_class:
                if key.lower() == member.name.lower() or key.lower() == str(member.value).lower():
                    return member
        else:
            try:
                return enum_class(value)
            except ValueError:
                pass

        choices = ", ".join(member.name for member in enum_class)
        raise ValueError(f"Unknown {enum_class.__name__}: {value!r} (expected one of {choices})")

    @staticmethod
    def enum_to_string(value: Any) -> str:
        """
        Convert enum to string value, or pass through if already string.

        Example:
            >>> EnumConverter.enum_to_string(ResizeMode.FIT)
            >>> # Returns "fit"
        """
        return value.value if isinstance(value, Enum) else value


parse_enum = EnumConverter.parse_enum
enum_to_string = EnumConverter.enum_to_string
