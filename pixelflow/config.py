"""
Runtime configuration for pixelflow.

Settings are pydantic models populated from environment variables:

- PIXELFLOW_ENV: environment name (default "development")
- PIXELFLOW_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
- PIXELFLOW_DEBUG: "1", "true", "yes" or "on" enables debug mode
- PIXELFLOW_FONT_PATHS: font files or directories, separated by os.pathsep
- PIXELFLOW_FONT_SIZE: default watermark font size
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from pixelflow.core.constants import SystemConstants, WatermarkConstants
from pixelflow.core.exceptions import InvalidArgumentError
from pixelflow.core.utils.params_processor import format_validation_error

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")


class SystemSettings(BaseModel):
    """Logging and debug settings."""

    log_level: str = Field(
        default=SystemConstants.LOG_LEVEL_DEFAULT, description="Root log level"
    )
    log_format: str = Field(default=SystemConstants.LOG_FORMAT, description="Log record format")
    debug: bool = Field(default=False, description="Enable debug mode")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
        return level


class FontSettings(BaseModel):
    """Font lookup settings for text watermarks."""

    search_paths: List[str] = Field(
        default_factory=list, description="Font files or directories searched first"
    )
    default_family: str = Field(
        default=WatermarkConstants.TEXT_DEFAULT_FONT_FAMILY,
        description="Font family used when a watermark names none",
    )
    default_size: int = Field(
        default=WatermarkConstants.TEXT_DEFAULT_FONT_SIZE, gt=0, description="Default font size"
    )


class Settings(BaseModel):
    """Top-level pixelflow settings."""

    environment: str = Field(default=SystemConstants.ENVIRONMENT_DEFAULT)
    system: SystemSettings = Field(default_factory=SystemSettings)
    fonts: FontSettings = Field(default_factory=FontSettings)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.system.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (used by tests)

        Returns:
            Settings instance

        Raises:
            InvalidArgumentError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        prefix = SystemConstants.ENV_PREFIX

        system: Dict[str, Any] = {}
        fonts: Dict[str, Any] = {}
        values: Dict[str, Any] = {"system": system, "fonts": fonts}

        if f"{prefix}ENV" in environ:
            values["environment"] = environ[f"{prefix}ENV"]
        if f"{prefix}LOG_LEVEL" in environ:
            system["log_level"] = environ[f"{prefix}LOG_LEVEL"]
        if f"{prefix}DEBUG" in environ:
            system["debug"] = environ[f"{prefix}DEBUG"].strip().lower() in _TRUE_VALUES
        if f"{prefix}FONT_PATHS" in environ:
            fonts["search_paths"] = [
                path for path in environ[f"{prefix}FONT_PATHS"].split(os.pathsep) if path
            ]
        if f"{prefix}FONT_SIZE" in environ:
            fonts["default_size"] = environ[f"{prefix}FONT_SIZE"]

        try:
            return cls(**values)
        except ValidationError as e:
            message = f"Invalid configuration: {format_validation_error(e)}"
            logger.error(message)
            raise InvalidArgumentError(message, "configure") from e


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings.from_env()
