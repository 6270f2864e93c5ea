"""
Tests for settings and logging configuration
"""

import logging
import os

import pytest

from pixelflow import InvalidArgumentError
from pixelflow.config import Settings, get_settings
from pixelflow.logging_config import configure_logging


class TestSettings:
    """Test settings defaults and environment parsing"""

    def test_defaults(self):
        """Test settings without environment variables"""
        settings = Settings.from_env({})

        assert settings.environment == "development"
        assert settings.system.log_level == "INFO"
        assert settings.system.debug is False
        assert settings.fonts.search_paths == []
        assert settings.fonts.default_size == 24
        assert settings.log_level_value == logging.INFO

    def test_from_env(self):
        """Test reading every supported variable"""
        environ = {
            "PIXELFLOW_ENV": "production",
            "PIXELFLOW_LOG_LEVEL": "warning",
            "PIXELFLOW_DEBUG": "yes",
            "PIXELFLOW_FONT_PATHS": os.pathsep.join(["/fonts/a", "", "/fonts/b"]),
            "PIXELFLOW_FONT_SIZE": "32",
        }
        settings = Settings.from_env(environ)

        assert settings.environment == "production"
        assert settings.system.log_level == "WARNING"
        assert settings.system.debug is True
        assert settings.fonts.search_paths == ["/fonts/a", "/fonts/b"]
        assert settings.fonts.default_size == 32

    @pytest.mark.parametrize("value", ["0", "false", "off", ""])
    def test_debug_false_values(self, value):
        """Test values that leave debug off"""
        assert Settings.from_env({"PIXELFLOW_DEBUG": value}).system.debug is False

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Settings.from_env({"PIXELFLOW_LOG_LEVEL": "LOUD"})

        assert exc_info.value.operation == "configure"

    def test_invalid_font_size(self):
        """Test that non-positive font sizes are rejected"""
        with pytest.raises(InvalidArgumentError):
            Settings.from_env({"PIXELFLOW_FONT_SIZE": "0"})

    def test_to_dict(self):
        """Test serialization"""
        data = Settings.from_env({}).to_dict()

        assert set(data) == {"environment", "system", "fonts"}
        assert data["system"]["log_level"] == "INFO"

    def test_get_settings_reads_environment(self, monkeypatch):
        """Test the cached process-wide settings"""
        monkeypatch.setenv("PIXELFLOW_ENV", "testing")

        settings = get_settings()
        assert settings.environment == "testing"
        assert get_settings() is settings


class TestConfigureLogging:
    """Test logging setup"""

    def test_debug_mode(self):
        """Test that debug mode lowers the package log level"""
        package_logger = logging.getLogger("pixelflow")
        previous = package_logger.level
        try:
            configure_logging(Settings.from_env({"PIXELFLOW_DEBUG": "1"}))

            assert package_logger.level == logging.DEBUG
            assert logging.getLogger("PIL").level == logging.WARNING
        finally:
            package_logger.setLevel(previous)

    def test_logs_environment(self, caplog):
        """Test the startup messages"""
        with caplog.at_level(logging.INFO, logger="pixelflow"):
            configure_logging(Settings.from_env({"PIXELFLOW_ENV": "staging"}))

        assert "Environment: staging" in caplog.text
