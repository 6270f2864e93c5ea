"""
Tests for the error hierarchy
"""

import pytest

from pixelflow import (
    ImageProcessError,
    InvalidArgumentError,
    OutOfBoundsError,
    PixelFlowError,
    UnsupportedError,
)


class TestErrorHierarchy:
    """Test exception types and their built-in bases"""

    def test_builtin_bases(self):
        """Test compatibility with built-in exception types"""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(OutOfBoundsError, IndexError)
        assert issubclass(UnsupportedError, InvalidArgumentError)
        assert issubclass(ImageProcessError, PixelFlowError)

    @pytest.mark.parametrize(
        "error_class",
        [InvalidArgumentError, OutOfBoundsError, UnsupportedError, ImageProcessError],
    )
    def test_all_derive_from_base(self, error_class):
        """Test that every error can be caught as PixelFlowError"""
        with pytest.raises(PixelFlowError):
            raise error_class("failure", "test")


class TestErrorContext:
    """Test operation and dimension context"""

    def test_str_with_context(self):
        """Test message formatting with operation and dimensions"""
        error = OutOfBoundsError("Region too large", "crop", 200, 100)
        assert str(error) == "Region too large [operation: crop] [image: 200x100]"

    def test_str_without_dimensions(self):
        """Test that unknown dimensions are omitted"""
        error = InvalidArgumentError("Source image cannot be None", "blur")
        assert str(error) == "Source image cannot be None [operation: blur]"
        assert not error.has_dimensions

    def test_str_message_only(self):
        """Test a bare message"""
        assert str(PixelFlowError("boom")) == "boom"

    def test_to_dict(self):
        """Test structured representation"""
        error = UnsupportedError("Too big", "pad", 10, 20)
        assert error.to_dict() == {
            "error": "UnsupportedError",
            "message": "Too big",
            "operation": "pad",
            "image_width": 10,
            "image_height": 20,
        }

    def test_to_dict_unknown_dimensions(self):
        """Test that unknown dimensions are reported as None"""
        data = InvalidArgumentError("bad", "resize").to_dict()
        assert data["image_width"] is None
        assert data["image_height"] is None
