"""
Tests for TextWatermark and font loading
"""

import numpy as np
import pytest
from pydantic import ValidationError

from pixelflow import (
    FontSpec,
    ImageProcessError,
    InvalidArgumentError,
    PixelBuffer,
    PixelFormat,
    TextWatermark,
    WatermarkPosition,
    apply_watermark,
)
from pixelflow.config import FontSettings, Settings
from pixelflow.watermark import load_font
from pixelflow.watermark import text as text_module


@pytest.fixture
def black_image():
    """Create a 200x100 black RGB image"""
    return PixelBuffer.blank(200, 100, PixelFormat.RGB24)


class TestTextWatermarkConfig:
    """Test configuration and validation"""

    def test_defaults(self):
        """Test default values"""
        watermark = TextWatermark.of("(c) 2024")

        assert watermark.text == "(c) 2024"
        assert watermark.color == (255, 255, 255, 255)
        assert watermark.background_color is None
        assert watermark.position is WatermarkPosition.BOTTOM_RIGHT
        assert watermark.opacity == 0.7
        assert watermark.margin == 5
        assert watermark.font == FontSpec()

    def test_color_normalized(self):
        """Test RGB and gray colors are normalized to RGBA"""
        watermark = TextWatermark(text="x", color=(10, 20, 30), background_color=128)

        assert watermark.color == (10, 20, 30, 255)
        assert watermark.background_color == (128, 128, 128, 255)

    def test_font_from_dict(self):
        """Test nested font configuration"""
        watermark = TextWatermark(text="x", font={"size": 12})
        assert watermark.font == FontSpec(size=12)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"text": ""},
            {"text": "x", "opacity": 2},
            {"text": "x", "margin": -3},
            {"text": "x", "color": (0, 0, 300)},
            {"text": "x", "font": {"size": 0}},
            {"text": "x", "position": "nowhere"},
            {"text": "x", "unknown": 1},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test that invalid settings raise InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            TextWatermark(**kwargs)

        assert exc_info.value.operation == "text_watermark"

    def test_frozen(self):
        """Test immutability"""
        watermark = TextWatermark.of("x")

        with pytest.raises(ValidationError):
            watermark.text = "y"


class TestTextWatermarkApply:
    """Test drawing text watermarks"""

    def test_measure(self):
        """Test that measured text has a positive size"""
        width, height, ascent = TextWatermark(text="Hello", font={"size": 20}).measure()

        assert width > 0
        assert height >= ascent > 0

    def test_longer_text_is_wider(self):
        """Test that width grows with the text"""
        short = TextWatermark(text="ab", font={"size": 20}).measure()[0]
        long = TextWatermark(text="abababab", font={"size": 20}).measure()[0]

        assert long > short

    def test_draws_into_target(self, black_image):
        """Test that apply modifies the target in place"""
        watermark = TextWatermark(text="Hello", position="center", opacity=1.0, font={"size": 20})
        watermark.apply(black_image)

        assert black_image.array.any()

    def test_text_stays_in_anchor_box(self, black_image):
        """Test that drawing happens near the anchored box"""
        watermark = TextWatermark(text="Hi", position="top_left", margin=10, opacity=1.0)
        width, height, _ = watermark.measure()
        watermark.apply(black_image)

        rows, cols = np.nonzero(black_image.array.any(axis=2))
        assert rows.min() >= 10
        assert cols.min() >= 10
        assert rows.max() < 10 + height + 2
        assert cols.max() < 10 + width + 2

    def test_background_box(self, black_image):
        """Test that the background box extends around the text by the margin"""
        watermark = TextWatermark(
            text="Hi",
            position="top_left",
            margin=5,
            opacity=1.0,
            background_color=(0, 0, 255),
        )
        watermark.apply(black_image)

        assert black_image.pixel(0, 0) == (0, 0, 255)
        assert black_image.pixel(199, 99) == (0, 0, 0)

    def test_zero_opacity(self, black_image):
        """Test that an invisible watermark changes nothing"""
        TextWatermark(text="Hello", opacity=0.0).apply(black_image)
        assert not black_image.array.any()

    def test_gray_target(self):
        """Test drawing into a gray image"""
        target = PixelBuffer.blank(120, 40, PixelFormat.GRAY8)
        TextWatermark(text="Gray", position="center", opacity=1.0).apply(target)

        assert target.pixel_format is PixelFormat.GRAY8
        assert target.array.any()

    def test_font_failure_is_wrapped(self, black_image, monkeypatch):
        """Test that Pillow errors carry the operation and image size"""

        class BrokenFont:
            def getmetrics(self):
                raise OSError("invalid font file")

        monkeypatch.setattr(text_module, "load_font", lambda spec: BrokenFont())

        with pytest.raises(ImageProcessError) as exc_info:
            TextWatermark.of("Hello").apply(black_image)

        assert exc_info.value.operation == "text_watermark"
        assert (exc_info.value.image_width, exc_info.value.image_height) == (200, 100)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert not black_image.array.any()

    def test_apply_watermark_is_pure(self, black_image):
        """Test the copy-returning form"""
        result = apply_watermark(black_image, TextWatermark(text="Hello", opacity=1.0))

        assert not black_image.array.any()
        assert result.array.any()


class TestLoadFont:
    """Test font resolution"""

    def test_missing_family_falls_back(self):
        """Test that unknown fonts fall back to Pillow's default"""
        font = load_font(FontSpec(family="NoSuchFontFamily", size=18))
        assert font.getlength("abc") > 0

    def test_default_size_from_settings(self):
        """Test that an unset size uses the configured default"""
        settings = Settings(fonts=FontSettings(default_family="NoSuchFontFamily", default_size=30))
        small = load_font(FontSpec(size=10), settings)
        large = load_font(FontSpec(), settings)

        assert large.getlength("abc") > small.getlength("abc")
