"""
Tests for core/color.py

RGB and HSL color models, conversion, and formatting.
"""

import numpy as np
import pytest

from circle_walk.core.color import (
    ColorConfig,
    ColorMode,
    RgbColor,
    HslColor,
    rgb_to_hsl,
    random_color,
    DARKEN_AMOUNT,
)
from circle_walk.core.walk import WalkConfig


@pytest.fixture
def rng():
    return np.random.default_rng(42)


class TestColorConfig:
    """Tests for ColorConfig defaults."""

    def test_default_config(self):
        config = ColorConfig()
        assert config.rgb.bounds() == (0.0, 255.0)
        assert config.hue.bounds() == (0.0, 360.0)
        assert config.saturation.bounds() == (0.4, 1.0)
        assert config.lightness.bounds() == (0.1, 0.9)
        assert config.opacity.bounds() == (0.0, 1.0)

    def test_configs_not_shared(self):
        a = ColorConfig()
        b = ColorConfig()
        a.hue.max_delta = 50.0
        assert b.hue.max_delta == 2.0


class TestColorMode:

    def test_next(self):
        assert ColorMode.RGB.next() is ColorMode.HSL
        assert ColorMode.HSL.next() is ColorMode.RGB


class TestRgbToHsl:
    """Conversion used for darker highlight colors."""

    def test_gray_has_zero_hue_and_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(128 / 255)

    def test_black(self):
        assert rgb_to_hsl(0, 0, 0) == (0.0, 0.0, 0.0)

    def test_white(self):
        h, s, l = rgb_to_hsl(255, 255, 255)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(1.0)

    def test_pure_red(self):
        h, s, l = rgb_to_hsl(255, 0, 0)
        assert h == pytest.approx(0.0)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_pure_green(self):
        h, s, l = rgb_to_hsl(0, 255, 0)
        assert h == pytest.approx(120.0)
        assert s == pytest.approx(1.0)

    def test_near_black_pure_hue(self):
        h, s, l = rgb_to_hsl(1, 0, 0)
        assert h == pytest.approx(0.0)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5 / 255)

    def test_pure_blue(self):
        h, _, _ = rgb_to_hsl(0, 0, 255)
        assert h == pytest.approx(240.0)

    def test_magenta_hue_positive(self):
        h, _, _ = rgb_to_hsl(255, 0, 128)
        assert 300.0 < h < 360.0


class TestRgbColor:
    """Tests for the RGB variant."""

    def test_random_in_range(self, rng):
        config = ColorConfig()
        for _ in range(50):
            color = RgbColor.random(config, rng)
            for channel in (color.r, color.g, color.b):
                assert 0.0 <= channel <= 255.0
            assert 0.0 <= color.a <= 1.0

    def test_update_within_delta(self, rng):
        config = ColorConfig(rgb=WalkConfig(3.0, 0.0, 255.0))
        color = RgbColor(100.0, 150.0, 200.0, 0.5)
        color.update(config, rng)
        assert abs(color.r - 100.0) <= 3.0
        assert abs(color.g - 150.0) <= 3.0
        assert abs(color.b - 200.0) <= 3.0

    def test_update_saturates(self, rng):
        config = ColorConfig(rgb=WalkConfig(20.0, 0.0, 255.0))
        color = RgbColor(0.0, 255.0, 0.0, 0.5)
        for _ in range(200):
            color.update(config, rng)
            assert 0.0 <= color.r <= 255.0
            assert 0.0 <= color.g <= 255.0

    def test_opacity_resampled(self, rng):
        # Opacity is not bounded by a delta: over many steps it spans the range
        config = ColorConfig()
        color = RgbColor(10.0, 10.0, 10.0, 0.5)
        values = []
        for _ in range(200):
            color.update(config, rng)
            values.append(color.a)
        assert max(values) - min(values) > 0.8

    def test_to_string(self):
        color = RgbColor(12.4, 200.6, 0.0, 0.25)
        assert color.to_string() == "rgb(12, 201, 0, 0.2500)"
        assert str(color) == color.to_string()

    def test_to_rgba(self):
        r, g, b, a = RgbColor(255.0, 0.0, 51.0, 0.5).to_rgba()
        assert r == pytest.approx(1.0)
        assert g == pytest.approx(0.0)
        assert b == pytest.approx(0.2)
        assert a == pytest.approx(0.5)

    def test_darker_color_gray(self):
        color = RgbColor(128.0, 128.0, 128.0, 1.0)
        darker = color.to_darker_color()
        expected_l = (128 / 255 - DARKEN_AMOUNT) * 100
        assert darker == f"hsl(0.00, 0.00%, {expected_l:.2f}%)"

    def test_darker_color_floors_at_zero(self):
        color = RgbColor(5.0, 5.0, 5.0, 1.0)
        assert color.to_darker_color() == "hsl(0.00, 0.00%, 0.00%)"

    def test_darker_color_does_not_mutate(self):
        color = RgbColor(10.0, 20.0, 30.0, 0.3)
        color.to_darker_color()
        assert (color.r, color.g, color.b, color.a) == (10.0, 20.0, 30.0, 0.3)


class TestHslColor:
    """Tests for the HSL variant."""

    def test_random_in_range(self, rng):
        config = ColorConfig()
        for _ in range(50):
            color = HslColor.random(config, rng)
            assert 0.0 <= color.h <= 360.0
            assert 0.4 <= color.s <= 1.0
            assert 0.1 <= color.l <= 0.9

    def test_update_stays_in_configured_bounds(self, rng):
        config = ColorConfig(
            hue=WalkConfig(30.0, 100.0, 200.0),
            saturation=WalkConfig(0.3, 0.5, 0.6),
            lightness=WalkConfig(0.3, 0.2, 0.3),
        )
        color = HslColor.random(config, rng)
        for _ in range(300):
            color.update(config, rng)
            assert 100.0 <= color.h <= 200.0
            assert 0.5 <= color.s <= 0.6
            assert 0.2 <= color.l <= 0.3

    def test_to_string(self):
        color = HslColor(120.0, 0.5, 0.25, 0.75)
        assert color.to_string() == "hsl(120.00, 50.00%, 25.00%, 0.7500)"

    def test_darker_color(self):
        color = HslColor(200.0, 0.8, 0.5, 0.4)
        assert color.to_darker_color() == "hsl(200.00, 80.00%, 40.00%)"
        assert color.l == 0.5

    def test_darker_color_floor(self):
        color = HslColor(10.0, 0.5, 0.05, 1.0)
        assert color.to_darker_color() == "hsl(10.00, 50.00%, 0.00%)"

    def test_to_rgba_red(self):
        r, g, b, a = HslColor(0.0, 1.0, 0.5, 1.0).to_rgba()
        assert (r, g, b) == pytest.approx((1.0, 0.0, 0.0))
        assert a == 1.0

    def test_darker_rgb(self):
        r, g, b = HslColor(0.0, 1.0, 0.5, 1.0).to_darker_rgb()
        assert r == pytest.approx(0.8)
        assert g == pytest.approx(0.0)
        assert b == pytest.approx(0.0)


class TestRandomColor:

    def test_rgb_mode(self, rng):
        assert isinstance(random_color(ColorMode.RGB, ColorConfig(), rng), RgbColor)

    def test_hsl_mode(self, rng):
        assert isinstance(random_color(ColorMode.HSL, ColorConfig(), rng), HslColor)

    def test_unknown_mode(self, rng):
        with pytest.raises(ValueError):
            random_color("cmyk", ColorConfig(), rng)
