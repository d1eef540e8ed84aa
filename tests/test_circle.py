"""
Tests for core/circle.py

Positions, circles, and apples.
"""

import numpy as np
import pytest

from circle_walk.core.circle import Apple, Circle, CircleConfig, Position
from circle_walk.core.color import ColorMode, HslColor, RgbColor
from circle_walk.environments.universe import Config


@pytest.fixture
def rng():
    return np.random.default_rng(7)


class TestCircleConfig:
    """Tests for CircleConfig dataclass."""

    def test_default_config(self):
        config = CircleConfig()
        assert config.width == 800.0
        assert config.height == 600.0
        assert config.max_position_delta == 6.3
        assert config.contain_radius is False

    def test_axis_walk_centre_only(self):
        config = CircleConfig(width=100.0, max_position_delta=4.0)
        walk = config.axis_walk(100.0, radius=10.0)
        assert walk.bounds() == (0.0, 100.0)
        assert walk.max_delta == 4.0

    def test_axis_walk_contain_radius(self):
        config = CircleConfig(width=100.0, contain_radius=True)
        assert config.axis_walk(100.0, radius=10.0).bounds() == (10.0, 90.0)

    def test_axis_walk_disk_wider_than_canvas(self):
        config = CircleConfig(width=10.0, contain_radius=True)
        assert config.axis_walk(10.0, radius=20.0).bounds() == (5.0, 5.0)


class TestPosition:
    """Position random walk inside the canvas."""

    def test_random_within_canvas(self, rng):
        config = CircleConfig(width=50.0, height=30.0)
        for _ in range(200):
            pos = Position.random(config, rng)
            assert 0.0 <= pos.x <= 50.0
            assert 0.0 <= pos.y <= 30.0

    def test_update_within_delta(self, rng):
        config = CircleConfig(width=100.0, height=100.0, max_position_delta=3.0)
        pos = Position(50.0, 50.0)
        pos.update(config, 10.0, rng)
        assert abs(pos.x - 50.0) <= 3.0
        assert abs(pos.y - 50.0) <= 3.0

    def test_update_stays_on_canvas(self, rng):
        config = CircleConfig(width=20.0, height=10.0, max_position_delta=15.0)
        pos = Position.random(config, rng)
        for _ in range(1000):
            pos.update(config, 5.0, rng)
            assert 0.0 <= pos.x <= 20.0
            assert 0.0 <= pos.y <= 10.0

    def test_update_after_canvas_shrinks(self, rng):
        config = CircleConfig(width=15000.0, height=15000.0, max_position_delta=6.3)
        pos = Position(12000.0, 9000.0)
        config.width = 800.0
        config.height = 600.0
        pos.update(config, 10.0, rng)
        assert 0.0 <= pos.x <= 800.0
        assert 0.0 <= pos.y <= 600.0

    def test_update_with_contain_radius(self, rng):
        config = CircleConfig(width=100.0, height=100.0, max_position_delta=50.0,
                              contain_radius=True)
        pos = Position(50.0, 50.0)
        for _ in range(500):
            pos.update(config, 10.0, rng)
            assert 10.0 <= pos.x <= 90.0
            assert 10.0 <= pos.y <= 90.0


class TestCircle:
    """Tests for Circle."""

    def test_random_circle(self, rng):
        config = Config(radius=12.0, color_mode=ColorMode.RGB)
        circle = Circle.random(config, CircleConfig(), rng)
        assert circle.radius == 12.0
        assert circle.dirty is True
        assert isinstance(circle.color, RgbColor)
        assert circle.color_mode is ColorMode.RGB

    def test_random_circle_hsl(self, rng):
        circle = Circle.random(Config(color_mode=ColorMode.HSL), CircleConfig(), rng)
        assert isinstance(circle.color, HslColor)
        assert circle.color_mode is ColorMode.HSL

    def test_update_sets_dirty(self, rng):
        circle = Circle.random(Config(), CircleConfig(), rng)
        circle.dirty = False
        circle.update(CircleConfig(), rng)
        assert circle.dirty is True

    def test_update_sets_dirty_even_without_change(self, rng):
        config = CircleConfig(width=0.0, height=0.0)
        config.color.hue.max_delta = 0.0
        circle = Circle(Position(0.0, 0.0), HslColor(10.0, 0.5, 0.5, 1.0), 3.0, dirty=False)
        circle.update(config, rng)
        assert circle.position.as_tuple() == (0.0, 0.0)
        assert circle.dirty is True

    def test_radius_not_walked(self, rng):
        circle = Circle.random(Config(radius=7.0), CircleConfig(), rng)
        for _ in range(100):
            circle.update(CircleConfig(), rng)
        assert circle.radius == 7.0

    def test_color_strings(self):
        circle = Circle(Position(1.0, 2.0), HslColor(0.0, 1.0, 0.5, 1.0), 5.0)
        assert circle.color_string() == "hsl(0.00, 100.00%, 50.00%, 1.0000)"
        assert circle.darker_color_string() == "hsl(0.00, 100.00%, 40.00%)"

    def test_repr(self, rng):
        circle = Circle.random(Config(), CircleConfig(), rng)
        assert "Circle(" in repr(circle)


class TestApple:
    """Apples count down and signal expiry."""

    def test_random_apple(self, rng):
        apple = Apple.random(Config(apple_steps=25), CircleConfig(), rng)
        assert apple.steps_remaining == 25
        assert apple.circle.dirty is True

    def test_update_returns_true_only_on_final_step(self, rng):
        apple = Apple.random(Config(apple_steps=5), CircleConfig(), rng)
        results = [apple.update(rng) for _ in range(5)]
        assert results == [False, False, False, False, True]
        assert apple.steps_remaining == 0
        assert apple.expired

    def test_never_decrements_below_zero(self, rng):
        apple = Apple.random(Config(apple_steps=1), CircleConfig(), rng)
        assert apple.update(rng) is True
        assert apple.update(rng) is True
        assert apple.steps_remaining == 0

    def test_zero_step_apple_expires_on_first_update(self, rng):
        apple = Apple.random(Config(apple_steps=0), CircleConfig(), rng)
        assert apple.update(rng) is True

    def test_config_snapshot(self, rng):
        circle_config = CircleConfig(width=100.0, height=100.0)
        apple = Apple.random(Config(), circle_config, rng)
        circle_config.width = 5.0
        circle_config.color.hue.max_value = 10.0
        assert apple.config.width == 100.0
        assert apple.config.color.hue.max_value == 360.0

    def test_update_uses_snapshot(self, rng):
        circle_config = CircleConfig(width=100.0, height=100.0, max_position_delta=50.0)
        apple = Apple.random(Config(apple_steps=100), circle_config, rng)
        circle_config.width = 1.0
        circle_config.height = 1.0
        xs = []
        for _ in range(50):
            apple.update(rng)
            xs.append(apple.circle.position.x)
        assert max(xs) > 1.0
