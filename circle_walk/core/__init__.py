"""
Core components of the circle walk system.

- walk: the bounded random walk primitive
- color: RGB and HSL color models
- circle: Position, Circle, Apple
"""

from .walk import WalkConfig
from .color import Color, ColorConfig, ColorMode, RgbColor, HslColor
from .circle import Circle, CircleConfig, Position, Apple

__all__ = [
    "WalkConfig",
    "Color",
    "ColorConfig",
    "ColorMode",
    "RgbColor",
    "HslColor",
    "Circle",
    "CircleConfig",
    "Position",
    "Apple",
]
