"""
core/color.py

Color as a place to wander.

Two ways of standing in color space: red/green/blue channels,
or hue/saturation/lightness. A circle is born into one of them
and stays there. Opacity is the restless one: it forgets itself
every step.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple
import colorsys
import numpy as np

from .walk import WalkConfig, sample, step, resample


DARKEN_AMOUNT = 0.1  # Lightness removed for highlight strokes


class ColorMode(Enum):
    """Which color representation new circles are born with."""
    RGB = "rgb"
    HSL = "hsl"

    def next(self) -> "ColorMode":
        return ColorMode.HSL if self is ColorMode.RGB else ColorMode.RGB


@dataclass
class ColorConfig:
    """Per-channel walk configuration for both color representations."""
    rgb: WalkConfig = field(default_factory=lambda: WalkConfig(10.0, 0.0, 255.0))
    hue: WalkConfig = field(default_factory=lambda: WalkConfig(2.0, 0.0, 360.0))
    saturation: WalkConfig = field(default_factory=lambda: WalkConfig(0.05, 0.4, 1.0))
    lightness: WalkConfig = field(default_factory=lambda: WalkConfig(0.05, 0.1, 0.9))
    opacity: WalkConfig = field(default_factory=lambda: WalkConfig(0.0, 0.0, 1.0))


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert 0-255 channels to (hue degrees, saturation, lightness).

    Saturation and lightness are in [0, 1]. Gray input (all channels
    equal) has hue 0 and saturation 0 exactly.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    lightness = (c_max + c_min) / 2

    if delta == 0:
        return 0.0, 0.0, lightness

    if c_max == r:
        hue = 60.0 * (((g - b) / delta) % 6)
    elif c_max == g:
        hue = 60.0 * ((b - r) / delta + 2)
    else:
        hue = 60.0 * ((r - g) / delta + 4)

    # delta > 0 keeps lightness strictly inside (0, 1)
    saturation = delta / (1 - abs(2 * lightness - 1))

    return hue, min(1.0, max(0.0, saturation)), lightness


def format_hsl(h: float, s: float, l: float) -> str:
    return f"hsl({h:.2f}, {s * 100:.2f}%, {l * 100:.2f}%)"


class Color(ABC):
    """
    A color that can take a step.

    Implementations own their channel values; the walk
    configuration is passed in fresh on every update so
    live slider changes take effect immediately.
    """

    @abstractmethod
    def update(self, config: ColorConfig, rng: np.random.Generator) -> None:
        """Advance every channel one step."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        """CSS-style color string."""
        pass

    @abstractmethod
    def to_hsl(self) -> Tuple[float, float, float]:
        """(hue degrees, saturation, lightness) view of this color."""
        pass

    @abstractmethod
    def to_rgba(self) -> Tuple[float, float, float, float]:
        """Channels as floats in [0, 1], for plotting backends."""
        pass

    def to_darker_color(self) -> str:
        """Slightly darker, opaque variant for highlight strokes."""
        h, s, l = self.to_hsl()
        return format_hsl(h, s, max(0.0, l - DARKEN_AMOUNT))

    def to_darker_rgb(self) -> Tuple[float, float, float]:
        """The darker variant as [0, 1] floats."""
        h, s, l = self.to_hsl()
        return colorsys.hls_to_rgb(
            (h % 360.0) / 360.0,
            float(np.clip(l - DARKEN_AMOUNT, 0.0, 1.0)),
            float(np.clip(s, 0.0, 1.0)),
        )

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class RgbColor(Color):
    r: float
    g: float
    b: float
    a: float

    @classmethod
    def random(cls, config: ColorConfig, rng: np.random.Generator) -> "RgbColor":
        return cls(
            r=sample(config.rgb, rng),
            g=sample(config.rgb, rng),
            b=sample(config.rgb, rng),
            a=sample(config.opacity, rng),
        )

    def update(self, config: ColorConfig, rng: np.random.Generator) -> None:
        self.r = step(self.r, config.rgb, rng)
        self.g = step(self.g, config.rgb, rng)
        self.b = step(self.b, config.rgb, rng)
        self.a = resample(config.opacity, rng)

    def to_string(self) -> str:
        return (
            f"rgb({int(round(self.r))}, {int(round(self.g))}, "
            f"{int(round(self.b))}, {self.a:.4f})"
        )

    def to_hsl(self) -> Tuple[float, float, float]:
        return rgb_to_hsl(self.r, self.g, self.b)

    def to_rgba(self) -> Tuple[float, float, float, float]:
        channels = np.clip(np.array([self.r, self.g, self.b]) / 255.0, 0.0, 1.0)
        return (*(float(c) for c in channels), float(np.clip(self.a, 0.0, 1.0)))


@dataclass
class HslColor(Color):
    h: float
    s: float
    l: float
    a: float

    @classmethod
    def random(cls, config: ColorConfig, rng: np.random.Generator) -> "HslColor":
        return cls(
            h=sample(config.hue, rng),
            s=sample(config.saturation, rng),
            l=sample(config.lightness, rng),
            a=sample(config.opacity, rng),
        )

    def update(self, config: ColorConfig, rng: np.random.Generator) -> None:
        # Hue is clamped like any other channel: a walk near 0 does not
        # wrap around to 360.
        self.h = step(self.h, config.hue, rng)
        self.s = step(self.s, config.saturation, rng)
        self.l = step(self.l, config.lightness, rng)
        self.a = resample(config.opacity, rng)

    def to_string(self) -> str:
        return (
            f"hsl({self.h:.2f}, {self.s * 100:.2f}%, "
            f"{self.l * 100:.2f}%, {self.a:.4f})"
        )

    def to_hsl(self) -> Tuple[float, float, float]:
        return self.h, self.s, self.l

    def to_rgba(self) -> Tuple[float, float, float, float]:
        r, g, b = colorsys.hls_to_rgb(
            (self.h % 360.0) / 360.0,
            float(np.clip(self.l, 0.0, 1.0)),
            float(np.clip(self.s, 0.0, 1.0)),
        )
        return r, g, b, float(np.clip(self.a, 0.0, 1.0))


def random_color(
    mode: ColorMode,
    config: ColorConfig,
    rng: np.random.Generator
) -> Color:
    """Build a freshly sampled color in the given representation."""
    if mode is ColorMode.RGB:
        return RgbColor.random(config, rng)
    elif mode is ColorMode.HSL:
        return HslColor.random(config, rng)
    else:
        raise ValueError(f"Unknown color mode: {mode}")
