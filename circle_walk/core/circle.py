"""
core/circle.py

A circle is a position, a color, and a size.
It does not chase anything. It does not remember where it has been.
It only takes the next small step.

An apple is a circle that knows how long it has left.
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Tuple
import numpy as np

from .color import Color, ColorConfig, ColorMode, RgbColor, random_color
from .walk import WalkConfig, step

if TYPE_CHECKING:
    from circle_walk.environments.universe import Config


MIN_POS = 0.0


@dataclass
class CircleConfig:
    """
    Live parameters read by every circle on every update.

    Persistent circles see changes on their next tick;
    apples keep the copy taken when they were created.
    """
    width: float = 800.0                   # Canvas width
    height: float = 600.0                  # Canvas height
    max_position_delta: float = 6.3        # Largest step per axis per tick
    color: ColorConfig = field(default_factory=ColorConfig)
    contain_radius: bool = False           # Keep whole disk on canvas, not just centre

    def axis_walk(self, extent: float, radius: float = 0.0) -> WalkConfig:
        """Walk configuration for one position axis."""
        if self.contain_radius and radius > 0:
            low, high = radius, extent - radius
            if low > high:
                # Disk wider than the canvas: pin to the centre line
                low = high = extent / 2
        else:
            low, high = MIN_POS, extent
        return WalkConfig(self.max_position_delta, low, high)


@dataclass
class Position:
    x: float
    y: float

    @classmethod
    def random(
        cls,
        config: CircleConfig,
        rng: np.random.Generator,
        radius: float = 0.0
    ) -> "Position":
        """First placement is uniform over the canvas, delta plays no part."""
        x_walk = config.axis_walk(config.width, radius)
        y_walk = config.axis_walk(config.height, radius)
        low_x, high_x = x_walk.bounds()
        low_y, high_y = y_walk.bounds()
        return cls(
            x=float(rng.uniform(low_x, high_x)),
            y=float(rng.uniform(low_y, high_y)),
        )

    def update(
        self,
        config: CircleConfig,
        radius: float,
        rng: np.random.Generator
    ) -> None:
        """
        Step each axis independently inside the canvas.

        Only with `contain_radius` does the radius narrow the bounds;
        otherwise the centre alone is kept on the canvas.
        """
        self.x = step(self.x, config.axis_walk(config.width, radius), rng)
        self.y = step(self.y, config.axis_walk(config.height, radius), rng)

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass
class Circle:
    """
    A persistent disk.

    `dirty` tells incremental renderers there is something new to draw.
    The circle sets it; the renderer clears it.
    """
    position: Position
    color: Color
    radius: float
    dirty: bool = True

    @classmethod
    def random(
        cls,
        config: Config,
        circle_config: CircleConfig,
        rng: np.random.Generator
    ) -> "Circle":
        return cls(
            position=Position.random(circle_config, rng, config.radius),
            color=random_color(config.color_mode, circle_config.color, rng),
            radius=config.radius,
        )

    def update(self, config: CircleConfig, rng: np.random.Generator) -> None:
        self.position.update(config, self.radius, rng)
        self.color.update(config.color, rng)
        self.dirty = True

    @property
    def color_mode(self) -> ColorMode:
        return ColorMode.RGB if isinstance(self.color, RgbColor) else ColorMode.HSL

    def color_string(self) -> str:
        return self.color.to_string()

    def darker_color_string(self) -> str:
        return self.color.to_darker_color()

    def __repr__(self) -> str:
        return (
            f"Circle(pos=[{self.position.x:.2f}, {self.position.y:.2f}], "
            f"r={self.radius:.1f}, color={self.color_string()})"
        )


@dataclass
class Apple:
    """
    A circle on a countdown.

    Carries its own snapshot of the canvas configuration, so
    later slider changes do not reach it.
    """
    circle: Circle
    config: CircleConfig
    steps_remaining: int

    @classmethod
    def random(
        cls,
        config: Config,
        circle_config: CircleConfig,
        rng: np.random.Generator
    ) -> "Apple":
        return cls(
            circle=Circle.random(config, circle_config, rng),
            config=deepcopy(circle_config),
            steps_remaining=max(0, int(config.apple_steps)),
        )

    def update(self, rng: np.random.Generator) -> bool:
        """
        Advance one step. Returns True when the countdown has run out
        and the apple should be removed.
        """
        self.circle.update(self.config, rng)
        if self.steps_remaining > 0:
            self.steps_remaining -= 1
        return self.steps_remaining == 0

    @property
    def expired(self) -> bool:
        return self.steps_remaining == 0
