"""
environments/universe.py

The canvas and everything on it.

A universe holds two populations: circles, which stay until
someone clears them, and apples, which count down and leave.
It also decides how much should happen between two paints.

Inspired by:
- Generative art sketchbooks
- Long-exposure photography
- Frame pacing in game loops
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Type, TypeVar
import logging
import math
import numpy as np

from circle_walk.core.circle import Apple, Circle, CircleConfig
from circle_walk.core.color import ColorMode

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class Status(Enum):
    """Whether persistent circles move. Apples ignore this."""
    RUNNING = "running"
    PAUSED = "paused"

    def next(self) -> "Status":
        return Status.PAUSED if self is Status.RUNNING else Status.RUNNING


class Speed(Enum):
    """Tick budget per frame, shared across all circles."""
    NORMAL = 1
    FAST = 3000

    @property
    def steps(self) -> int:
        return self.value

    def next(self) -> "Speed":
        return Speed.FAST if self is Speed.NORMAL else Speed.NORMAL


class SizeMode(Enum):
    """Canvas the circles walk on: the window, or something much larger."""
    NORMAL = "normal"
    GIANT = "giant"

    def next(self) -> "SizeMode":
        return SizeMode.GIANT if self is SizeMode.NORMAL else SizeMode.NORMAL


def parse_enum(enum_cls: Type[E], value) -> E:
    """Accept an enum member or its (case-insensitive) name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}")


@dataclass
class Config:
    """
    Global settings, created once and edited in place.

    Circle-level walk parameters live in CircleConfig; this holds
    the rest: run state, pacing, and the template for new entities.
    """
    status: Status = Status.RUNNING
    speed: Speed = Speed.NORMAL
    radius: float = 10.0                  # Radius of newly added circles
    apple_steps: int = 1000               # Lifetime of newly added apples
    color_mode: ColorMode = ColorMode.HSL
    size_mode: SizeMode = SizeMode.NORMAL
    normal_width: float = 800.0           # Canvas bounds in NORMAL size mode
    normal_height: float = 600.0
    giant_size: float = 15000.0           # Square canvas bound in GIANT size mode
    step_cap: Optional[int] = 5000        # Most apple-driven ticks per frame (None = no cap)
    outline: bool = False                 # Renderers stroke circles in black
    seed: Optional[int] = None


class Universe:
    """
    The whole simulation state.

    Features:
    - Persistent circles, frozen while paused
    - Apples that always move and expire on their own
    - Frame-step scheduling that keeps visual motion steady
      as the population grows

    A single owner drives it; nothing here blocks or waits.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        circle_config: Optional[CircleConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config or Config()
        if circle_config is None:
            self.circle_config = CircleConfig(
                width=self.config.normal_width,
                height=self.config.normal_height,
            )
            self._apply_size_mode()
        else:
            self.circle_config = circle_config
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.circles: List[Circle] = []
        self.apples: List[Apple] = []
        self.time = 0

    # ==================== Simulation ====================

    def tick(self) -> None:
        """
        Apply the update rules once to every live entity.

        1. Apples step and count down; expired ones are dropped
        2. Circles step, unless paused
        """
        self.time += 1

        self.apples = [apple for apple in self.apples if not apple.update(self.rng)]

        if self.config.status is Status.RUNNING:
            for circle in self.circles:
                circle.update(self.circle_config, self.rng)

    def remaining_apple_steps(self) -> int:
        """Longest countdown among live apples, 0 if there are none."""
        return max((apple.steps_remaining for apple in self.apples), default=0)

    def steps(self) -> int:
        """
        How many ticks to run before the next paint.

        The speed budget is shared across circles, so more circles
        means fewer ticks each and the overall motion stays steady.
        Apples get enough ticks to finish their countdown promptly,
        bounded by `step_cap` so one frame cannot stall on a huge one.
        """
        apple_steps = self.remaining_apple_steps()
        if self.config.step_cap is not None:
            apple_steps = min(self.config.step_cap, apple_steps)

        circle_steps = math.ceil(
            self.config.speed.steps / max(1, len(self.circles))
        )
        return max(apple_steps, circle_steps)

    # ==================== Population ====================

    def add_circle(self) -> Circle:
        circle = Circle.random(self.config, self.circle_config, self.rng)
        self.circles.append(circle)
        logger.debug(f"Added circle {circle} ({len(self.circles)} total)")
        return circle

    def add_apple(self) -> Apple:
        apple = Apple.random(self.config, self.circle_config, self.rng)
        self.apples.append(apple)
        logger.debug(f"Added apple with {apple.steps_remaining} steps")
        return apple

    def clear_circles(self) -> None:
        """Remove persistent circles; apples run out on their own."""
        logger.debug(f"Cleared {len(self.circles)} circles")
        self.circles.clear()

    def clear(self) -> None:
        """Remove everything."""
        logger.debug(
            f"Cleared {len(self.circles)} circles and {len(self.apples)} apples"
        )
        self.circles.clear()
        self.apples.clear()

    def is_empty(self) -> bool:
        """Nothing left to animate."""
        return not self.circles and not self.apples

    # ==================== Configuration ====================

    def toggle_status(self) -> Status:
        self.config.status = self.config.status.next()
        return self.config.status

    def toggle_speed(self) -> Speed:
        self.config.speed = self.config.speed.next()
        return self.config.speed

    def set_color_mode(self, mode) -> ColorMode:
        """Applies to circles added from now on; existing ones keep theirs."""
        self.config.color_mode = parse_enum(ColorMode, mode)
        return self.config.color_mode

    def toggle_size_mode(self) -> SizeMode:
        """
        Swap between the window-sized canvas and the giant one.

        Existing positions are not reprojected. Circles outside a
        shrunken canvas are pulled onto its edge by their next step.
        """
        self.config.size_mode = self.config.size_mode.next()
        self._apply_size_mode()
        logger.info(
            f"Size mode {self.config.size_mode.name}: "
            f"{self.circle_config.width:.0f}x{self.circle_config.height:.0f}"
        )
        return self.config.size_mode

    def resize(self, width: float, height: float) -> None:
        """New window dimensions. Only the live canvas in NORMAL mode changes."""
        self.config.normal_width = float(width)
        self.config.normal_height = float(height)
        self._apply_size_mode()
        logger.info(f"Resized normal canvas to {width:.0f}x{height:.0f}")

    def _apply_size_mode(self) -> None:
        if self.config.size_mode is SizeMode.GIANT:
            self.circle_config.width = self.config.giant_size
            self.circle_config.height = self.config.giant_size
        else:
            self.circle_config.width = self.config.normal_width
            self.circle_config.height = self.config.normal_height

    # ==================== Observation ====================

    def entities(self) -> Iterator[Circle]:
        """Every drawable disk: circles first, then apples."""
        yield from self.circles
        for apple in self.apples:
            yield apple.circle

    def get_positions(self) -> np.ndarray:
        """Positions of all drawable disks as an (n, 2) array."""
        return np.array(
            [c.position.as_tuple() for c in self.entities()], dtype=np.float64
        ).reshape(-1, 2)

    def get_radii(self) -> np.ndarray:
        return np.array([c.radius for c in self.entities()], dtype=np.float64)

    def get_colors(self) -> np.ndarray:
        """RGBA rows in [0, 1] for every drawable disk."""
        return np.array(
            [c.color.to_rgba() for c in self.entities()], dtype=np.float64
        ).reshape(-1, 4)

    def __repr__(self) -> str:
        return (
            f"Universe(circles={len(self.circles)}, "
            f"apples={len(self.apples)}, "
            f"time={self.time}, "
            f"status={self.config.status.name})"
        )
