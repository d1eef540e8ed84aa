"""
core/walk.py

The one numeric primitive everything else is built on.

A value wanders, but never far, and never out of bounds.
Each step is a fresh uniform draw from a small window
around where it stands now.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass
class WalkConfig:
    """Bounds and step size of a bounded random walk."""
    max_delta: float = 1.0     # Largest distance a single step may travel
    min_value: float = 0.0     # Lower bound of the walk
    max_value: float = 1.0     # Upper bound of the walk

    def bounds(self) -> Tuple[float, float]:
        """
        (low, high) regardless of how min/max were entered.

        Sliders can momentarily push min above max while the user
        is still dragging; the walk treats that as the same range.
        """
        return (
            min(self.min_value, self.max_value),
            max(self.min_value, self.max_value),
        )

    @property
    def is_inverted(self) -> bool:
        return self.min_value > self.max_value

    def contains(self, value: float) -> bool:
        low, high = self.bounds()
        return low <= value <= high


def sample(config: WalkConfig, rng: np.random.Generator) -> float:
    """Initial placement: uniform over the whole range, delta ignored."""
    low, high = config.bounds()
    return float(rng.uniform(low, high))


def step(current: float, config: WalkConfig, rng: np.random.Generator) -> float:
    """
    One step of the walk.

    Draws uniformly from the intersection of
    [current - delta, current + delta] and [low, high].

    A current value that has fallen outside the bounds (the range was
    narrowed underneath it) collapses the window onto the nearest bound,
    so the result is always inside [low, high].
    """
    low, high = config.bounds()
    delta = abs(config.max_delta)

    window_low = max(low, min(current - delta, high))
    window_high = min(high, max(current + delta, low))

    if window_low >= window_high:
        return float(window_low)
    return float(rng.uniform(window_low, window_high))


def resample(config: WalkConfig, rng: np.random.Generator) -> float:
    """Memoryless channel: redrawn from the full range every step."""
    return sample(config, rng)
