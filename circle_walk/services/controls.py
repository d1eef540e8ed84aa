"""
circle_walk/services/controls.py

The configuration surface, as a table.

Each row names one adjustable value by its attribute path on the
universe, with the range a slider should offer. A UI builds its
widgets from the table; the frame driver applies the writes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple
import logging
import math

from circle_walk.core.walk import WalkConfig

logger = logging.getLogger(__name__)


def _resolve(root: Any, path: str) -> Tuple[Any, str]:
    """Walk a dotted path down to (owner, attribute name)."""
    parts = path.split(".")
    owner = root
    for part in parts[:-1]:
        owner = getattr(owner, part)
    if not hasattr(owner, parts[-1]):
        raise KeyError(f"No attribute {parts[-1]!r} on path {path!r}")
    return owner, parts[-1]


def read_path(root: Any, path: str) -> Any:
    owner, name = _resolve(root, path)
    return getattr(owner, name)


def write_path(root: Any, path: str, value: Any) -> None:
    owner, name = _resolve(root, path)
    setattr(owner, name, value)


@dataclass(frozen=True)
class ControlSpec:
    """
    One adjustable number.

    The range is what a slider offers; writes are not clamped to it.
    Out-of-range or inverted walk bounds are normalized by the walk.
    """
    path: str
    title: str
    minimum: float
    maximum: float
    step: float = 1.0
    integer: bool = False

    def read(self, universe) -> float:
        return read_path(universe, self.path)

    def write(self, universe, value: float) -> None:
        """Raises ValueError for NaN or infinite values."""
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{self.path} needs a finite value, got {value}")
        if self.integer:
            value = int(round(value))
        write_path(universe, self.path, value)

        owner, _ = _resolve(universe, self.path)
        if isinstance(owner, WalkConfig) and owner.is_inverted:
            logger.warning(
                f"{self.path} left range inverted "
                f"({owner.min_value} > {owner.max_value})"
            )


def _walk_controls(prefix: str, label: str, low: float, high: float, step: float) -> List[ControlSpec]:
    return [
        ControlSpec(f"{prefix}.max_delta", f"{label} max_delta", 0.0, high - low, step),
        ControlSpec(f"{prefix}.min_value", f"{label} min_value", low, high, step),
        ControlSpec(f"{prefix}.max_value", f"{label} max_value", low, high, step),
    ]


DEFAULT_CONTROLS: List[ControlSpec] = [
    ControlSpec("circle_config.max_position_delta", "Movement Speed", 0.0, 100.0, 1.0),
    ControlSpec("config.radius", "Size", 1.0, 100.0, 1.0),
    ControlSpec("config.apple_steps", "Steps", 0.0, 10000.0, 100.0, integer=True),
    *_walk_controls("circle_config.color.hue", "Hue", 0.0, 360.0, 1.0),
    *_walk_controls("circle_config.color.saturation", "Saturation", 0.0, 1.0, 0.01),
    *_walk_controls("circle_config.color.lightness", "Lightness", 0.0, 1.0, 0.01),
    *_walk_controls("circle_config.color.rgb", "RGB", 0.0, 255.0, 1.0),
]

_CONTROLS_BY_PATH: Dict[str, ControlSpec] = {c.path: c for c in DEFAULT_CONTROLS}


def get_control(path: str) -> ControlSpec:
    """Look up a control by path. Raises KeyError if unknown."""
    try:
        return _CONTROLS_BY_PATH[path]
    except KeyError:
        raise KeyError(f"Unknown control: {path}") from None


def snapshot(universe) -> Dict[str, float]:
    """Current value of every control, keyed by path."""
    return {c.path: c.read(universe) for c in DEFAULT_CONTROLS}
