"""
circle_walk/config.py

Starting configuration from YAML.

    universe:
      speed: FAST
      color_mode: RGB
      radius: 6
    canvas:
      width: 1024
      height: 768
      max_position_delta: 4
      color:
        hue: {max_delta: 3, min_value: 180, max_value: 300}

Missing keys keep their defaults. Enum values are given by name.
"""

from __future__ import annotations
from dataclasses import asdict, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import logging
import math

import yaml

from circle_walk.core.circle import CircleConfig
from circle_walk.core.color import ColorConfig, ColorMode
from circle_walk.core.walk import WalkConfig
from circle_walk.environments.universe import Config, SizeMode, Speed, Status, parse_enum

logger = logging.getLogger(__name__)

_ENUM_FIELDS = {
    "status": Status,
    "speed": Speed,
    "color_mode": ColorMode,
    "size_mode": SizeMode,
}


def _known(cls, data: Dict[str, Any], section: str) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names
    if unknown:
        raise ValueError(f"Unknown keys in {section}: {sorted(unknown)}")
    return data


def config_from_dict(data: Optional[Dict[str, Any]]) -> Config:
    data = dict(_known(Config, data or {}, "universe"))
    for name, enum_cls in _ENUM_FIELDS.items():
        if name in data:
            data[name] = parse_enum(enum_cls, data[name])
    return Config(**data)


def circle_config_from_dict(
    data: Optional[Dict[str, Any]],
    config: Optional[Config] = None
) -> CircleConfig:
    data = dict(_known(CircleConfig, data or {}, "canvas"))
    color_data = _known(ColorConfig, data.pop("color", None) or {}, "canvas.color")

    color = ColorConfig()
    for name, walk in color_data.items():
        defaults = asdict(getattr(color, name))
        defaults.update(walk or {})
        section = f"canvas.color.{name}"
        _known(WalkConfig, defaults, section)
        for key, value in defaults.items():
            if not math.isfinite(float(value)):
                raise ValueError(f"{section}.{key} must be finite, got {value}")
        setattr(color, name, WalkConfig(**defaults))

    if config is not None:
        if config.size_mode is SizeMode.GIANT:
            data.setdefault("width", config.giant_size)
            data.setdefault("height", config.giant_size)
        else:
            data.setdefault("width", config.normal_width)
            data.setdefault("height", config.normal_height)
    return CircleConfig(color=color, **data)


def load_config(path: Union[str, Path]) -> Tuple[Config, CircleConfig]:
    """Load (Config, CircleConfig) from a YAML file."""
    with open(path) as f:
        document = yaml.safe_load(f) or {}

    config = config_from_dict(document.get("universe"))
    circle_config = circle_config_from_dict(document.get("canvas"), config)
    logger.info(f"Loaded configuration from {path}")
    return config, circle_config


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def dump_config(
    path: Union[str, Path],
    config: Config,
    circle_config: CircleConfig
) -> None:
    """Write configuration in the shape load_config reads."""
    document = {
        "universe": _plain(asdict(config)),
        "canvas": _plain(asdict(circle_config)),
    }
    with open(path, "w") as f:
        yaml.safe_dump(document, f, sort_keys=False)
    logger.info(f"Wrote configuration to {path}")
