"""
circle_walk/services/

Everything between a UI and the universe.

Architecture:
- Commands: UI callbacks push messages onto a queue
- Controls: a declarative table of adjustable values
- Driver: the single owner that applies commands and runs frames

The universe is never shared with callbacks; only the driver writes.
"""

from .commands import Command, CommandQueue, CommandType
from .controls import ControlSpec, DEFAULT_CONTROLS, get_control
from .driver import FrameDriver, FrameReport

__all__ = [
    "Command",
    "CommandQueue",
    "CommandType",
    "ControlSpec",
    "DEFAULT_CONTROLS",
    "get_control",
    "FrameDriver",
    "FrameReport",
]
