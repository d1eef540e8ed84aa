"""
circle_walk/services/commands.py

Messages from the UI to the frame driver.

UI callbacks never touch the universe. They push a Command;
the driver drains the queue at the start of the next frame.

Inspired by simple, robust message passing systems.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional
import json
import queue
import logging

logger = logging.getLogger(__name__)


class CommandType(Enum):
    """Everything the UI may ask of the simulation."""
    ADD_CIRCLE = "add_circle"
    ADD_APPLE = "add_apple"
    CLEAR_CIRCLES = "clear_circles"
    CLEAR_ALL = "clear_all"
    TOGGLE_STATUS = "toggle_status"
    TOGGLE_SPEED = "toggle_speed"
    TOGGLE_SIZE_MODE = "toggle_size_mode"
    SET_COLOR_MODE = "set_color_mode"
    SET_VALUE = "set_value"
    RESIZE = "resize"
    SET_OUTLINE = "set_outline"


@dataclass
class Command:
    """
    A single request.

    - SET_VALUE uses `path` (a control path) and a numeric `value`
    - SET_COLOR_MODE uses `value` as a ColorMode name
    - RESIZE uses `value` as [width, height]
    - SET_OUTLINE uses `value` as a bool
    """
    type: CommandType
    path: Optional[str] = None
    value: Any = None

    def to_json(self) -> str:
        """Serialize command to JSON."""
        return json.dumps({
            "type": self.type.value,
            "path": self.path,
            "value": self.value,
        })

    @classmethod
    def from_json(cls, data: str) -> "Command":
        """Deserialize command from JSON."""
        d = json.loads(data)
        return cls(
            type=CommandType(d["type"]),
            path=d.get("path"),
            value=d.get("value"),
        )


class CommandQueue:
    """
    FIFO of pending commands.

    Thread-safe, so UI event handlers on other threads may push
    while the driver is mid-frame.
    """

    def __init__(self):
        self._queue: queue.Queue = queue.Queue()

    def push(self, command: Command) -> None:
        self._queue.put(command)

    def drain(self) -> List[Command]:
        """Take every pending command, oldest first."""
        commands = []
        while True:
            try:
                commands.append(self._queue.get_nowait())
            except queue.Empty:
                break
        return commands

    def clear(self) -> None:
        dropped = len(self.drain())
        if dropped:
            logger.debug(f"Dropped {dropped} pending commands")

    def __len__(self) -> int:
        return self._queue.qsize()
