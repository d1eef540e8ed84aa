"""
circle_walk/services/driver.py

The frame driver: sole owner of the universe.

Once per animation frame it:
1. Applies commands queued by the UI
2. Asks the universe how many ticks this frame gets
3. Runs them, rendering after each tick or once at the end

A burst always runs to completion; nothing in it blocks.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional
import logging

from circle_walk.environments.universe import Universe

from .commands import Command, CommandQueue, CommandType
from .controls import get_control

logger = logging.getLogger(__name__)

Renderer = Callable[[Universe], None]


@dataclass
class FrameReport:
    """What one frame did."""
    steps: int
    circles: int
    apples: int
    empty: bool


class FrameDriver:
    """
    Runs the universe one frame at a time.

    Features:
    - Command queue in, so UI callbacks never share the universe
    - Step count per frame from the universe's scheduler
    - Incremental (per tick) or full-repaint (per frame) rendering
    """

    def __init__(
        self,
        universe: Universe,
        queue: Optional[CommandQueue] = None,
        renderer: Optional[Renderer] = None,
        render_every_tick: bool = True
    ):
        self.universe = universe
        self.queue = queue or CommandQueue()
        self.renderer = renderer
        self.render_every_tick = render_every_tick
        self.frames = 0

    def submit(self, command: Command) -> None:
        """Queue a command for the next frame."""
        self.queue.push(command)

    def frame(self) -> FrameReport:
        """Run one animation frame."""
        for command in self.queue.drain():
            try:
                self.apply(command)
            except (KeyError, ValueError, TypeError) as e:
                logger.error(f"Failed to apply {command.type.name}: {e}")

        steps = self.universe.steps()
        for _ in range(steps):
            self.universe.tick()
            if self.renderer is not None and self.render_every_tick:
                self.renderer(self.universe)

        if self.renderer is not None and not self.render_every_tick:
            self.renderer(self.universe)

        self.frames += 1
        logger.debug(f"Frame {self.frames}: {steps} steps, {self.universe}")

        return FrameReport(
            steps=steps,
            circles=len(self.universe.circles),
            apples=len(self.universe.apples),
            empty=self.universe.is_empty(),
        )

    def run(self, frames: int) -> List[FrameReport]:
        return [self.frame() for _ in range(frames)]

    def apply(self, command: Command) -> None:
        """Apply a single command to the universe immediately."""
        universe = self.universe
        kind = command.type
        logger.debug(f"Applying {kind.name} path={command.path} value={command.value}")

        if kind is CommandType.ADD_CIRCLE:
            universe.add_circle()
        elif kind is CommandType.ADD_APPLE:
            universe.add_apple()
        elif kind is CommandType.CLEAR_CIRCLES:
            universe.clear_circles()
        elif kind is CommandType.CLEAR_ALL:
            universe.clear()
        elif kind is CommandType.TOGGLE_STATUS:
            universe.toggle_status()
        elif kind is CommandType.TOGGLE_SPEED:
            universe.toggle_speed()
        elif kind is CommandType.TOGGLE_SIZE_MODE:
            universe.toggle_size_mode()
        elif kind is CommandType.SET_COLOR_MODE:
            if command.value is None:
                universe.set_color_mode(universe.config.color_mode.next())
            else:
                universe.set_color_mode(command.value)
        elif kind is CommandType.SET_VALUE:
            if command.path is None:
                raise ValueError("SET_VALUE requires a path")
            get_control(command.path).write(universe, command.value)
        elif kind is CommandType.RESIZE:
            width, height = command.value
            universe.resize(width, height)
        elif kind is CommandType.SET_OUTLINE:
            universe.config.outline = bool(command.value)
        else:
            raise ValueError(f"Unknown command type: {kind}")
