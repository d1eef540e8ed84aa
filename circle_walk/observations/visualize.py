"""
observations/visualize.py

Watch the canvas fill.

Nothing is erased between ticks unless you ask: every step a
circle takes leaves a disk behind, and the picture is the sum
of all of them.

Inspired by:
- Long-exposure photography
- Pen plotters
- Scientific visualization
"""

from __future__ import annotations
from typing import List, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from circle_walk.core.circle import Circle
    from circle_walk.environments.universe import Universe
    from circle_walk.services.driver import FrameDriver

logger = logging.getLogger(__name__)


class CanvasVisualizer:
    """
    Matplotlib renderer for a universe.

    Two ways to draw:
    - render(): incremental, adds a disk for every dirty entity
      and clears its flag (the accumulating canvas)
    - repaint(): erases and draws the current population once
    """

    def __init__(
        self,
        universe: Universe,
        figsize: tuple = (10, 7.5),
        background: str = "#ffffff",
        max_patches: int = 20000
    ):
        self.universe = universe
        self.figsize = figsize
        self.background = background
        self.max_patches = max_patches

        self.patches: List = []

        # Lazy import matplotlib
        self._plt = None
        self._patches_mod = None
        self._fig = None
        self._ax = None

    def _setup_plot(self):
        """Initialize matplotlib figure."""
        import matplotlib.pyplot as plt
        import matplotlib.patches as mpatches
        self._plt = plt
        self._patches_mod = mpatches

        self._fig, self._ax = plt.subplots(figsize=self.figsize)
        self._fig.patch.set_facecolor(self.background)
        self._reset_axes()

    def _reset_axes(self) -> None:
        width = self.universe.circle_config.width
        height = self.universe.circle_config.height
        self._ax.set_xlim(0, width)
        self._ax.set_ylim(height, 0)  # Canvas coordinates: y grows downward
        self._ax.set_aspect('equal')
        self._ax.set_facecolor(self.background)
        self._ax.set_axis_off()

    def __call__(self, universe: Universe) -> None:
        self.render()

    def _draw(self, circle: Circle, edgecolor=None) -> None:
        face = circle.color.to_rgba()
        if edgecolor is None:
            edgecolor = 'black' if self.universe.config.outline else face
        patch = self._patches_mod.Circle(
            circle.position.as_tuple(),
            circle.radius,
            facecolor=face,
            edgecolor=edgecolor,
            linewidth=0.5,
        )
        self._ax.add_patch(patch)
        self.patches.append(patch)

    def _trim(self) -> None:
        excess = len(self.patches) - self.max_patches
        if excess > 0:
            for patch in self.patches[:excess]:
                patch.remove()
            self.patches = self.patches[excess:]

    def render(self) -> int:
        """
        Draw every entity that changed since it was last drawn.

        Returns the number of disks added.
        """
        if self._plt is None:
            self._setup_plot()

        drawn = 0
        for circle in self.universe.entities():
            if circle.dirty:
                self._draw(circle)
                circle.dirty = False
                drawn += 1

        self._trim()
        return drawn

    def repaint(self) -> None:
        """Erase the canvas and draw the current population."""
        if self._plt is None:
            self._setup_plot()

        self.clear()
        for circle in self.universe.entities():
            self._draw(circle)
            circle.dirty = False

    def highlight(self) -> None:
        """Outline persistent circles in a slightly darker shade of themselves."""
        if self._plt is None:
            self._setup_plot()

        for circle in self.universe.circles:
            self._draw(circle, edgecolor=circle.color.to_darker_rgb())

    def clear(self) -> None:
        """Erase everything drawn so far."""
        if self._ax is None:
            return
        self._ax.clear()
        self._reset_axes()
        self.patches = []

    def show(self, pause: float = 0.01) -> None:
        """Flush to screen."""
        if self._plt is None:
            self._setup_plot()
        self._ax.set_title(
            f"Circles: {len(self.universe.circles)} | "
            f"Apples: {len(self.universe.apples)} | "
            f"Time: {self.universe.time}",
            fontsize=10
        )
        self._plt.pause(pause)

    def save_frame(self, path: str) -> None:
        """Save current frame to file."""
        if self._fig is not None:
            self._fig.savefig(path, dpi=150, facecolor=self._fig.get_facecolor())
            logger.info(f"Saved frame to {path}")

    def close(self) -> None:
        """Close the visualization."""
        if self._plt is not None:
            self._plt.close(self._fig)


def animate(
    driver: FrameDriver,
    frames: int = 100,
    save_path: Optional[str] = None,
    pause: float = 0.01
) -> None:
    """
    Run and watch a driver.

    The visualizer is attached as the driver's renderer for the
    duration, then detached.
    """
    viz = CanvasVisualizer(driver.universe)
    previous = driver.renderer
    driver.renderer = viz

    try:
        for _ in range(frames):
            driver.frame()
            viz.show(pause)

        if save_path:
            viz.save_frame(save_path)

    finally:
        driver.renderer = previous
        viz.close()
