"""
observations/svg.py

An SVG document that grows one circle element at a time.

Incremental: only entities flagged dirty are appended, and the
flag is cleared once they are. The finished document is the art.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union, TYPE_CHECKING
import logging
import xml.etree.ElementTree as ET

if TYPE_CHECKING:
    from circle_walk.core.circle import Circle
    from circle_walk.environments.universe import Universe

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class SvgRecorder:
    """Accumulates circle elements into an SVG document."""

    def __init__(self, width: float, height: float, background: str = "#ffffff"):
        self.width = width
        self.height = height
        self.background = background
        self.clear()

    def clear(self) -> None:
        """Start over with a blank canvas."""
        self.root = ET.Element("svg", {
            "xmlns": SVG_NS,
            "width": f"{self.width:g}",
            "height": f"{self.height:g}",
            "viewBox": f"0 0 {self.width:g} {self.height:g}",
        })
        ET.SubElement(self.root, "rect", {
            "width": "100%",
            "height": "100%",
            "fill": self.background,
        })
        self.count = 0

    def __call__(self, universe: Universe) -> None:
        self.record(universe)

    def record(self, universe: Universe) -> int:
        """Append every dirty entity. Returns the number appended."""
        appended = 0
        for circle in universe.entities():
            if circle.dirty:
                self._append(circle, outline=universe.config.outline)
                circle.dirty = False
                appended += 1
        self.count += appended
        return appended

    def _append(self, circle: Circle, outline: bool = False) -> None:
        fill = circle.color_string()
        ET.SubElement(self.root, "circle", {
            "cx": f"{circle.position.x:.2f}",
            "cy": f"{circle.position.y:.2f}",
            "r": f"{circle.radius:g}",
            "fill": fill,
            "stroke": "rgb(0, 0, 0)" if outline else fill,
        })

    def to_string(self) -> str:
        return ET.tostring(self.root, encoding="unicode")

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_text(self.to_string(), encoding="utf-8")
        logger.info(f"Saved {self.count} circles to {path}")
        return path
