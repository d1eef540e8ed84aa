"""
Observations: ways of looking at a universe.

- visualize: matplotlib canvas, incremental or full repaint
- svg: incremental SVG document, for keeping the picture
"""

from .svg import SvgRecorder
from .visualize import CanvasVisualizer, animate

__all__ = ["SvgRecorder", "CanvasVisualizer", "animate"]
