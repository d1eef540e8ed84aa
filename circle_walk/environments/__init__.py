"""
Environments: the spaces circles live in.

- universe: the canvas, its population, and the frame-step scheduler
"""

from .universe import Universe, Config, Status, Speed, SizeMode

__all__ = ["Universe", "Config", "Status", "Speed", "SizeMode"]
