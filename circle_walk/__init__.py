"""
Circle Walk: colored disks wandering through position and color space

A generative-art simulation. Each circle takes small, bounded random
steps in where it is and what color it is; the canvas remembers.
"""

__version__ = "0.1.0"
