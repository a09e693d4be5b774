"""Looping gradient GIF generator.

Parses two colors, renders a horizontal gradient that ping-pongs across the
canvas and writes the frames into an infinitely looping animated GIF.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "colors",
    "raster",
    "schedule",
    "sink",
    "pipeline",
]
