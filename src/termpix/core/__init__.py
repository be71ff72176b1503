"""Core data structures for pixel art editing."""

from termpix.core.color import Color, ColorName, to_rgb
from termpix.core.grid import Grid
from termpix.core.state import ApplicationState, Cursor, Tool

__all__ = ["Color", "ColorName", "to_rgb", "Grid", "ApplicationState", "Cursor", "Tool"]
