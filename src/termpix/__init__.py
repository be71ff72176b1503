"""
termpix: a terminal pixel-art editor

Draw on a 64x64 grid with a keyboard-driven cursor and export the result
as a 24-bit BMP.

Quick Start:
    $ termpix
    (arrows move, Space paints, 1/2/3 switch tools, c picks a color,
     Ctrl+S writes output.bmp, q quits)

Library use:
    >>> import termpix
    >>> state = termpix.ApplicationState()
    >>> state.apply_tool()
    >>> termpix.export_bmp(state.grid, "sprite.bmp")
"""

import logging

__version__ = "0.1.0"

from termpix.core.color import Color, ColorName, to_rgb
from termpix.core.grid import Grid
from termpix.core.state import ApplicationState, Cursor, Tool
from termpix.errors import ExportError, TermpixError
from termpix.io.writer import export_bmp, grid_to_image

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Color",
    "ColorName",
    "to_rgb",
    "Grid",
    "ApplicationState",
    "Cursor",
    "Tool",
    "ExportError",
    "TermpixError",
    "export_bmp",
    "grid_to_image",
]
