"""TUI widgets for the editor screen."""

from termpix.cli.widgets.base import BaseWidget, Rect
from termpix.cli.widgets.grid_view import GridViewWidget
from termpix.cli.widgets.status_panel import StatusPanelWidget
from termpix.cli.widgets.color_palette import ColorPaletteWidget, PALETTE_COLORS

__all__ = [
    "BaseWidget",
    "Rect",
    "GridViewWidget",
    "StatusPanelWidget",
    "ColorPaletteWidget",
    "PALETTE_COLORS",
]
