"""Editor state - grid, cursor, active tool and current color."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from termpix.core.color import Color
from termpix.core.grid import Grid

logger = logging.getLogger(__name__)


class Tool(Enum):
    """Drawing tools. Value is the display name."""
    PEN = "Pen"
    ERASER = "Eraser"
    COLOR_PICKER = "Color Picker"

    @property
    def display_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class Cursor:
    """Cursor position on the grid."""
    x: int = 0
    y: int = 0


@dataclass
class ApplicationState:
    """
    Everything the editor mutates while running.

    The grid is only changed through apply_tool(). The cursor is kept
    inside the grid by move_cursor(), so tool application never needs a
    bounds check of its own.
    """
    grid: Grid = field(default_factory=Grid)
    cursor: Cursor = field(default_factory=Cursor)
    tool: Tool = Tool.PEN
    color: Color = Color.WHITE

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, ignoring the part of a move that leaves the grid."""
        x, y = self.cursor.x, self.cursor.y
        new_x = x + dx
        new_y = y + dy
        if 0 <= new_x < self.grid.width:
            x = new_x
        if 0 <= new_y < self.grid.height:
            y = new_y
        self.cursor = Cursor(x, y)

    def select_tool(self, tool: Tool) -> None:
        if tool is not self.tool:
            logger.debug("Tool: %s -> %s", self.tool.display_name, tool.display_name)
        self.tool = tool

    def set_color(self, color: Color) -> None:
        if color is None:
            raise ValueError("current color cannot be None")
        self.color = color

    def apply_tool(self) -> None:
        """Apply the active tool at the cursor."""
        x, y = self.cursor.x, self.cursor.y
        if self.tool is Tool.PEN:
            self.grid.set(x, y, self.color)
        elif self.tool is Tool.ERASER:
            self.grid.set(x, y, None)
        elif self.tool is Tool.COLOR_PICKER:
            picked = self.grid.get(x, y)
            if picked is not None:
                logger.debug("Picked %r at (%d, %d)", picked, x, y)
                self.color = picked
