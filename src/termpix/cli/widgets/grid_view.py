"""Drawing area - one glyph per grid cell, scrolled to follow the cursor."""

from __future__ import annotations

from termpix.cli.core.ansi_text import truncate_and_pad
from termpix.cli.widgets.base import BaseWidget, Rect
from termpix.core.constants import (
    CSI,
    CURSOR_GLYPH,
    DIM,
    EMPTY_GLYPH,
    PAINTED_GLYPH,
    RESET,
)
from termpix.core.state import ApplicationState


class GridViewWidget(BaseWidget):
    """
    Renders the grid with the cursor on top.

    Glyph priority per cell is cursor, then painted, then empty. Painted
    cells take their color as the foreground. When the area is smaller
    than the grid only a window of it is drawn; the window scrolls the
    minimum needed to keep the cursor inside.
    """

    def __init__(self, state: ApplicationState) -> None:
        super().__init__()
        self._state = state
        self._scroll_x = 0
        self._scroll_y = 0

    @property
    def scroll(self) -> tuple[int, int]:
        return self._scroll_x, self._scroll_y

    def _follow_cursor(self, view_w: int, view_h: int) -> None:
        grid = self._state.grid
        cursor = self._state.cursor

        if cursor.x < self._scroll_x:
            self._scroll_x = cursor.x
        elif cursor.x >= self._scroll_x + view_w:
            self._scroll_x = cursor.x - view_w + 1
        if cursor.y < self._scroll_y:
            self._scroll_y = cursor.y
        elif cursor.y >= self._scroll_y + view_h:
            self._scroll_y = cursor.y - view_h + 1

        # Never scroll past the grid edge (matters after a resize)
        self._scroll_x = max(0, min(self._scroll_x, grid.width - view_w))
        self._scroll_y = max(0, min(self._scroll_y, grid.height - view_h))

    def render_row(self, y: int, x_start: int = 0, x_end: int | None = None) -> str:
        """Render cells [x_start, x_end) of grid row y."""
        grid = self._state.grid
        cursor = self._state.cursor
        if x_end is None:
            x_end = grid.width

        parts: list[str] = []
        style = ""
        for x in range(x_start, x_end):
            if (x, y) == (cursor.x, cursor.y):
                want, glyph = RESET, CURSOR_GLYPH
            else:
                cell = grid.get(x, y)
                if cell is not None:
                    want, glyph = f"{CSI}{cell.to_sgr_fg()}m", PAINTED_GLYPH
                else:
                    want, glyph = DIM, EMPTY_GLYPH
            if want != style:
                parts.append(want)
                style = want
            parts.append(glyph)
        parts.append(RESET)
        return "".join(parts)

    def render(self, bounds: Rect) -> list[str]:
        grid = self._state.grid
        view_w = min(grid.width, max(0, bounds.width))
        view_h = min(grid.height, max(0, bounds.height))
        if view_w == 0 or view_h == 0:
            return [""] * max(0, bounds.height)

        self._follow_cursor(view_w, view_h)

        lines = [
            truncate_and_pad(
                self.render_row(y, self._scroll_x, self._scroll_x + view_w),
                bounds.width,
            )
            for y in range(self._scroll_y, self._scroll_y + view_h)
        ]
        while len(lines) < bounds.height:
            lines.append(" " * bounds.width)
        return lines
