"""Color selection overlay."""

from __future__ import annotations

from typing import Callable, Optional

from termpix.cli.core.ansi_text import truncate_and_pad
from termpix.cli.core.input import Key, KeyEvent
from termpix.cli.widgets.base import BaseWidget, Rect
from termpix.core.color import Color
from termpix.core.constants import CSI, RESET, REVERSE

PALETTE_COLORS: tuple[Color, ...] = (
    Color.BLACK,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
)

# Backgrounds that need dark label text
LIGHT_COLORS = frozenset({Color.GREEN, Color.YELLOW, Color.CYAN, Color.WHITE})

COLUMNS = 4
SWATCH_WIDTH = 11


class ColorPaletteWidget(BaseWidget):
    """
    Pick the current color from a fixed set of eight.

    Hidden until open() is called. Arrow keys move the selection without
    wrapping, Enter confirms, Esc cancels. While visible it consumes every
    key it is given.
    """

    def __init__(self, colors: tuple[Color, ...] = PALETTE_COLORS) -> None:
        super().__init__()
        self._colors = colors
        self._selected = 0
        self._visible = False
        self._on_select: Optional[Callable[[Color], None]] = None

    def set_on_select(self, callback: Callable[[Color], None]) -> None:
        self._on_select = callback

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def selected(self) -> Color:
        return self._colors[self._selected]

    @property
    def selected_index(self) -> int:
        return self._selected

    def open(self, current: Optional[Color] = None) -> None:
        """Show the overlay, preselecting current if it is in the palette."""
        self._selected = self._colors.index(current) if current in self._colors else 0
        self._visible = True

    def close(self) -> None:
        self._visible = False

    def handle_input(self, event: KeyEvent) -> bool:
        if not self._visible:
            return False

        count = len(self._colors)
        if event.key == Key.UP:
            if self._selected >= COLUMNS:
                self._selected -= COLUMNS
        elif event.key == Key.DOWN:
            if self._selected + COLUMNS < count:
                self._selected += COLUMNS
        elif event.key == Key.LEFT:
            if self._selected > 0:
                self._selected -= 1
        elif event.key == Key.RIGHT:
            if self._selected + 1 < count:
                self._selected += 1
        elif event.key == Key.ENTER:
            self.close()
            if self._on_select:
                self._on_select(self.selected)
        elif event.key == Key.ESCAPE:
            self.close()
        return True

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) the overlay needs, border included."""
        rows = (len(self._colors) + COLUMNS - 1) // COLUMNS
        return COLUMNS * SWATCH_WIDTH + 2, rows + 4

    def _swatch(self, index: int) -> str:
        color = self._colors[index]
        label = f"{color!r:^{SWATCH_WIDTH - 2}}"
        if index == self._selected:
            return f"{REVERSE}[{label}]{RESET}"
        fg = "30" if color in LIGHT_COLORS else "97"
        return f"{CSI}{color.to_sgr_bg()};{fg}m {label} {RESET}"

    def render(self, bounds: Rect) -> list[str]:
        inner = bounds.width - 2
        lines = ["┌" + "─" * inner + "┐"]
        lines.append("│" + truncate_and_pad(" Select color", inner) + "│")
        for start in range(0, len(self._colors), COLUMNS):
            row = "".join(self._swatch(i) for i in range(start, min(start + COLUMNS, len(self._colors))))
            lines.append("│" + truncate_and_pad(row, inner) + "│")
        lines.append("│" + truncate_and_pad(" ←↑↓→ choose  Enter select  Esc cancel", inner) + "│")
        lines.append("└" + "─" * inner + "┘")
        return lines[:bounds.height]
