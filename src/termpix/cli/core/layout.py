"""Screen layout: drawing area on top, status area below."""

from dataclasses import dataclass

from termpix.core.constants import DRAWING_AREA_PERCENT


@dataclass
class Layout:
    """Computed layout dimensions for current terminal size."""
    term_width: int
    term_height: int
    drawing_height: int
    status_height: int

    @property
    def status_top(self) -> int:
        """First row (0-indexed) of the status area."""
        return self.drawing_height


def calculate_layout(term_width: int, term_height: int) -> Layout:
    """
    Split the terminal vertically, DRAWING_AREA_PERCENT for the grid.

    The status area always gets at least one row, and the drawing area
    at least one row when the terminal has two or more.
    """
    term_height = max(1, term_height)
    drawing = term_height * DRAWING_AREA_PERCENT // 100
    drawing = min(drawing, term_height - 1)
    if term_height >= 2:
        drawing = max(1, drawing)
    return Layout(
        term_width=max(1, term_width),
        term_height=term_height,
        drawing_height=drawing,
        status_height=term_height - drawing,
    )
