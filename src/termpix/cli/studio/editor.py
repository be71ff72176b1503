"""Interactive pixel editor application.

This module provides the EditorApp main loop that ties together:
- GridViewWidget: the 64x64 drawing area
- StatusPanelWidget: tools, current color, key legend and messages
- ColorPaletteWidget: overlay for choosing the current color
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from termpix.cli.core.ansi_text import truncate, truncate_and_pad
from termpix.cli.core.input import InputReader, KeyEvent, KeySource
from termpix.cli.core.layout import calculate_layout
from termpix.cli.core.shortcuts import Action, lookup
from termpix.cli.core.terminal import Terminal
from termpix.cli.handler import handle_key
from termpix.cli.widgets.base import Rect
from termpix.cli.widgets.color_palette import ColorPaletteWidget
from termpix.cli.widgets.grid_view import GridViewWidget
from termpix.cli.widgets.status_panel import StatusPanelWidget
from termpix.core.color import Color
from termpix.core.constants import CSI, OUTPUT_FILENAME, POLL_TIMEOUT
from termpix.core.state import ApplicationState
from termpix.errors import ExportError
from termpix.io.writer import export_bmp

logger = logging.getLogger(__name__)

CLEAR_EOL = f"{CSI}K"


class EditorApp:
    """Terminal pixel editor.

    Layout:
        +------------------------------------------+
        |                                          |
        |      Drawing area (80%)                  |
        |                                          |
        +------------------------------------------+
        | Status panel: tools, color, keys         |
        +------------------------------------------+

    Keyboard Controls:
        Arrow keys: Move cursor
        Space: Apply active tool
        1 / 2 / 3: Pen / Eraser / Color Picker
        c: Choose color
        Ctrl+S: Export to output.bmp
        q: Quit
    """

    def __init__(
        self,
        state: Optional[ApplicationState] = None,
        input_reader: Optional[KeySource] = None,
        output_path: str | Path = OUTPUT_FILENAME,
    ) -> None:
        """Initialize the editor.

        Args:
            state: Starting state; a blank grid if omitted
            input_reader: Key event source; reads stdin if omitted
            output_path: Where Ctrl+S writes the image
        """
        self.running = False
        self.state = state or ApplicationState()
        self.input: KeySource = input_reader or InputReader()
        self.output_path = Path(output_path)
        self.last_export: Optional[Path] = None

        self.grid_view = GridViewWidget(self.state)
        self.status_panel = StatusPanelWidget(self.state)
        self.palette = ColorPaletteWidget()
        self.palette.set_on_select(self._on_color_selected)

        self._last_size: Optional[tuple[int, int]] = None

    def _on_color_selected(self, color: Color) -> None:
        self.state.set_color(color)
        logger.debug("Color set to %r from palette", color)

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Run the editor until quit.

        Terminal modes are restored on every exit path. Errors other than
        a failed export end the loop and propagate to the caller.
        """
        self.running = True
        logger.info("Editor started (%dx%d grid)", self.state.grid.width, self.state.grid.height)
        try:
            with Terminal.managed_mode():
                Terminal.clear()
                while self.running:
                    self._render()
                    self._handle_input()
        except Exception:
            logger.exception("Editor stopped by an unrecoverable error")
            raise
        finally:
            self.running = False
        logger.info("Editor closed")

    def _handle_input(self) -> None:
        event = self.input.read(timeout=POLL_TIMEOUT)
        if event is not None:
            self.handle_event(event)

    def handle_event(self, event: KeyEvent) -> None:
        """Process one key event."""
        if lookup(event) is Action.QUIT:
            self.running = False
            return

        if self.palette.visible:
            self.palette.handle_input(event)
            return

        action = handle_key(self.state, event)
        if action is Action.EXPORT:
            self.export()
        elif action is Action.OPEN_PALETTE:
            self.palette.open(self.state.color)

    def export(self) -> Optional[Path]:
        """Write the grid to the output file, reporting the result in the status panel."""
        try:
            path = export_bmp(self.state.grid, self.output_path)
        except ExportError as e:
            self.status_panel.set_message(f"Export failed: {e}")
            return None
        self.last_export = path
        self.status_panel.set_message(f"Exported {path.name}")
        return path

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def compose_frame(self, cols: int, rows: int) -> list[str]:
        """Build the full screen as a list of lines, one per terminal row."""
        layout = calculate_layout(cols, rows)

        lines = self.grid_view.render(Rect(0, 0, layout.term_width, layout.drawing_height))
        if self.palette.visible:
            lines = self._overlay_palette(lines, layout.term_width)

        lines.extend(self.status_panel.render(
            Rect(0, layout.status_top, layout.term_width, layout.status_height)
        ))
        return lines

    def _overlay_palette(self, lines: list[str], width: int) -> list[str]:
        """Draw the palette centered over the drawing area."""
        box_w, box_h = self.palette.size
        box_w = min(box_w, width)
        box = self.palette.render(Rect(0, 0, box_w, box_h))

        start_x = max(0, (width - box_w) // 2)
        start_y = max(0, (len(lines) - len(box)) // 2)

        result = list(lines)
        for i, box_line in enumerate(box):
            y = start_y + i
            if y >= len(result):
                break
            before = truncate_and_pad(result[y], start_x) if start_x else ""
            result[y] = truncate(f"{before}{box_line}", width)
        return result

    def _render(self) -> None:
        """Render the frame to the screen."""
        size = Terminal.size()
        current = (size.cols, size.rows)
        if current != self._last_size:
            self._last_size = current
            Terminal.clear()

        lines = self.compose_frame(size.cols, size.rows)

        # Output all at once to minimize flicker
        Terminal.home()
        Terminal.write('\r\n'.join(line + CLEAR_EOL for line in lines))


def run_editor(output_path: str | Path = OUTPUT_FILENAME) -> EditorApp:
    """Launch the editor and return it once the user quits."""
    app = EditorApp(output_path=output_path)
    app.run()
    return app
