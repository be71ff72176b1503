"""Tests for layout and widget rendering."""

import copy

import pytest

from termpix.cli.core.ansi_text import strip_ansi, truncate, truncate_and_pad, visible_len
from termpix.cli.core.input import Key
from termpix.cli.core.layout import calculate_layout
from termpix.cli.widgets.base import Rect
from termpix.cli.widgets.color_palette import ColorPaletteWidget, PALETTE_COLORS
from termpix.cli.widgets.grid_view import GridViewWidget
from termpix.cli.widgets.status_panel import StatusPanelWidget
from termpix.core.color import Color
from termpix.core.constants import CURSOR_GLYPH, EMPTY_GLYPH, PAINTED_GLYPH
from termpix.core.state import ApplicationState, Cursor, Tool

from conftest import key


class TestAnsiText:

    def test_visible_len(self) -> None:
        assert visible_len("\x1b[31mabc\x1b[0m") == 3

    def test_truncate_keeps_escapes(self) -> None:
        out = truncate("\x1b[31mabcdef", 3)
        assert strip_ansi(out) == "abc"
        assert out.startswith("\x1b[31m")
        assert out.endswith("\x1b[0m")

    def test_truncate_and_pad(self) -> None:
        assert truncate_and_pad("ab", 4) == "ab  "
        assert visible_len(truncate_and_pad("\x1b[1mabcdef", 4)) == 4


class TestLayout:

    @pytest.mark.parametrize("rows,drawing,status", [(24, 19, 5), (50, 40, 10), (10, 8, 2), (2, 1, 1), (1, 0, 1)])
    def test_split(self, rows: int, drawing: int, status: int) -> None:
        layout = calculate_layout(80, rows)
        assert layout.drawing_height == drawing
        assert layout.status_height == status
        assert layout.drawing_height + layout.status_height == rows
        assert layout.status_top == drawing


class TestGridView:

    def _plain(self, state: ApplicationState, width: int = 64, height: int = 64) -> list[str]:
        return [strip_ansi(line) for line in GridViewWidget(state).render(Rect(0, 0, width, height))]

    def test_empty_grid(self, state: ApplicationState) -> None:
        lines = self._plain(state)
        assert len(lines) == 64
        assert lines[0] == CURSOR_GLYPH + EMPTY_GLYPH * 63
        assert lines[63] == EMPTY_GLYPH * 64

    def test_glyph_priority(self, state: ApplicationState) -> None:
        state.grid.set(0, 0, Color.RED)
        state.grid.set(2, 0, Color.RED)
        lines = self._plain(state)
        assert lines[0][:3] == CURSOR_GLYPH + EMPTY_GLYPH + PAINTED_GLYPH

    def test_painted_cell_is_colored(self, state: ApplicationState) -> None:
        state.grid.set(1, 0, Color.rgb(1, 2, 3))
        line = GridViewWidget(state).render_row(0)
        assert "\x1b[38;2;1;2;3m" + PAINTED_GLYPH in line

    def test_pads_to_bounds(self, state: ApplicationState) -> None:
        lines = self._plain(state, width=70, height=66)
        assert len(lines) == 66
        assert all(len(line) == 70 for line in lines)

    def test_viewport_follows_cursor(self, state: ApplicationState) -> None:
        widget = GridViewWidget(state)
        state.cursor = Cursor(20, 10)
        lines = [strip_ansi(line) for line in widget.render(Rect(0, 0, 10, 5))]
        assert widget.scroll == (11, 6)
        assert lines[4][9] == CURSOR_GLYPH

        state.cursor = Cursor(0, 0)
        widget.render(Rect(0, 0, 10, 5))
        assert widget.scroll == (0, 0)

    def test_render_does_not_mutate_state(self, state: ApplicationState) -> None:
        state.grid.set(4, 4, Color.BLUE)
        before = copy.deepcopy(state)
        GridViewWidget(state).render(Rect(0, 0, 30, 30))
        assert state == before
        assert state.grid.painted_count() == 1


class TestStatusPanel:

    def _plain(self, panel: StatusPanelWidget, height: int = 5) -> list[str]:
        return [strip_ansi(line).rstrip() for line in panel.render(Rect(0, 0, 120, height))]

    def test_contents(self, state: ApplicationState) -> None:
        lines = self._plain(StatusPanelWidget(state))
        assert "▶1 Pen" in lines[0]
        assert " 2 Eraser" in lines[0]
        assert " 3 Color Picker" in lines[0]
        assert "Tool: Pen" in lines[1]
        assert "Color: White" in lines[1]
        assert "^S" in lines[2] and "Export" in lines[2]

    def test_marker_follows_tool(self, state: ApplicationState) -> None:
        state.select_tool(Tool.COLOR_PICKER)
        state.set_color(Color.rgb(9, 8, 7))
        lines = self._plain(StatusPanelWidget(state))
        assert "▶3 Color Picker" in lines[0]
        assert "▶1" not in lines[0]
        assert "Tool: Color Picker" in lines[1]
        assert "Color: Rgb(9, 8, 7)" in lines[1]

    def test_message(self, state: ApplicationState) -> None:
        panel = StatusPanelWidget(state)
        panel.set_message("Exported output.bmp")
        assert "Exported output.bmp" in self._plain(panel)[3]

    def test_fits_height(self, state: ApplicationState) -> None:
        panel = StatusPanelWidget(state)
        assert len(panel.render(Rect(0, 0, 40, 1))) == 1
        assert len(panel.render(Rect(0, 0, 40, 8))) == 8
        assert all(visible_len(line) == 40 for line in panel.render(Rect(0, 0, 40, 8)))


class TestColorPalette:

    def test_hidden_until_opened(self) -> None:
        palette = ColorPaletteWidget()
        assert not palette.visible
        assert not palette.handle_input(key(Key.RIGHT))
        palette.open()
        assert palette.visible
        assert palette.selected == Color.BLACK

    def test_open_preselects_current(self) -> None:
        palette = ColorPaletteWidget()
        palette.open(Color.BLUE)
        assert palette.selected == Color.BLUE
        palette.open(Color.rgb(1, 1, 1))
        assert palette.selected_index == 0

    def test_navigation_does_not_wrap(self) -> None:
        palette = ColorPaletteWidget()
        palette.open()
        palette.handle_input(key(Key.LEFT))
        palette.handle_input(key(Key.UP))
        assert palette.selected_index == 0
        palette.handle_input(key(Key.DOWN))
        assert palette.selected == Color.BLUE
        palette.handle_input(key(Key.DOWN))
        assert palette.selected == Color.BLUE
        palette.handle_input(key(Key.RIGHT))
        palette.handle_input(key(Key.RIGHT))
        palette.handle_input(key(Key.RIGHT))
        palette.handle_input(key(Key.RIGHT))
        assert palette.selected == PALETTE_COLORS[-1]

    def test_enter_selects(self) -> None:
        picked: list[Color] = []
        palette = ColorPaletteWidget()
        palette.set_on_select(picked.append)
        palette.open()
        palette.handle_input(key(Key.RIGHT))
        palette.handle_input(key(Key.ENTER))
        assert picked == [Color.RED]
        assert not palette.visible

    def test_escape_cancels(self) -> None:
        picked: list[Color] = []
        palette = ColorPaletteWidget()
        palette.set_on_select(picked.append)
        palette.open()
        palette.handle_input(key(Key.RIGHT))
        palette.handle_input(key(Key.ESCAPE))
        assert picked == []
        assert not palette.visible

    def test_render_box(self) -> None:
        palette = ColorPaletteWidget()
        palette.open()
        width, height = palette.size
        lines = [strip_ansi(line) for line in palette.render(Rect(0, 0, width, height))]
        assert len(lines) == height
        assert all(len(line) == width for line in lines)
        assert "[  Black  ]" in lines[2]
        assert "Magenta" in lines[3]
