"""Tests for core data structures (no terminal needed)."""

import pytest

from termpix.core.color import Color, ColorName, FALLBACK_RGB, to_rgb
from termpix.core.grid import Grid
from termpix.core.state import ApplicationState, Cursor, Tool


class TestColor:
    """Tests for Color."""

    def test_named_rgb(self) -> None:
        assert to_rgb(Color.BLACK) == (0, 0, 0)
        assert to_rgb(Color.WHITE) == (255, 255, 255)
        assert to_rgb(Color.RED) == (255, 0, 0)
        assert to_rgb(Color.GREEN) == (0, 255, 0)
        assert to_rgb(Color.BLUE) == (0, 0, 255)

    def test_other_named_colors_fall_back_to_gray(self) -> None:
        for color in (Color.YELLOW, Color.MAGENTA, Color.CYAN, Color.DARK_GRAY, Color.LIGHT_RED):
            assert to_rgb(color) == FALLBACK_RGB == (128, 128, 128)

    def test_rgb_passes_through(self) -> None:
        assert to_rgb(Color.rgb(12, 34, 56)) == (12, 34, 56)
        assert Color.rgb(0, 0, 0).is_rgb
        assert not Color.BLACK.is_rgb

    def test_rgb_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.rgb(256, 0, 0)
        with pytest.raises(ValueError):
            Color.rgb(0, -1, 0)

    def test_needs_name_or_value(self) -> None:
        with pytest.raises(ValueError):
            Color()
        with pytest.raises(ValueError):
            Color(name=ColorName.RED, value=(1, 2, 3))

    def test_equality_and_hash(self) -> None:
        assert Color.named(ColorName.RED) == Color.RED
        assert Color.rgb(255, 0, 0) != Color.RED
        assert len({Color.RED, Color.named(ColorName.RED)}) == 1

    def test_repr(self) -> None:
        assert repr(Color.WHITE) == "White"
        assert repr(Color.LIGHT_MAGENTA) == "LightMagenta"
        assert repr(Color.rgb(1, 2, 3)) == "Rgb(1, 2, 3)"

    def test_sgr(self) -> None:
        assert Color.RED.to_sgr_fg() == "31"
        assert Color.WHITE.to_sgr_fg() == "97"
        assert Color.rgb(255, 0, 0).to_sgr_fg() == "38;2;255;0;0"
        assert Color.BLUE.to_sgr_bg() == "44"
        assert Color.LIGHT_GREEN.to_sgr_bg() == "102"


class TestGrid:
    """Tests for Grid."""

    def test_default_grid_is_empty_64(self) -> None:
        grid = Grid()
        assert grid.width == 64
        assert grid.height == 64
        assert grid.painted_count() == 0
        assert all(cell is None for row in grid.rows() for cell in row)

    def test_get_set(self) -> None:
        grid = Grid()
        grid.set(10, 5, Color.RED)
        assert grid.get(10, 5) == Color.RED
        assert grid.get(5, 10) is None
        grid.set(10, 5, None)
        assert grid.get(10, 5) is None

    def test_indexing(self) -> None:
        grid = Grid()
        grid[3, 7] = Color.BLUE
        assert grid[3, 7] == Color.BLUE

    def test_row_major(self) -> None:
        grid = Grid()
        grid.set(2, 1, Color.GREEN)
        rows = list(grid.rows())
        assert rows[1][2] == Color.GREEN
        assert rows[2][1] is None

    def test_rows_are_copies(self) -> None:
        grid = Grid()
        next(grid.rows())[0] = Color.RED
        assert grid.get(0, 0) is None

    def test_out_of_bounds(self) -> None:
        grid = Grid()
        with pytest.raises(IndexError):
            grid.get(64, 0)
        with pytest.raises(IndexError):
            grid.get(0, -1)
        with pytest.raises(IndexError):
            grid.set(0, 64, Color.RED)


class TestCursorMovement:
    """Cursor clamping."""

    def test_up_left_at_origin(self, state: ApplicationState) -> None:
        state.move_cursor(0, -1)
        state.move_cursor(-1, 0)
        assert state.cursor == Cursor(0, 0)

    def test_right_down_at_far_corner(self, state: ApplicationState) -> None:
        state.cursor = Cursor(63, 63)
        state.move_cursor(1, 0)
        state.move_cursor(0, 1)
        assert state.cursor == Cursor(63, 63)

    @pytest.mark.parametrize("dx,dy", [(0, -1), (0, 1), (-1, 0), (1, 0)])
    def test_interior_moves_one_step(self, state: ApplicationState, dx: int, dy: int) -> None:
        state.cursor = Cursor(30, 30)
        state.move_cursor(dx, dy)
        assert state.cursor == Cursor(30 + dx, 30 + dy)

    def test_clamps_each_axis_independently(self, state: ApplicationState) -> None:
        state.cursor = Cursor(0, 10)
        state.move_cursor(-1, 1)
        assert state.cursor == Cursor(0, 11)


class TestTools:
    """Tool application."""

    def test_initial_state(self, state: ApplicationState) -> None:
        assert state.tool is Tool.PEN
        assert state.color == Color.WHITE
        assert state.cursor == Cursor(0, 0)

    def test_pen_overwrites(self, state: ApplicationState) -> None:
        state.grid.set(0, 0, Color.BLUE)
        state.set_color(Color.RED)
        state.apply_tool()
        assert state.grid.get(0, 0) == Color.RED

    def test_eraser(self, state: ApplicationState) -> None:
        state.grid.set(0, 0, Color.BLUE)
        state.select_tool(Tool.ERASER)
        state.apply_tool()
        assert state.grid.get(0, 0) is None
        state.apply_tool()
        assert state.grid.get(0, 0) is None

    def test_picker_on_painted_cell(self, state: ApplicationState) -> None:
        state.grid.set(0, 0, Color.rgb(1, 2, 3))
        state.select_tool(Tool.COLOR_PICKER)
        state.apply_tool()
        assert state.color == Color.rgb(1, 2, 3)
        assert state.grid.get(0, 0) == Color.rgb(1, 2, 3)

    def test_picker_on_empty_cell(self, state: ApplicationState) -> None:
        state.set_color(Color.GREEN)
        state.select_tool(Tool.COLOR_PICKER)
        state.apply_tool()
        assert state.color == Color.GREEN

    def test_color_never_none(self, state: ApplicationState) -> None:
        with pytest.raises(ValueError):
            state.set_color(None)  # type: ignore[arg-type]

    def test_display_names(self) -> None:
        assert [t.display_name for t in Tool] == ["Pen", "Eraser", "Color Picker"]
