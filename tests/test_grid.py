"""Tests for drawing grids."""

import pytest

from ansi_grid.core.color import Color
from ansi_grid.core.styled_text import StyledText
from ansi_grid.grid.errors import (
    EmptyGridError,
    GridError,
    MissingLabelError,
    RaggedGridError,
)
from ansi_grid.grid.grid import Grid

BOX_CHARS = set("━─┃│┏┲┯┓┢╆┿┪┠╂┼┨┗┺┷┛")


class TestGridDrawing:
    """Tests for the bordered output."""

    def test_dynamic_width(self, bare_grid: Grid) -> None:
        grid = bare_grid.set_grid([["a"], ["bb"]])
        assert grid.render_to_text() == (
            "┏━━━┯━━━━┓\n"
            "┃ a │ bb ┃\n"
            "┗━━━┷━━━━┛"
        )

    def test_static_width(self, bare_grid: Grid) -> None:
        grid = bare_grid.set_static_column_width(True).set_grid([["a"], ["bb"]])
        assert grid.render_to_text() == (
            "┏━━━━┯━━━━┓\n"
            "┃ a  │ bb ┃\n"
            "┗━━━━┷━━━━┛"
        )

    def test_single_cell_is_three_lines(self, bare_grid: Grid) -> None:
        lines = bare_grid.set_grid([["x"]]).render_to_text().split("\n")
        assert lines == ["┏━━━┓", "┃ x ┃", "┗━━━┛"]

    def test_row_dividers(self, bare_grid: Grid) -> None:
        grid = bare_grid.set_grid([["1", "2", "3"], ["4", "5", "6"]])
        assert grid.render_to_text() == (
            "┏━━━┯━━━┓\n"
            "┃ 1 │ 4 ┃\n"
            "┠───┼───┨\n"
            "┃ 2 │ 5 ┃\n"
            "┠───┼───┨\n"
            "┃ 3 │ 6 ┃\n"
            "┗━━━┷━━━┛"
        )

    def test_y_label_gutter(self) -> None:
        grid = (Grid()
            .set_draw_x_labels(False)
            .set_y_labels(["x", "long"])
            .set_grid([["1", "2"]]))
        assert grid.render_to_text() == (
            "─────┲━━━┓\n"
            "   x ┃ 1 ┃\n"
            "─────╂───┨\n"
            "long ┃ 2 ┃\n"
            "─────┺━━━┛"
        )

    def test_x_label_row(self) -> None:
        grid = (Grid()
            .set_draw_y_labels(False)
            .set_x_labels(["name", "n"])
            .set_grid([["a"], ["10"]]))
        assert grid.render_to_text() == (
            "│ name │ n  │\n"
            "┢━━━━━━┿━━━━┪\n"
            "┃  a   │ 10 ┃\n"
            "┗━━━━━━┷━━━━┛"
        )

    def test_both_labels(self) -> None:
        grid = (Grid()
            .set_x_labels(["c1", "c2"])
            .set_y_labels(["r"])
            .set_grid([["a"], ["bb"]]))
        assert grid.render_to_text() == (
            "  │ c1 │ c2 │\n"
            "──╆━━━━┿━━━━┪\n"
            "r ┃ a  │ bb ┃\n"
            "──┺━━━━┷━━━━┛"
        )

    def test_static_width_includes_labels(self) -> None:
        grid = (Grid()
            .set_draw_y_labels(False)
            .set_static_column_width(True)
            .set_x_labels(["wide", "b"])
            .set_grid([["a"], ["b"]]))
        layout = grid.layout()
        assert layout.effective_widths == (4, 4)
        assert grid.render_to_text().split("\n")[0] == "│ wide │  b   │"

    def test_lines_have_equal_width(self) -> None:
        grid = (Grid()
            .set_x_labels(["one", "two", "three"])
            .set_y_labels(["a", "bb"])
            .set_rows([["1", "22", "333"], ["4444", "5", ""]]))
        lines = grid.render_to_text().split("\n")
        assert len({len(line) for line in lines}) == 1

    def test_no_trailing_newline(self, bare_grid: Grid) -> None:
        assert not bare_grid.set_grid([["a"]]).render_to_text().endswith("\n")

    def test_render_is_idempotent(self) -> None:
        grid = (Grid()
            .set_line_color(Color.BLUE)
            .set_x_labels(["a"])
            .set_y_labels(["b"])
            .set_grid([["c"]]))
        assert grid.render_to_ansi() == grid.render_to_ansi()
        assert grid.render() == grid.render()


class TestGridContent:
    """Tests for attaching cells and labels."""

    def test_set_rows_transposes(self, bare_grid: Grid) -> None:
        grid = bare_grid.set_rows([["a", "b"], ["c", "d"]])
        assert [[cell.plain() for cell in column] for column in grid.columns] == [
            ["a", "c"],
            ["b", "d"],
        ]
        assert grid.column_count == 2
        assert grid.row_count == 2

    def test_set_rows_rejects_ragged(self) -> None:
        with pytest.raises(GridError):
            Grid().set_rows([["a", "b"], ["c"]])

    def test_cells_are_copied(self, bare_grid: Grid) -> None:
        cell = StyledText.from_str("a")
        grid = bare_grid.set_cell_color(Color.RED).set_grid([[cell]])
        assert cell.chars[0].color is None
        cell.push_str("bc")
        assert grid.columns[0][0].plain() == "a"

    def test_default_colors_applied_on_attach(self) -> None:
        grid = (Grid()
            .set_x_label_color(Color.CYAN)
            .set_y_label_color(Color.YELLOW)
            .set_cell_color(Color.GREEN)
            .set_x_labels(["x"])
            .set_y_labels(["y"])
            .set_grid([[StyledText.from_str("a", Color.RED).chain_str("b")]]))
        assert grid.x_labels[0].chars[0].color == Color.CYAN
        assert grid.y_labels[0].chars[0].color == Color.YELLOW
        cell = grid.columns[0][0]
        assert [c.color for c in cell] == [Color.RED, Color.GREEN]

    def test_default_color_set_later_does_not_apply(self) -> None:
        grid = Grid().set_grid([["a"]]).set_cell_color(Color.GREEN)
        assert grid.columns[0][0].chars[0].color is None
        grid = Grid().set_x_labels(["a"]).set_x_label_color(Color.GREEN)
        assert grid.x_labels[0].chars[0].color is None

    def test_line_color(self, bare_grid: Grid) -> None:
        grid = bare_grid.set_line_color(Color.RED).set_grid([["a"], ["b"]])
        for char in grid.render():
            if char.char in BOX_CHARS:
                assert char.color == Color.RED
            else:
                assert char.color is None


class TestGridErrors:
    """Tests for precondition violations."""

    def test_empty_grid(self, bare_grid: Grid) -> None:
        with pytest.raises(EmptyGridError):
            bare_grid.render()

    def test_no_rows(self, bare_grid: Grid) -> None:
        with pytest.raises(EmptyGridError):
            bare_grid.set_grid([[]]).render()

    def test_ragged_columns(self, bare_grid: Grid) -> None:
        grid = bare_grid.set_grid([["a", "b"], ["c"]])
        with pytest.raises(RaggedGridError) as exc_info:
            grid.render()
        assert exc_info.value.column == 1
        assert exc_info.value.rows == 1
        assert exc_info.value.expected == 2

    def test_missing_x_labels(self) -> None:
        grid = Grid().set_draw_y_labels(False).set_x_labels(["a"]).set_grid([["1"], ["2"]])
        with pytest.raises(MissingLabelError) as exc_info:
            grid.render()
        assert exc_info.value.axis == "x"
        assert isinstance(exc_info.value, IndexError)

    def test_missing_y_labels(self) -> None:
        grid = Grid().set_draw_x_labels(False).set_y_labels(["a"]).set_grid([["1", "2"]])
        with pytest.raises(MissingLabelError):
            grid.render()

    def test_default_grid_needs_labels(self) -> None:
        with pytest.raises(MissingLabelError):
            Grid().set_grid([["a"]]).render()

    def test_extra_labels_are_ignored(self) -> None:
        grid = (Grid()
            .set_draw_y_labels(False)
            .set_x_labels(["a", "b"])
            .set_grid([["1"]]))
        assert grid.render_to_text().split("\n")[0] == "│ a │"

    def test_invalid_grid_writes_nothing(self, bare_grid: Grid, sink) -> None:
        with pytest.raises(RaggedGridError):
            bare_grid.set_grid([["a"], []]).print(sink)
        assert sink.calls == []
