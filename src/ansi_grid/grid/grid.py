"""Grid - a labeled, box-drawn table of styled text cells."""

from __future__ import annotations

import io
import logging
from typing import Sequence

from ansi_grid.core.color import Color
from ansi_grid.core.constants import LINE
from ansi_grid.core.styled_text import StyledText
from ansi_grid.grid.errors import (
    EmptyGridError,
    GridError,
    MissingLabelError,
    RaggedGridError,
)
from ansi_grid.grid.junctions import Border, horizontal, junction, left_edge, right_edge
from ansi_grid.grid.layout import GridLayout, center_padding
from ansi_grid.render.sink import AnsiSink, Sink

logger = logging.getLogger(__name__)

TextLike = StyledText | str


def _attach(value: TextLike, default_color: Color | None) -> StyledText:
    """Copy a cell or label and fill in the default color where unset."""
    if isinstance(value, StyledText):
        text = value.copy()
    else:
        text = StyledText.from_str(value)
    text.apply_default_color(default_color)
    return text


class Grid:
    """
    A table of styled text cells drawn with box-drawing characters.

    Cells are stored column-major: ``columns[x][y]`` is the cell in
    column ``x``, row ``y``. Setters return the grid so configuration
    can be chained. Default colors are applied when labels and cells are
    attached, so set them first.

    Example:
        >>> grid = (Grid()
        ...     .set_line_color(Color.BRIGHT_BLACK)
        ...     .set_x_label_color(Color.CYAN)
        ...     .set_x_labels(["name", "size"])
        ...     .set_draw_y_labels(False)
        ...     .set_rows([["a.txt", "12"], ["b.txt", "7"]]))
        >>> grid.print()
    """

    def __init__(self) -> None:
        self.columns: list[list[StyledText]] = []
        self.x_labels: list[StyledText] = []
        self.y_labels: list[StyledText] = []
        self.static_column_width = False
        self.draw_x_labels = True
        self.draw_y_labels = True
        self.line_color: Color | None = None
        self.x_label_color: Color | None = None
        self.y_label_color: Color | None = None
        self.cell_color: Color | None = None

    # Colors

    def set_line_color(self, color: Color) -> Grid:
        """Set the color of all border lines."""
        self.line_color = color
        return self

    def set_x_label_color(self, color: Color) -> Grid:
        """Set the default color for x-labels attached after this call."""
        self.x_label_color = color
        return self

    def set_y_label_color(self, color: Color) -> Grid:
        """Set the default color for y-labels attached after this call."""
        self.y_label_color = color
        return self

    def set_cell_color(self, color: Color) -> Grid:
        """Set the default color for cells attached after this call."""
        self.cell_color = color
        return self

    # Layout toggles

    def set_static_column_width(self, static_column_width: bool) -> Grid:
        """Draw every column as wide as the widest one."""
        self.static_column_width = static_column_width
        return self

    def set_draw_x_labels(self, draw_x_labels: bool) -> Grid:
        self.draw_x_labels = draw_x_labels
        return self

    def set_draw_y_labels(self, draw_y_labels: bool) -> Grid:
        self.draw_y_labels = draw_y_labels
        return self

    # Content

    def set_x_labels(self, labels: Sequence[TextLike]) -> Grid:
        """Set column labels, one per column."""
        self.x_labels = [_attach(label, self.x_label_color) for label in labels]
        return self

    def set_y_labels(self, labels: Sequence[TextLike]) -> Grid:
        """Set row labels, one per row."""
        self.y_labels = [_attach(label, self.y_label_color) for label in labels]
        return self

    def set_grid(self, columns: Sequence[Sequence[TextLike]]) -> Grid:
        """Set the cells, given as a list of columns."""
        self.columns = [
            [_attach(cell, self.cell_color) for cell in column]
            for column in columns
        ]
        return self

    def set_rows(self, rows: Sequence[Sequence[TextLike]]) -> Grid:
        """Set the cells, given as a list of rows."""
        for y, row in enumerate(rows):
            if len(row) != len(rows[0]):
                raise GridError(
                    f"Row {y} has {len(row)} cells, expected {len(rows[0])} (row 0)"
                )
        columns = [[row[x] for row in rows] for x in range(len(rows[0]) if rows else 0)]
        return self.set_grid(columns)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        """Number of rows, taken from the first column."""
        return len(self.columns[0]) if self.columns else 0

    # Layout

    def validate(self) -> None:
        """
        Check that the grid can be drawn.

        Raises:
            EmptyGridError: no columns or no rows.
            RaggedGridError: columns differ in row count.
            MissingLabelError: a drawn label axis is short of labels.
        """
        if not self.columns or not self.columns[0]:
            raise EmptyGridError(
                f"Cannot draw a grid with {self.column_count} columns "
                f"and {self.row_count} rows"
            )
        rows = self.row_count
        for x, column in enumerate(self.columns):
            if len(column) != rows:
                raise RaggedGridError(x, len(column), rows)
        if self.draw_x_labels and len(self.x_labels) < self.column_count:
            raise MissingLabelError("x", len(self.x_labels), self.column_count)
        if self.draw_y_labels and len(self.y_labels) < rows:
            raise MissingLabelError("y", len(self.y_labels), rows)

    def layout(self) -> GridLayout:
        """Compute column and label widths."""
        return GridLayout.compute(
            self.columns,
            x_labels=self.x_labels,
            y_labels=self.y_labels,
            draw_x_labels=self.draw_x_labels,
            static_column_width=self.static_column_width,
        )

    # Drawing

    def render(self) -> StyledText:
        """Draw the grid into a single styled text, without a trailing newline."""
        try:
            self.validate()
        except GridError as e:
            logger.debug("Refusing to draw grid: %s", e)
            raise
        layout = self.layout()
        out = StyledText()

        if self.draw_x_labels:
            self._draw_x_label_row(out, layout)
            self._draw_line(out, layout, Border.LABELED_TOP)
        else:
            self._draw_line(out, layout, Border.TOP)
        out.push_char('\n')

        self._draw_rows(out, layout)

        self._draw_line(out, layout, Border.BOTTOM)
        return out

    def print(self, sink: Sink | None = None) -> None:
        """Draw the grid and stream it to ``sink`` (stdout with ANSI colors by default)."""
        if sink is None:
            sink = AnsiSink()
        out = self.render()
        logger.debug(
            "Printing %dx%d grid (widths=%s, static=%s) to %s",
            self.column_count,
            self.row_count,
            self.layout().effective_widths,
            self.static_column_width,
            type(sink).__name__,
        )
        out.print(sink)

    def render_to_text(self) -> str:
        """Render to plain text (no colors)."""
        return self.render().plain()

    def render_to_ansi(self) -> str:
        """Render to a string with ANSI color sequences."""
        stream = io.StringIO()
        self.print(AnsiSink(stream=stream))
        return stream.getvalue()

    def render_to_html(self, **kwargs) -> str:
        """Render to HTML."""
        from ansi_grid.render.html import HtmlSink
        sink = HtmlSink(**kwargs)
        self.print(sink)
        return sink.html

    def _draw_x_label_row(self, out: StyledText, layout: GridLayout) -> None:
        if self.draw_y_labels:
            out.push_char_rep(' ', layout.label_width + 1)
        out.push_char(LINE["light_v"], self.line_color)
        for x in range(self.column_count):
            self._push_centered(out, self.x_labels[x], layout.field_width(x))
            out.push_char(LINE["light_v"], self.line_color)
        out.push_char('\n')

    def _draw_rows(self, out: StyledText, layout: GridLayout) -> None:
        last_column = self.column_count - 1
        for y in range(self.row_count):
            if self.draw_y_labels:
                label = self.y_labels[y]
                out.push_char_rep(' ', layout.label_width - len(label))
                out.push_styled(label)
                out.push_char(' ')
            out.push_char(LINE["heavy_v"], self.line_color)
            for x in range(self.column_count):
                self._push_centered(out, self.columns[x][y], layout.field_width(x))
                if x < last_column:
                    out.push_char(LINE["light_v"], self.line_color)
            out.push_char(LINE["heavy_v"], self.line_color)
            out.push_char('\n')

            if y < self.row_count - 1:
                self._draw_line(out, layout, Border.ROW)
                out.push_char('\n')

    def _draw_line(self, out: StyledText, layout: GridLayout, border: Border) -> None:
        """Draw one horizontal border line, gutter included."""
        if self.draw_y_labels:
            out.push_char_rep(LINE["light_h"], layout.label_width + 1, self.line_color)
        out.push_char(junction(border, left_edge(self.draw_y_labels)), self.line_color)
        for x in range(self.column_count):
            out.push_char_rep(horizontal(border), layout.field_width(x), self.line_color)
            out.push_char(junction(border, right_edge(x, self.column_count)), self.line_color)

    @staticmethod
    def _push_centered(out: StyledText, text: StyledText, width: int) -> None:
        left, right = center_padding(len(text), width)
        out.push_char_rep(' ', left)
        out.push_styled(text)
        out.push_char_rep(' ', right)
