"""Column width computation and centering."""

from dataclasses import dataclass, field
from typing import Sequence

from ansi_grid.core.styled_text import StyledText


def center_padding(length: int, width: int) -> tuple[int, int]:
    """
    Split the free space around content of ``length`` in a field of ``width``.

    The odd space, if any, goes to the right.
    """
    diff = width - length
    left = diff // 2
    return left, diff - left


@dataclass(frozen=True)
class GridLayout:
    """
    Width metrics for one render of a grid.

    ``column_widths`` holds each column's own content width, ``largest_width``
    the widest of those and ``label_width`` the widest y-label. Fields are
    drawn two columns wider than the effective width (one space each side).
    """
    column_widths: tuple[int, ...] = field(default_factory=tuple)
    largest_width: int = 0
    label_width: int = 0
    static_column_width: bool = False

    @classmethod
    def compute(
        cls,
        columns: Sequence[Sequence[StyledText]],
        x_labels: Sequence[StyledText] = (),
        y_labels: Sequence[StyledText] = (),
        draw_x_labels: bool = True,
        static_column_width: bool = False,
    ) -> "GridLayout":
        """Measure the cells and labels of a grid."""
        widths: list[int] = []
        for i, column in enumerate(columns):
            width = max((len(cell) for cell in column), default=0)
            if draw_x_labels and i < len(x_labels):
                width = max(width, len(x_labels[i]))
            widths.append(width)

        return cls(
            column_widths=tuple(widths),
            largest_width=max(widths, default=0),
            label_width=max((len(label) for label in y_labels), default=0),
            static_column_width=static_column_width,
        )

    def effective_width(self, column: int) -> int:
        """Width used for drawing a column."""
        if self.static_column_width:
            return self.largest_width
        return self.column_widths[column]

    def field_width(self, column: int) -> int:
        """Width of a column's field including its padding spaces."""
        return self.effective_width(column) + 2

    @property
    def effective_widths(self) -> tuple[int, ...]:
        return tuple(self.effective_width(i) for i in range(len(self.column_widths)))
