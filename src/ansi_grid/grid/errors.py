"""Errors raised for grids that cannot be drawn."""


class GridError(ValueError):
    """Base class for grid precondition violations."""


class EmptyGridError(GridError):
    """The grid has no columns or no rows."""


class RaggedGridError(GridError):
    """Columns of the grid have different row counts."""

    def __init__(self, column: int, rows: int, expected: int):
        self.column = column
        self.rows = rows
        self.expected = expected
        super().__init__(
            f"Column {column} has {rows} rows, expected {expected} (column 0)"
        )


class MissingLabelError(GridError, IndexError):
    """Labels are drawn but there are fewer labels than columns or rows."""

    def __init__(self, axis: str, labels: int, expected: int):
        self.axis = axis
        self.labels = labels
        self.expected = expected
        super().__init__(
            f"{axis}-labels are drawn but only {labels} of {expected} were given"
        )
