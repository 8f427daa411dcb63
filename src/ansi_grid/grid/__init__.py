"""Grid layout and drawing."""

from ansi_grid.grid.errors import (
    EmptyGridError,
    GridError,
    MissingLabelError,
    RaggedGridError,
)
from ansi_grid.grid.grid import Grid
from ansi_grid.grid.layout import GridLayout, center_padding

__all__ = [
    "Grid",
    "GridLayout",
    "center_padding",
    "GridError",
    "EmptyGridError",
    "RaggedGridError",
    "MissingLabelError",
]
