"""
ansi-grid: box-drawn, colored tables for the terminal

Quick Start:
    >>> import ansi_grid as ag
    >>> grid = (ag.Grid()
    ...     .set_line_color(ag.Color.BRIGHT_BLACK)
    ...     .set_x_labels(["a", "b"])
    ...     .set_y_labels(["1", "2"])
    ...     .set_rows([["x", "o"], ["o", "x"]]))
    >>> grid.print()

Features:
    - Per-character foreground colors with lazily applied defaults
    - Optional column and row labels
    - Per-column or uniform column widths
    - Output to ANSI terminals, rich consoles, HTML, or plain text
"""

__version__ = "0.1.0"

# Core types
from ansi_grid.core.color import Color, ColorMode
from ansi_grid.core.styled_char import StyledChar
from ansi_grid.core.styled_text import StyledText

# Grid
from ansi_grid.grid.errors import (
    EmptyGridError,
    GridError,
    MissingLabelError,
    RaggedGridError,
)
from ansi_grid.grid.grid import Grid
from ansi_grid.grid.layout import GridLayout

# Sinks
from ansi_grid.render.html import HtmlSink
from ansi_grid.render.sink import AnsiSink, RichSink, Sink


def styled(text: str = "", color: Color | None = None) -> StyledText:
    """Create styled text from a plain string."""
    return StyledText.from_str(text, color)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorMode",
    "StyledChar",
    "StyledText",
    "styled",
    # Grid
    "Grid",
    "GridLayout",
    "GridError",
    "EmptyGridError",
    "RaggedGridError",
    "MissingLabelError",
    # Sinks
    "Sink",
    "AnsiSink",
    "RichSink",
    "HtmlSink",
]
