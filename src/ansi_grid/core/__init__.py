"""Core data structures for styled text."""

from ansi_grid.core.color import Color, ColorMode
from ansi_grid.core.styled_char import StyledChar
from ansi_grid.core.styled_text import StyledText

__all__ = ["Color", "ColorMode", "StyledChar", "StyledText"]
