"""StyledChar - atomic unit of styled text."""

from dataclasses import dataclass

from ansi_grid.core.color import Color


@dataclass(slots=True)
class StyledChar:
    """
    A single display character with an optional foreground color.

    ``color`` is ``None`` until something colors it explicitly or a
    default is applied with :meth:`apply_default_color`.
    """
    char: str = ' '
    color: Color | None = None

    def copy(self) -> "StyledChar":
        """Create a copy of this character."""
        return StyledChar(char=self.char, color=self.color)

    def with_color(self, color: Color | None) -> "StyledChar":
        """Set the color and return self for chaining."""
        self.color = color
        return self

    def apply_default_color(self, color: Color | None) -> None:
        """Color this character only if it has no color yet."""
        if self.color is None:
            self.color = color
