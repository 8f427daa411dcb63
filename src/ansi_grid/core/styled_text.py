"""StyledText - an ordered run of optionally colored characters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

from ansi_grid.core.color import Color
from ansi_grid.core.styled_char import StyledChar

if TYPE_CHECKING:
    from ansi_grid.render.sink import Sink


class StyledText:
    """
    A sequence of :class:`StyledChar` in render order.

    Length is display width: one character is one terminal column, with
    no wide-character adjustment.

    Example:
        >>> text = (StyledText.from_str("id: ", Color.CYAN)
        ...     .chain_str("42"))
        >>> text.apply_default_color(Color.WHITE)
        >>> text.plain()
        'id: 42'
    """

    __slots__ = ("chars",)

    def __init__(self, chars: Iterable[StyledChar] | None = None):
        self.chars: list[StyledChar] = [c.copy() for c in chars] if chars else []

    @classmethod
    def from_str(cls, text: str, color: Color | None = None) -> StyledText:
        """Build styled text from a plain string, optionally in one color."""
        return cls(StyledChar(char, color) for char in text)

    def copy(self) -> StyledText:
        """Create a deep copy (characters are copied too)."""
        return StyledText(self.chars)

    # Appending

    def push_char(self, char: str, color: Color | None = None) -> None:
        """Append a single character."""
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self.chars.append(StyledChar(char, color))

    def push_char_rep(self, char: str, count: int, color: Color | None = None) -> None:
        """Append ``count`` copies of a character."""
        if count < 0:
            raise ValueError(f"Repeat count must be >= 0, got {count}")
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        for _ in range(count):
            self.chars.append(StyledChar(char, color))

    def push_str(self, text: str, color: Color | None = None) -> None:
        """Append a plain string character by character."""
        for char in text:
            self.chars.append(StyledChar(char, color))

    def push_styled(self, other: StyledText) -> None:
        """Append copies of another styled text's characters, colors included."""
        self.chars.extend(c.copy() for c in other.chars)

    def chain_str(self, text: str, color: Color | None = None) -> StyledText:
        """Append a string and return self for chaining."""
        self.push_str(text, color)
        return self

    # Coloring

    def set_color(self, color: Color | None) -> StyledText:
        """Overwrite the color of every character. Returns self."""
        for char in self.chars:
            char.color = color
        return self

    def apply_default_color(self, color: Color | None) -> None:
        """Color every character that does not have a color yet."""
        for char in self.chars:
            char.apply_default_color(color)

    # Output

    def plain(self) -> str:
        """Return the characters without any styling."""
        return ''.join(c.char for c in self.chars)

    def print(self, sink: Sink) -> None:
        """
        Stream this text to a sink.

        Every character is written under its own color (or the terminal
        default), then the sink presents what it buffered and resets.
        """
        for char in self.chars:
            sink.set_color(char.color)
            sink.write(char.char)
        sink.present()
        sink.reset()
        sink.flush()

    # Protocols

    def __len__(self) -> int:
        return len(self.chars)

    def __iter__(self) -> Iterator[StyledChar]:
        return iter(self.chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self.chars == other.chars

    def __add__(self, other: StyledText) -> StyledText:
        if not isinstance(other, StyledText):
            return NotImplemented
        result = self.copy()
        result.push_styled(other)
        return result

    def __repr__(self) -> str:
        return f"StyledText({self.plain()!r})"
