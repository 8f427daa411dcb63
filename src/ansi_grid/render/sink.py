"""Output sinks receiving a stream of colored characters."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ansi_grid.core.color import Color
from ansi_grid.core.constants import CSI, DEFAULT_FG, RESET


class Sink(Protocol):
    """
    Destination for styled output.

    Writers call ``set_color``/``write`` for every character, then
    ``present`` once to make the buffered output visible, followed by
    ``reset`` and ``flush``.
    """

    def set_color(self, color: Color | None) -> None:
        """Use ``color`` (``None`` for the terminal default) for following writes."""
        ...

    def write(self, text: str) -> None:
        ...

    def present(self) -> None:
        ...

    def reset(self) -> None:
        ...

    def flush(self) -> None:
        ...


class AnsiSink:
    """
    Buffer text with ANSI SGR foreground codes and write it to a stream.

    Only emits an SGR code when the active color changes, so uncolored
    output contains no escape sequences at all.
    """

    def __init__(self, stream: TextIO | None = None, use_color: bool = True):
        self.stream = stream
        self.use_color = use_color
        self._buffer: list[str] = []
        self._active: Color | None = None
        self._colored = False

    @property
    def target(self) -> TextIO:
        """Stream written to; stdout is looked up late so redirection works."""
        return self.stream if self.stream is not None else sys.stdout

    def set_color(self, color: Color | None) -> None:
        if not self.use_color or color == self._active:
            return
        self._active = color
        code = color.to_sgr_fg() if color is not None else DEFAULT_FG
        self._buffer.append(f"{CSI}{code}m")
        self._colored = True

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def present(self) -> None:
        if self._colored:
            # Prevent color bleeding into whatever is printed next
            self._buffer.append(RESET)
        self.target.write(''.join(self._buffer))
        self._buffer.clear()

    def reset(self) -> None:
        self._buffer.clear()
        self._active = None
        self._colored = False

    def flush(self) -> None:
        self.target.flush()


class RichSink:
    """Collect output into a ``rich.text.Text`` and print it on a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)
        self._text = Text()
        self._style: Style | None = None

    def set_color(self, color: Color | None) -> None:
        self._style = Style(color=color.to_rich()) if color is not None else None

    def write(self, text: str) -> None:
        self._text.append(text, style=self._style)

    def present(self) -> None:
        self.console.print(self._text, end="", soft_wrap=True)
        self._text = Text()

    def reset(self) -> None:
        self._style = None

    def flush(self) -> None:
        self.console.file.flush()
