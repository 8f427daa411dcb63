"""Shared pytest fixtures."""

from typing import Any

import pytest

from ansi_grid.core.color import Color
from ansi_grid.grid.grid import Grid


class RecordingSink:
    """Sink that records every call made to it."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def set_color(self, color: Color | None) -> None:
        self.calls.append(("set_color", color))

    def write(self, text: str) -> None:
        self.calls.append(("write", text))

    def present(self) -> None:
        self.calls.append(("present", None))

    def reset(self) -> None:
        self.calls.append(("reset", None))

    def flush(self) -> None:
        self.calls.append(("flush", None))

    @property
    def text(self) -> str:
        return ''.join(arg for name, arg in self.calls if name == "write")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def bare_grid() -> Grid:
    """Grid with both label axes switched off."""
    return Grid().set_draw_x_labels(False).set_draw_y_labels(False)
