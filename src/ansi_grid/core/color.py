"""Color representation for styled text."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 90-97)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b)


# Standard 16-color palette (CSS colors)
PALETTE_16 = (
    "#000000",  # 0 - Black
    "#aa0000",  # 1 - Red
    "#00aa00",  # 2 - Green
    "#aa5500",  # 3 - Yellow/Brown
    "#0000aa",  # 4 - Blue
    "#aa00aa",  # 5 - Magenta
    "#00aaaa",  # 6 - Cyan
    "#aaaaaa",  # 7 - White
    "#555555",  # 8 - Bright Black
    "#ff5555",  # 9 - Bright Red
    "#55ff55",  # 10 - Bright Green
    "#ffff55",  # 11 - Bright Yellow
    "#5555ff",  # 12 - Bright Blue
    "#ff55ff",  # 13 - Bright Magenta
    "#55ffff",  # 14 - Bright Cyan
    "#ffffff",  # 15 - Bright White
)


@dataclass(frozen=True)
class Color:
    """
    A foreground color tag.

    Grids and styled text only carry colors around; the conversions
    below are used by the sinks that actually display them.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from a foreground SGR code (30-37, 90-97)."""
        if 30 <= code <= 37:
            return cls(ColorMode.STANDARD_16, code - 30)
        elif 90 <= code <= 97:
            return cls(ColorMode.STANDARD_16, code - 90 + 8)
        else:
            raise ValueError(f"Invalid SGR foreground code: {code}")

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            else:
                return str(90 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"

    def to_css(self) -> str:
        """Return a CSS color value."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            return PALETTE_16[self.value]
        elif self.mode == ColorMode.EXTENDED_256:
            assert isinstance(self.value, int)
            if self.value < 16:
                return PALETTE_16[self.value]
            r, g, b = _xterm_256_to_rgb(self.value)
            return f"#{r:02x}{g:02x}{b:02x}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"#{r:02x}{g:02x}{b:02x}"

    def to_rich(self) -> str:
        """Return a color definition understood by rich's Style parser."""
        if self.mode == ColorMode.TRUE_COLOR:
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"rgb({r},{g},{b})"
        return f"color({self.value})"


def _xterm_256_to_rgb(index: int) -> tuple[int, int, int]:
    """Convert an xterm 256-color index (16-255) to RGB."""
    if index >= 232:
        level = 8 + (index - 232) * 10
        return level, level, level
    index -= 16
    steps = (0, 95, 135, 175, 215, 255)
    return steps[index // 36], steps[(index // 6) % 6], steps[index % 6]


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.BRIGHT_BLACK = Color(ColorMode.STANDARD_16, 8)
Color.BRIGHT_RED = Color(ColorMode.STANDARD_16, 9)
Color.BRIGHT_GREEN = Color(ColorMode.STANDARD_16, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.STANDARD_16, 11)
Color.BRIGHT_BLUE = Color(ColorMode.STANDARD_16, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.STANDARD_16, 13)
Color.BRIGHT_CYAN = Color(ColorMode.STANDARD_16, 14)
Color.BRIGHT_WHITE = Color(ColorMode.STANDARD_16, 15)
