"""Shared constants for grid rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
DEFAULT_FG = "39"

# Border lines
LINE = {
    "heavy_h": "\u2501",    # ━
    "light_h": "\u2500",    # ─
    "heavy_v": "\u2503",    # ┃
    "light_v": "\u2502",    # │
}

# Top border when no x-label row is drawn
TOP_LEFT = "\u250F"                 # ┏
TOP_LEFT_GUTTER = "\u2532"          # ┲
TOP_INNER = "\u252F"                # ┯
TOP_RIGHT = "\u2513"                # ┓

# Divider directly below the x-label row
LABELED_TOP_LEFT = "\u2522"         # ┢
LABELED_TOP_LEFT_GUTTER = "\u2546"  # ╆
LABELED_TOP_INNER = "\u253F"        # ┿
LABELED_TOP_RIGHT = "\u252A"        # ┪

# Divider between two rows
ROW_LEFT = "\u2520"                 # ┠
ROW_LEFT_GUTTER = "\u2542"          # ╂
ROW_INNER = "\u253C"                # ┼
ROW_RIGHT = "\u2528"                # ┨

# Bottom border
BOTTOM_LEFT = "\u2517"              # ┗
BOTTOM_LEFT_GUTTER = "\u253A"       # ┺
BOTTOM_INNER = "\u2537"             # ┷
BOTTOM_RIGHT = "\u251B"             # ┛
