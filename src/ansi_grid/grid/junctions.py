"""Junction glyph selection for grid borders."""

from enum import Enum

from ansi_grid.core import constants as c


class Border(Enum):
    """Which horizontal line a junction sits on."""
    TOP = "top"                  # Top border, no x-label row above
    LABELED_TOP = "labeled_top"  # Divider below the x-label row
    ROW = "row"                  # Divider between two rows
    BOTTOM = "bottom"


class Edge(Enum):
    """Where along the line a junction sits."""
    FIRST = "first"
    FIRST_GUTTER = "first_gutter"  # Left edge with a y-label gutter before it
    INTERIOR = "interior"
    LAST = "last"


JUNCTIONS: dict[tuple[Border, Edge], str] = {
    (Border.TOP, Edge.FIRST): c.TOP_LEFT,
    (Border.TOP, Edge.FIRST_GUTTER): c.TOP_LEFT_GUTTER,
    (Border.TOP, Edge.INTERIOR): c.TOP_INNER,
    (Border.TOP, Edge.LAST): c.TOP_RIGHT,
    (Border.LABELED_TOP, Edge.FIRST): c.LABELED_TOP_LEFT,
    (Border.LABELED_TOP, Edge.FIRST_GUTTER): c.LABELED_TOP_LEFT_GUTTER,
    (Border.LABELED_TOP, Edge.INTERIOR): c.LABELED_TOP_INNER,
    (Border.LABELED_TOP, Edge.LAST): c.LABELED_TOP_RIGHT,
    (Border.ROW, Edge.FIRST): c.ROW_LEFT,
    (Border.ROW, Edge.FIRST_GUTTER): c.ROW_LEFT_GUTTER,
    (Border.ROW, Edge.INTERIOR): c.ROW_INNER,
    (Border.ROW, Edge.LAST): c.ROW_RIGHT,
    (Border.BOTTOM, Edge.FIRST): c.BOTTOM_LEFT,
    (Border.BOTTOM, Edge.FIRST_GUTTER): c.BOTTOM_LEFT_GUTTER,
    (Border.BOTTOM, Edge.INTERIOR): c.BOTTOM_INNER,
    (Border.BOTTOM, Edge.LAST): c.BOTTOM_RIGHT,
}


def junction(border: Border, edge: Edge) -> str:
    """Return the box-drawing glyph for a junction."""
    return JUNCTIONS[(border, edge)]


def left_edge(gutter: bool) -> Edge:
    """Edge kind of a line's leftmost junction."""
    return Edge.FIRST_GUTTER if gutter else Edge.FIRST


def right_edge(column: int, column_count: int) -> Edge:
    """Edge kind of the junction closing ``column``."""
    return Edge.LAST if column == column_count - 1 else Edge.INTERIOR


def horizontal(border: Border) -> str:
    """Horizontal line glyph used between junctions on a border."""
    if border is Border.ROW:
        return c.LINE["light_h"]
    return c.LINE["heavy_h"]
