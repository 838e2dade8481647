"""Side selection and offset spacing for connection points."""

from __future__ import annotations

from odata_erd.config import LayoutConfig
from odata_erd.layout.types import Node
from odata_erd.types import Role, Side, TieBreak


def node_size(node: Node, config: LayoutConfig) -> tuple[float, float]:
    """Return (width, height), substituting the configured default per dimension."""
    width = config.default_width if node.width is None else node.width
    height = config.default_height if node.height is None else node.height
    return width, height


def node_center(node: Node, config: LayoutConfig) -> tuple[float, float]:
    width, height = node_size(node, config)
    return node.x + width / 2, node.y + height / 2


def choose_sides(dx: float, dy: float, tie_break: TieBreak = TieBreak.Horizontal) -> tuple[Side, Side]:
    """Pick (source side, target side) from the source->target centre delta.

    The dominant axis decides. Coincident centres (self-loops) always go
    through the vertical branch and resolve to (top, bottom). Other ties
    follow tie_break.
    """
    adx, ady = abs(dx), abs(dy)
    if adx == ady:
        horizontal = tie_break is TieBreak.Horizontal and adx != 0
    else:
        horizontal = adx > ady

    if horizontal:
        if dx > 0:
            return Side.Right, Side.Left
        return Side.Left, Side.Right
    if dy > 0:
        return Side.Bottom, Side.Top
    return Side.Top, Side.Bottom


ID_SEPARATOR: str = "-"
ID_ESCAPE: str = "~"


def _escape_id_part(part: str) -> str:
    return part.replace(ID_ESCAPE, ID_ESCAPE * 2).replace(ID_SEPARATOR, ID_ESCAPE + ID_SEPARATOR)


def connection_point_id(role: Role, node_id: str, other_id: str, edge_id: str) -> str:
    """Stable id for the point serving `role` of an edge on `node_id`.

    Parts are joined with "-"; a "-" or "~" inside a part is prefixed with "~"
    so distinct (node, other, edge) tuples never share an id.
    """
    parts = [role.prefix, node_id, other_id, edge_id]
    return ID_SEPARATOR.join(_escape_id_part(p) for p in parts)


def spread_offsets(count: int) -> list[float]:
    """Evenly spaced offsets strictly inside (0, 100) for `count` points."""
    return [100 * i / (count + 1) for i in range(1, count + 1)]
