"""Layout engine public API."""

from __future__ import annotations

from odata_erd.layout.engine import ConnectionLayout, apply_drag, compute_layout, merge_positions
from odata_erd.layout.sides import choose_sides, connection_point_id, node_center, node_size, spread_offsets
from odata_erd.layout.types import ConnectionPoint, Edge, LayoutResult, Node

__all__ = [
    "ConnectionLayout",
    "ConnectionPoint",
    "Edge",
    "LayoutResult",
    "Node",
    "apply_drag",
    "choose_sides",
    "compute_layout",
    "connection_point_id",
    "merge_positions",
    "node_center",
    "node_size",
    "spread_offsets",
]
