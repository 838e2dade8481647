"""Connection-point layout engine.

Given positioned nodes and the edges between them, decide for every edge
which side of its source and target node it attaches to, then spread the
points sharing a side so they do not overlap:

  1. Side assignment (dominant axis of the centre-to-centre delta)
  2. Offset distribution (100 * i / (k + 1) per node side, in edge order)

Inputs are never mutated; every call returns fresh nodes and edges.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace

from odata_erd.config import LayoutConfig
from odata_erd.errors import DuplicateIdentifierError
from odata_erd.layout.sides import choose_sides, connection_point_id, node_center, spread_offsets
from odata_erd.layout.types import ConnectionPoint, Edge, LayoutResult, Node
from odata_erd.types import Role, Side

logger = logging.getLogger(__name__)


def _check_unique(kind: str, ids: Iterable[str]) -> None:
    seen: set[str] = set()
    for identifier in ids:
        if identifier in seen:
            raise DuplicateIdentifierError(kind, identifier)
        seen.add(identifier)


def _warn_degenerate(node: Node) -> None:
    for name in ("width", "height"):
        value = getattr(node, name)
        if value is not None and value <= 0:
            logger.warning("node %r has non-positive %s %r; laying out as-is", node.id, name, value)


class ConnectionLayout:
    """Assigns connection points to node borders for every resolvable edge."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()

    def layout(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> LayoutResult:
        nodes = list(nodes)
        edges = list(edges)
        _check_unique("node", (n.id for n in nodes))
        _check_unique("edge", (e.id for e in edges))

        out_nodes = [replace(n, connection_points=[], data=dict(n.data)) for n in nodes]
        by_id: dict[str, Node] = {n.id: n for n in out_nodes}
        for node in out_nodes:
            _warn_degenerate(node)

        centers: dict[str, tuple[float, float]] = {}

        def center(node: Node) -> tuple[float, float]:
            if node.id not in centers:
                centers[node.id] = node_center(node, self.config)
            return centers[node.id]

        out_edges: list[Edge] = []
        skipped: list[str] = []
        for edge in edges:
            src = by_id.get(edge.source)
            tgt = by_id.get(edge.target)
            if src is None or tgt is None:
                logger.debug("edge %r skipped: endpoint %r -> %r not in node set", edge.id, edge.source, edge.target)
                skipped.append(edge.id)
                out_edges.append(
                    replace(
                        edge,
                        source_connection_point_id=None,
                        target_connection_point_id=None,
                        data=dict(edge.data),
                    )
                )
                continue

            sx, sy = center(src)
            tx, ty = center(tgt)
            source_side, target_side = choose_sides(tx - sx, ty - sy, self.config.tie_break)

            source_id = connection_point_id(Role.Source, edge.source, edge.target, edge.id)
            target_id = connection_point_id(Role.Target, edge.target, edge.source, edge.id)
            src.connection_points.append(ConnectionPoint(id=source_id, role=Role.Source, side=source_side))
            tgt.connection_points.append(ConnectionPoint(id=target_id, role=Role.Target, side=target_side))

            out_edges.append(
                replace(
                    edge,
                    source_connection_point_id=source_id,
                    target_connection_point_id=target_id,
                    data=dict(edge.data),
                )
            )

        for node in out_nodes:
            self._distribute(node)

        if skipped:
            logger.debug("layout skipped %d of %d edges", len(skipped), len(edges))
        return LayoutResult(nodes=out_nodes, edges=out_edges, skipped_edges=skipped)

    def _distribute(self, node: Node) -> None:
        groups: dict[Side, list[ConnectionPoint]] = {side: [] for side in Side}
        for point in node.connection_points:
            groups[point.side].append(point)

        for group in groups.values():
            if len(group) < self.config.min_spread_count:
                continue
            for point, offset in zip(group, spread_offsets(len(group))):
                point.offset_percent = offset


def compute_layout(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Run the connection-point layout with the given (or default) config."""
    return ConnectionLayout(config).layout(nodes, edges)


def merge_positions(
    nodes: Iterable[Node],
    dragged: Mapping[str, tuple[float, float]] | Iterable[Node],
) -> list[Node]:
    """Copy `nodes`, moving any node whose id appears in `dragged`.

    `dragged` is either {node_id: (x, y)} or the dragged nodes themselves.
    Ids not present in `nodes` are ignored.
    """
    if isinstance(dragged, Mapping):
        positions = {node_id: (float(x), float(y)) for node_id, (x, y) in dragged.items()}
    else:
        positions = {n.id: (n.x, n.y) for n in dragged}

    merged: list[Node] = []
    for node in nodes:
        x, y = positions.get(node.id, (node.x, node.y))
        merged.append(
            replace(node, x=x, y=y, connection_points=list(node.connection_points), data=dict(node.data))
        )
    return merged


def apply_drag(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    dragged: Mapping[str, tuple[float, float]] | Iterable[Node],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Merge dragged positions into the node set and recompute the layout."""
    return compute_layout(merge_positions(nodes, dragged), edges, config)
