"""Layout types shared by the engine, topology queries and the codec."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from odata_erd.types import Role, Side


@dataclass
class ConnectionPoint:
    """A (side, offset) location on a node border where one edge end attaches."""

    id: str
    role: Role
    side: Side
    offset_percent: float = 50.0


@dataclass
class Node:
    """An entity box. x/y is the top-left corner; width/height may be unknown."""

    id: str
    x: float
    y: float
    width: float | None = None
    height: float | None = None
    connection_points: list[ConnectionPoint] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class Edge:
    """A directed relationship between two nodes."""

    id: str
    source: str
    target: str
    source_connection_point_id: str | None = None
    target_connection_point_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class LayoutResult:
    """Annotated nodes and edges, plus the ids of edges that could not be placed."""

    nodes: list[Node]
    edges: list[Edge]
    skipped_edges: list[str] = field(default_factory=list)

    def node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def edge(self, edge_id: str) -> Edge | None:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def connection_point(self, point_id: str) -> ConnectionPoint | None:
        for node in self.nodes:
            for point in node.connection_points:
                if point.id == point_id:
                    return point
        return None
