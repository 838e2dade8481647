"""JSON codec for node/edge topologies and layout results.

Input shape:

    {"nodes": [{"id": "A", "position": {"x": 0, "y": 0}, "width": 100, "height": 80}],
     "edges": [{"id": "e1", "source": "A", "target": "B"}]}

width, height and data are optional. Output uses the same camelCase keys a
browser renderer expects (connectionPoints, offsetPercent, ...).
"""

from __future__ import annotations

import json
import math
from typing import Any

from odata_erd.errors import TopologyFormatError
from odata_erd.layout.types import ConnectionPoint, Edge, LayoutResult, Node

OFFSET_DIGITS: int = 4


def _require(obj: dict[str, Any], key: str, where: str) -> Any:
    if key not in obj:
        raise TopologyFormatError(f"{where}: missing '{key}'")
    return obj[key]


def _as_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise TopologyFormatError(f"{where}: expected string, got {type(value).__name__}")
    return value


def _as_number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TopologyFormatError(f"{where}: expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as e:
        raise TopologyFormatError(f"{where}: number out of range") from e
    if not math.isfinite(number):
        raise TopologyFormatError(f"{where}: number must be finite, got {value!r}")
    return number


def _as_optional_number(value: Any, where: str) -> float | None:
    if value is None:
        return None
    return _as_number(value, where)


def _as_data(obj: dict[str, Any], where: str) -> dict[str, Any]:
    data = obj.get("data", {})
    if not isinstance(data, dict):
        raise TopologyFormatError(f"{where}.data: expected object, got {type(data).__name__}")
    return dict(data)


def _node_from_dict(obj: Any, index: int) -> Node:
    where = f"nodes[{index}]"
    if not isinstance(obj, dict):
        raise TopologyFormatError(f"{where}: expected object")
    position = _require(obj, "position", where)
    if not isinstance(position, dict):
        raise TopologyFormatError(f"{where}.position: expected object")
    return Node(
        id=_as_str(_require(obj, "id", where), f"{where}.id"),
        x=_as_number(_require(position, "x", f"{where}.position"), f"{where}.position.x"),
        y=_as_number(_require(position, "y", f"{where}.position"), f"{where}.position.y"),
        width=_as_optional_number(obj.get("width"), f"{where}.width"),
        height=_as_optional_number(obj.get("height"), f"{where}.height"),
        data=_as_data(obj, where),
    )


def _edge_from_dict(obj: Any, index: int) -> Edge:
    where = f"edges[{index}]"
    if not isinstance(obj, dict):
        raise TopologyFormatError(f"{where}: expected object")
    return Edge(
        id=_as_str(_require(obj, "id", where), f"{where}.id"),
        source=_as_str(_require(obj, "source", where), f"{where}.source"),
        target=_as_str(_require(obj, "target", where), f"{where}.target"),
        data=_as_data(obj, where),
    )


def topology_from_dict(obj: Any) -> tuple[list[Node], list[Edge]]:
    """Decode a topology mapping into (nodes, edges)."""
    if not isinstance(obj, dict):
        raise TopologyFormatError("topology: expected a JSON object")
    raw_nodes = obj.get("nodes", [])
    raw_edges = obj.get("edges", [])
    if not isinstance(raw_nodes, list):
        raise TopologyFormatError("topology.nodes: expected array")
    if not isinstance(raw_edges, list):
        raise TopologyFormatError("topology.edges: expected array")
    nodes = [_node_from_dict(n, i) for i, n in enumerate(raw_nodes)]
    edges = [_edge_from_dict(e, i) for i, e in enumerate(raw_edges)]
    return nodes, edges


def topology_from_json(text: str) -> tuple[list[Node], list[Edge]]:
    """Decode a JSON topology string into (nodes, edges)."""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise TopologyFormatError(f"invalid JSON: {e}") from e
    return topology_from_dict(obj)


def _point_to_dict(point: ConnectionPoint) -> dict[str, Any]:
    return {
        "id": point.id,
        "role": point.role.value,
        "side": point.side.value,
        "offsetPercent": round(point.offset_percent, OFFSET_DIGITS),
    }


def _node_to_dict(node: Node) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": node.id,
        "position": {"x": node.x, "y": node.y},
        "width": node.width,
        "height": node.height,
        "connectionPoints": [_point_to_dict(p) for p in node.connection_points],
    }
    if node.data:
        out["data"] = node.data
    return out


def _edge_to_dict(edge: Edge) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "sourceConnectionPointId": edge.source_connection_point_id,
        "targetConnectionPointId": edge.target_connection_point_id,
    }
    if edge.data:
        out["data"] = edge.data
    return out


def result_to_dict(result: LayoutResult) -> dict[str, Any]:
    return {
        "nodes": [_node_to_dict(n) for n in result.nodes],
        "edges": [_edge_to_dict(e) for e in result.edges],
        "skippedEdges": list(result.skipped_edges),
    }


def result_to_json(result: LayoutResult, indent: int | None = 2) -> str:
    return json.dumps(result_to_dict(result), indent=indent)
