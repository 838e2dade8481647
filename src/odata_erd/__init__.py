"""odata-erd: connection-point layout for OData entity-relationship diagrams."""

from odata_erd.codec import result_to_json, topology_from_json
from odata_erd.config import LayoutConfig
from odata_erd.errors import DuplicateIdentifierError, TopologyFormatError
from odata_erd.ir.graph import DiagramGraph
from odata_erd.layout import ConnectionLayout, ConnectionPoint, Edge, LayoutResult, Node, apply_drag, compute_layout
from odata_erd.sizing import estimate_entity_size
from odata_erd.types import Role, Side, TieBreak

__all__ = [
    "ConnectionLayout",
    "ConnectionPoint",
    "DiagramGraph",
    "DuplicateIdentifierError",
    "Edge",
    "LayoutConfig",
    "LayoutResult",
    "Node",
    "Role",
    "Side",
    "TieBreak",
    "TopologyFormatError",
    "apply_drag",
    "compute_layout",
    "estimate_entity_size",
    "layout_json",
]


def layout_json(src: str, config: LayoutConfig | None = None, indent: int | None = 2) -> str:
    """Decode a JSON topology, lay it out and encode the annotated result.

    Args:
        src: JSON text with "nodes" and "edges" arrays.
        config: Layout configuration; defaults to LayoutConfig().
        indent: JSON indentation, None for compact output.

    Returns:
        The annotated topology as JSON text.

    Raises:
        TopologyFormatError: If the input is not a valid topology.
        DuplicateIdentifierError: If node or edge ids collide.
    """
    nodes, edges = topology_from_json(src)
    return result_to_json(compute_layout(nodes, edges, config), indent=indent)
