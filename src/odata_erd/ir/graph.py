"""Diagram topology — wraps nodes and edges in a networkx MultiDiGraph.

Used for neighbourhood queries such as click-to-highlight. Parallel edges
between the same pair of entities are kept, keyed by edge id. Edges whose
endpoints are missing from the node set are held aside as dangling.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from odata_erd.layout.types import Edge, Node


class DiagramGraph:
    """Read-only topology view over a node/edge set."""

    def __init__(self, multigraph: nx.MultiDiGraph, dangling: list[str]) -> None:
        self.multigraph = multigraph
        self.dangling = dangling

    @classmethod
    def from_topology(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> DiagramGraph:
        """Build a DiagramGraph from nodes and edges."""
        multigraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in nodes:
            multigraph.add_node(node.id, data=node)

        dangling: list[str] = []
        for edge in edges:
            if edge.source not in multigraph or edge.target not in multigraph:
                dangling.append(edge.id)
                continue
            multigraph.add_edge(edge.source, edge.target, key=edge.id, data=edge)

        return cls(multigraph=multigraph, dangling=dangling)

    def node_count(self) -> int:
        return self.multigraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.multigraph.number_of_edges()

    def dangling_edges(self) -> list[str]:
        return list(self.dangling)

    def neighbors(self, node_id: str) -> set[str]:
        """Nodes joined to node_id by an edge in either direction."""
        if node_id not in self.multigraph:
            return set()
        result = set(self.multigraph.successors(node_id))
        result.update(self.multigraph.predecessors(node_id))
        return result

    def select(self, current: Iterable[str], node_id: str, additive: bool = False) -> frozenset[str]:
        """Return the highlight set after clicking node_id.

        A plain click highlights the node and its neighbours, replacing the
        current set. An additive click on an already highlighted node removes
        just that node; otherwise it adds the node and its neighbours.
        """
        selected = set(current) if additive else set()
        if additive and node_id in selected:
            selected.discard(node_id)
            return frozenset(selected)

        selected.add(node_id)
        selected.update(self.neighbors(node_id))
        return frozenset(selected)

    @staticmethod
    def edge_visible(edge: Edge, highlighted: Iterable[str]) -> bool:
        """An edge is shown when both ends are highlighted, or nothing is."""
        highlighted = set(highlighted)
        if not highlighted:
            return True
        return edge.source in highlighted and edge.target in highlighted
