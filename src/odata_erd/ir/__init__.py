"""Topology intermediate representation."""

from odata_erd.ir.graph import DiagramGraph

__all__ = [
    "DiagramGraph",
]
