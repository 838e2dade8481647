"""Exception types raised at the odata-erd boundaries."""

from __future__ import annotations


class DuplicateIdentifierError(ValueError):
    """Two nodes (or two edges) in one layout call share an id."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"duplicate {kind} id '{identifier}'")


class TopologyFormatError(ValueError):
    """A serialized topology does not have the expected shape."""
