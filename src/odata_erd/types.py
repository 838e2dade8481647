"""Shared type definitions for odata-erd.

Enums used across the layout engine, topology queries and the JSON codec.
"""

from __future__ import annotations

from enum import Enum, auto


class Side(Enum):
    Top = "top"
    Bottom = "bottom"
    Left = "left"
    Right = "right"

    def opposite(self) -> Side:
        return _OPPOSITE[self]


_OPPOSITE: dict[Side, Side] = {
    Side.Top: Side.Bottom,
    Side.Bottom: Side.Top,
    Side.Left: Side.Right,
    Side.Right: Side.Left,
}


class Role(Enum):
    Source = "source"
    Target = "target"

    @property
    def prefix(self) -> str:
        return "s" if self is Role.Source else "t"


class TieBreak(Enum):
    Horizontal = auto()  # |dx| == |dy| -> left/right
    Vertical = auto()  # |dx| == |dy| -> top/bottom

    @classmethod
    def default(cls) -> TieBreak:
        return cls.Horizontal
