"""Centralized configuration for odata-erd."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from odata_erd.types import TieBreak

DEFAULT_NODE_WIDTH: float = 250.0
DEFAULT_NODE_HEIGHT: float = 200.0


@dataclass
class LayoutConfig:
    """Configuration for the connection-point layout engine.

    default_width / default_height are substituted per dimension for nodes
    whose size is not known yet. min_spread_count is the number of points a
    side needs before even spacing applies; a single point always lands on
    the midpoint so only 1 and 2 are meaningful.
    """

    default_width: float = DEFAULT_NODE_WIDTH
    default_height: float = DEFAULT_NODE_HEIGHT
    min_spread_count: int = 1
    tie_break: TieBreak = field(default_factory=TieBreak.default)

    def __post_init__(self) -> None:
        for name in ("default_width", "default_height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite, non-negative number, got {value!r}")
        if self.min_spread_count not in (1, 2):
            raise ValueError(f"min_spread_count must be 1 or 2, got {self.min_spread_count!r}")
        if not isinstance(self.tie_break, TieBreak):
            raise ValueError(f"tie_break must be a TieBreak, got {self.tie_break!r}")
