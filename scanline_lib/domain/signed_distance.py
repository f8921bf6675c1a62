"""Signed distance value type."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, eq=False)
class SignedDistance:
    """A signed distance to an edge, ordered by distance only.

    Attributes:
        distance: Signed distance, negative outside the shape. Defaults to
            the most negative finite float so any real distance compares
            greater.
        dot: Alignment between the edge direction and the direction to the
            sample point, used by callers to break ties between edges.
    """
    distance: float = -sys.float_info.max
    dot: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        return self.distance == other.distance

    def __lt__(self, other: SignedDistance) -> bool:
        if not isinstance(other, SignedDistance):
            return NotImplemented
        return self.distance < other.distance

    def __hash__(self) -> int:
        return hash(self.distance)
