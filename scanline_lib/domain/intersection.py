"""Directed crossings of a shape boundary with a horizontal ray."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Intersection:
    """A point where the boundary crosses the scan row.

    Attributes:
        x: Coordinate of the crossing along the row.
        direction: Local winding contribution of the crossing, the sign of
            the edge's y-direction at that point (normally +1 or -1).
    """
    x: float
    direction: int

    def to_tuple(self) -> Tuple[float, int]:
        """Convert to tuple for compatibility."""
        return (self.x, self.direction)

    @classmethod
    def from_tuple(cls, t: Tuple[float, int]) -> Intersection:
        """Create from an (x, direction) pair.

        The direction is stored as given; Scanline rejects values that are
        not whole numbers when the crossings are loaded.
        """
        return cls(float(t[0]), t[1])
