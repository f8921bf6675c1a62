"""Scanline fill-state queries.

A Scanline holds every crossing of one shape's boundary with one horizontal
row. Once loaded, the crossings are sorted by x and each position carries the
cumulative winding number of all crossings up to and including it, so the
fill state anywhere on the row is a lookup followed by a fill-rule decision.

Lookups go through a cached cursor: the index found by the previous query is
used as the starting point of the next one. A rasterizer sweeping the row
left to right therefore pays amortized O(1) per query. The cursor is only a
hint; queries in arbitrary order return the same answers, only slower.

The module provides the following class:
    Scanline: Sorted, prefix-summed crossings with point queries and the
        static two-scanline overlap sweep.

Example usage:
    Point queries along a row::

        from scanline_lib.domain import FillRule, Intersection, Scanline

        scanline = Scanline([Intersection(1.0, 1), Intersection(3.0, -1)])
        scanline.filled(2.0, FillRule.NONZERO)     # True
        scanline.winding_at(4.0)                   # 0
        scanline.count_intersections(3.5)          # 2

    Comparing two rows::

        a = Scanline([Intersection(1.0, 1), Intersection(3.0, -1)])
        b = Scanline([Intersection(2.0, 1), Intersection(4.0, -1)])
        Scanline.overlap(a, b, 0.0, 5.0, FillRule.NONZERO)  # 3.0
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .errors import EmptyScanlineError, InvalidWindowError, QueryBelowDomainError
from .fill_rule import FillRule
from .intersection import Intersection

logger = logging.getLogger(__name__)

IntersectionLike = Union[Intersection, Tuple[float, int]]


def _check_coordinate(value: float, name: str) -> None:
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN")


class Scanline:
    """Crossings of a shape boundary with one horizontal row.

    Attributes:
        intersections: Crossings sorted ascending by x (read-only tuple).
        windings: Cumulative winding number at each sorted crossing.
        cursor: Index of the crossing found by the most recent query.
    """

    def __init__(self, intersections: Optional[Iterable[IntersectionLike]] = None):
        self._intersections: Tuple[Intersection, ...] = ()
        self._windings: List[int] = []
        self._cursor = 0
        if intersections is not None:
            self.set_intersections(intersections)

    def __len__(self) -> int:
        return len(self._intersections)

    def __repr__(self) -> str:
        return f"Scanline({list(self._intersections)!r})"

    @property
    def intersections(self) -> Tuple[Intersection, ...]:
        return self._intersections

    @property
    def windings(self) -> List[int]:
        return list(self._windings)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        """True when the row never crosses the shape boundary."""
        return not self._intersections

    def set_intersections(self, intersections: Iterable[IntersectionLike]) -> None:
        """Replace the crossings of this row.

        Sorts the crossings by x with a stable sort, so crossings sharing a
        coordinate keep their input order, then accumulates their directions
        into cumulative winding numbers. The raw directions are kept on the
        Intersection objects, which makes loading the same input twice
        produce identical state. The cursor is reset to the first crossing.

        Args:
            intersections: Intersection objects or (x, direction) pairs.

        Raises:
            ValueError: If any crossing has a NaN x coordinate or a
                direction that is not a whole number.
        """
        items = [
            i if isinstance(i, Intersection) else Intersection.from_tuple(i)
            for i in intersections
        ]
        self._cursor = 0
        if not items:
            self._intersections = ()
            self._windings = []
            logger.debug("Scanline cleared")
            return

        xs = np.array([i.x for i in items], dtype=np.float64)
        if np.isnan(xs).any():
            raise ValueError("intersection x coordinates must not be NaN")

        raw = np.array([i.direction for i in items], dtype=np.float64)
        if not np.array_equal(raw, np.round(raw)):
            raise ValueError("intersection directions must be whole numbers")

        order = np.argsort(xs, kind='stable')
        self._intersections = tuple(items[k] for k in order)
        directions = raw[order].astype(np.int64)
        self._windings = [int(w) for w in np.cumsum(directions)]
        logger.debug("Scanline loaded %d intersections (total winding %d)",
                     len(self._intersections), self._windings[-1])

    def move_to(self, x: float) -> int:
        """Move the cursor to the last crossing at or left of x.

        Starts from the cached cursor and scans backward or forward as
        needed.

        Args:
            x: Query coordinate.

        Returns:
            Index of the last crossing whose x is <= the query.

        Raises:
            EmptyScanlineError: If the scanline holds no crossings.
            QueryBelowDomainError: If x lies left of every crossing. The
                cursor is left at the first crossing.
            ValueError: If x is NaN.
        """
        _check_coordinate(x, 'x')
        intersections = self._intersections
        if not intersections:
            raise EmptyScanlineError()

        index = self._cursor
        if x < intersections[index].x:
            while True:
                if index == 0:
                    self._cursor = 0
                    raise QueryBelowDomainError(x, intersections[0].x)
                index -= 1
                if not x < intersections[index].x:
                    break
        else:
            last = len(intersections) - 1
            while index < last and x >= intersections[index + 1].x:
                index += 1

        self._cursor = index
        return index

    def _index_at(self, x: float) -> int:
        # -1 stands for "before the first crossing", including the empty row
        _check_coordinate(x, 'x')
        if not self._intersections or x < self._intersections[0].x:
            return -1
        return self.move_to(x)

    def count_intersections(self, x: float) -> int:
        """Number of crossings at or left of x."""
        return self._index_at(x) + 1

    def winding_at(self, x: float) -> int:
        """Winding number at x, 0 left of the first crossing."""
        index = self._index_at(x)
        if index < 0:
            return 0
        return self._windings[index]

    sum_intersections = winding_at

    def filled(self, x: float, fill_rule: FillRule) -> bool:
        """Whether the shape covers x under the given fill rule."""
        return fill_rule.decide(self.winding_at(x))

    def filled_spans(self, fill_rule: FillRule) -> List[Tuple[float, float]]:
        """Half-open x ranges covered by the shape.

        Crossings that share a coordinate are resolved together, so no
        zero-length spans are reported. A row that ends filled yields a last
        span ending at infinity. The cursor is not used.

        Args:
            fill_rule: Rule used to interpret the winding numbers.

        Returns:
            List of (x_start, x_end) tuples in ascending order.
        """
        spans = []
        start = None
        n = len(self._intersections)
        for i, intersection in enumerate(self._intersections):
            if i + 1 < n and self._intersections[i + 1].x == intersection.x:
                continue
            inside = fill_rule.decide(self._windings[i])
            if inside and start is None:
                start = intersection.x
            elif not inside and start is not None:
                spans.append((start, intersection.x))
                start = None
        if start is not None:
            spans.append((start, math.inf))
        return spans

    @staticmethod
    def overlap(a: Scanline, b: Scanline, x_from: float, x_to: float,
                fill_rule: FillRule) -> float:
        """Length of [x_from, x_to] where two rows agree on their fill state.

        Merges both sorted crossing sequences with local cursors, so the
        cached cursors of a and b are neither used nor changed. Crossings
        left of x_from only establish the fill state at x_from. When both
        rows cross at the same coordinate, both are advanced in the same
        step. An empty row is unfilled across the whole window.

        Args:
            a: First scanline.
            b: Second scanline.
            x_from: Start of the measurement window.
            x_to: End of the measurement window.
            fill_rule: Rule used to interpret both rows' winding numbers.

        Returns:
            Total length where both rows are filled or both are unfilled.

        Raises:
            InvalidWindowError: If x_from > x_to.
            ValueError: If either window bound is NaN.
        """
        _check_coordinate(x_from, 'x_from')
        _check_coordinate(x_to, 'x_to')
        if x_from > x_to:
            raise InvalidWindowError(x_from, x_to)

        a_items, a_windings = a._intersections, a._windings
        b_items, b_windings = b._intersections, b._windings
        a_len, b_len = len(a_items), len(b_items)

        total = 0.0
        a_inside = False
        b_inside = False
        ai = 0
        bi = 0
        ax = a_items[0].x if a_len else x_to
        bx = b_items[0].x if b_len else x_to

        while ax < x_from or bx < x_from:
            x_next = min(ax, bx)
            if ax == x_next and ai < a_len:
                a_inside = fill_rule.decide(a_windings[ai])
                ai += 1
                ax = a_items[ai].x if ai < a_len else x_to
            if bx == x_next and bi < b_len:
                b_inside = fill_rule.decide(b_windings[bi])
                bi += 1
                bx = b_items[bi].x if bi < b_len else x_to

        x = x_from
        while ax < x_to or bx < x_to:
            x_next = min(ax, bx, x_to)
            if a_inside == b_inside:
                total += x_next - x
            if ax == x_next and ai < a_len:
                a_inside = fill_rule.decide(a_windings[ai])
                ai += 1
                ax = a_items[ai].x if ai < a_len else x_to
            if bx == x_next and bi < b_len:
                b_inside = fill_rule.decide(b_windings[bi])
                bi += 1
                bx = b_items[bi].x if bi < b_len else x_to
            x = x_next

        if a_inside == b_inside:
            total += x_to - x

        return total

    @staticmethod
    def disagreement(a: Scanline, b: Scanline, x_from: float, x_to: float,
                     fill_rule: FillRule) -> float:
        """Length of [x_from, x_to] where the two rows differ in fill state."""
        return (x_to - x_from) - Scanline.overlap(a, b, x_from, x_to, fill_rule)
