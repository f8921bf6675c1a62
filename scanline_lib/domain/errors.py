"""Exceptions raised by scanline queries.

The scanline engine treats two situations as caller contract violations and
signals them instead of returning a sentinel:

    EmptyScanlineError: A cursor search was issued on a scanline that holds
        no intersections. Callers are expected to special-case rows that
        never cross the shape boundary.
    QueryBelowDomainError: A cursor search was issued for an x coordinate
        left of the first intersection.

InvalidWindowError is raised by the overlap sweep when the measurement
window is reversed.

Example usage:
    Handling an empty row::

        from scanline_lib.domain.errors import EmptyScanlineError

        try:
            index = scanline.move_to(x)
        except EmptyScanlineError:
            index = -1
"""

from __future__ import annotations


class ScanlineError(Exception):
    """Base class for all scanline contract violations."""


class EmptyScanlineError(ScanlineError):
    """Cursor search on a scanline without intersections."""

    def __init__(self, message: str = "cannot move cursor on a scanline with no intersections"):
        super().__init__(message)


class QueryBelowDomainError(ScanlineError):
    """Cursor search for an x coordinate left of every intersection.

    Attributes:
        x: The queried coordinate.
        first_x: Coordinate of the lowest intersection on the scanline.
    """

    def __init__(self, x: float, first_x: float):
        self.x = x
        self.first_x = first_x
        super().__init__(
            f"query x={x!r} lies before the first intersection at x={first_x!r}"
        )


class InvalidWindowError(ScanlineError, ValueError):
    """Overlap window whose start lies right of its end."""

    def __init__(self, x_from: float, x_to: float):
        self.x_from = x_from
        self.x_to = x_to
        super().__init__(f"invalid overlap window: x_from={x_from!r} > x_to={x_to!r}")
