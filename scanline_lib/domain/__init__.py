"""Domain objects for scanline rasterization.

This module provides the value objects and the scanline engine used
throughout the package.

Scanline classes:
    FillRule: Policy mapping a winding number to inside/outside.
    Intersection: Directed crossing of a boundary with a scan row.
    Scanline: Sorted crossings with point queries and the overlap sweep.

Geometry classes:
    Vector2: Immutable 2D vector (alias Point2).
    Projection: Shape space to pixel space mapping.
    SignedDistance: Signed distance value ordered by its distance field only.

Errors:
    ScanlineError, EmptyScanlineError, QueryBelowDomainError,
    InvalidWindowError.

Example usage:
    Querying a row::

        from scanline_lib.domain import FillRule, Intersection, Scanline

        row = Scanline([Intersection(0.0, 1)])
        row.filled(10.0, FillRule.ODD_EVEN)  # True
"""

from .errors import (
    EmptyScanlineError,
    InvalidWindowError,
    QueryBelowDomainError,
    ScanlineError,
)
from .fill_rule import FillRule
from .geometry import Point2, Projection, Vector2, cross_product, dot_product
from .intersection import Intersection
from .scanline import Scanline
from .signed_distance import SignedDistance

__all__ = [
    'FillRule', 'Intersection', 'Scanline',
    'Vector2', 'Point2', 'Projection', 'SignedDistance',
    'dot_product', 'cross_product',
    'ScanlineError', 'EmptyScanlineError', 'QueryBelowDomainError',
    'InvalidWindowError',
]
