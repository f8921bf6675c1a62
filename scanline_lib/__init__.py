"""Scanline fill-rule engine.

Determines, for one horizontal row of a vector shape (a font glyph outline),
which x-ranges lie inside the shape, and measures how long two rows agree on
their fill state. It sits between edge intersection and per-pixel coverage
in a distance-field rasterizer.

The package is organized into the following modules:
    domain: FillRule, Intersection and Scanline, plus the geometric value
        objects (Vector2, Projection, SignedDistance) and errors.
    utils: Scalar helpers and polygon row rasterization.
    config: Shared defaults and logging setup.

Example usage:
    Point queries::

        from scanline_lib import FillRule, Intersection, Scanline

        row = Scanline([Intersection(1.0, 1), Intersection(3.0, -1)])
        row.filled(2.0, FillRule.NONZERO)  # True

    Agreement between two rows::

        other = Scanline([Intersection(2.0, 1), Intersection(4.0, -1)])
        Scanline.overlap(row, other, 0.0, 5.0, FillRule.NONZERO)  # 3.0

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .config import configure_logging
from .domain import (
    EmptyScanlineError,
    FillRule,
    Intersection,
    InvalidWindowError,
    Projection,
    QueryBelowDomainError,
    Scanline,
    ScanlineError,
    SignedDistance,
    Vector2,
)
from .utils import rasterize_fill, row_agreement, scanline_at

__all__ = [
    # Scanline engine
    'FillRule', 'Intersection', 'Scanline',
    # Errors
    'ScanlineError', 'EmptyScanlineError', 'QueryBelowDomainError', 'InvalidWindowError',
    # Geometry
    'Vector2', 'Projection', 'SignedDistance',
    # Rasterization
    'scanline_at', 'rasterize_fill', 'row_agreement',
    'configure_logging',
]

__version__ = '1.0.0'
