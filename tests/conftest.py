"""Shared pytest fixtures for the scanline_lib test suite.

Fixtures:
    overlapping_rows: Two scanlines filled on [1, 3) and [2, 4)
    empty_scanline: Scanline without intersections
    square_contour: Unit-winding square covering [1, 3] x [1, 3]
    donut_contours: Outer square with an oppositely wound inner square
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from scanline_lib.domain import Intersection, Scanline


# -----------------------------------------------------------------------------
# Scanline Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def overlapping_rows():
    """Return two rows filled on [1, 3) and [2, 4) under NONZERO.

    Returns:
        tuple: (a, b) Scanline pair.
    """
    a = Scanline([Intersection(1.0, 1), Intersection(3.0, -1)])
    b = Scanline([Intersection(2.0, 1), Intersection(4.0, -1)])
    return a, b


@pytest.fixture
def empty_scanline():
    """Return a scanline for a row that never crosses the shape."""
    return Scanline()


# -----------------------------------------------------------------------------
# Contour Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def square_contour():
    """Return a square covering [1, 3] x [1, 3].

    The left edge runs towards larger y, so the interior has winding +1.
    """
    return [(1.0, 1.0), (1.0, 3.0), (3.0, 3.0), (3.0, 1.0)]


@pytest.fixture
def donut_contours():
    """Return an outer square [0, 8]^2 with an inner hole [2, 6]^2.

    The inner square is wound opposite to the outer one, so the hole has
    winding 0 while the ring has winding +1.
    """
    outer = [(0.0, 0.0), (0.0, 8.0), (8.0, 8.0), (8.0, 0.0)]
    inner = [(2.0, 2.0), (6.0, 2.0), (6.0, 6.0), (2.0, 6.0)]
    return [outer, inner]
