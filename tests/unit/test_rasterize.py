"""Unit tests for scanline_lib.utils.rasterize."""

import logging
import unittest

import numpy as np
import pytest

from scanline_lib.domain import FillRule, Intersection, Projection, Vector2
from scanline_lib.utils.rasterize import (
    contour_intersections,
    rasterize_fill,
    row_agreement,
    scanline_at,
)

SQUARE = [(1.0, 1.0), (1.0, 3.0), (3.0, 3.0), (3.0, 1.0)]


class TestContourIntersections(unittest.TestCase):
    """Tests for contour_intersections and scanline_at."""

    def test_square_row(self):
        crossings = sorted(contour_intersections([SQUARE], 2.0), key=lambda i: i.x)
        self.assertEqual(crossings, [Intersection(1.0, 1), Intersection(3.0, -1)])

    def test_row_outside_shape(self):
        self.assertEqual(contour_intersections([SQUARE], 5.0), [])
        self.assertEqual(contour_intersections([SQUARE], 0.0), [])

    def test_vertex_rows_count_once(self):
        """Half-open rule: bottom vertex row misses, top vertex row hits."""
        self.assertEqual(contour_intersections([SQUARE], 1.0), [])
        self.assertEqual(len(contour_intersections([SQUARE], 3.0)), 2)

    def test_slanted_edge(self):
        triangle = [(0.0, 0.0), (4.0, 4.0), (8.0, 0.0)]
        xs = sorted(i.x for i in contour_intersections([triangle], 2.0))
        self.assertEqual(xs, [2.0, 6.0])

    def test_no_contours(self):
        self.assertEqual(contour_intersections([], 1.0), [])
        self.assertTrue(scanline_at([[]], 1.0).is_empty)

    def test_malformed_contour(self):
        with self.assertRaises(ValueError):
            contour_intersections([[(1.0, 2.0, 3.0)]], 1.0)

    def test_scanline_at(self):
        s = scanline_at([SQUARE], 2.0)
        self.assertTrue(s.filled(2.0, FillRule.POSITIVE))
        self.assertFalse(s.filled(3.5, FillRule.NONZERO))


class TestRasterizeFill(unittest.TestCase):
    """Tests for rasterize_fill."""

    def test_square_mask(self):
        mask = rasterize_fill([SQUARE], width=5, height=5)
        expected = np.zeros((5, 5), dtype=bool)
        expected[1:3, 1:3] = True
        np.testing.assert_array_equal(mask, expected)

    def test_projection_scales_shape(self):
        projection = Projection(scale=Vector2(2.0, 2.0))
        mask = rasterize_fill([SQUARE], width=10, height=10, projection=projection)
        self.assertEqual(int(mask.sum()), 16)
        self.assertTrue(mask[2:6, 2:6].all())

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            rasterize_fill([SQUARE], width=0, height=5)

    def test_logs_fill_count(self):
        with self.assertLogs('scanline_lib.utils.rasterize', level=logging.DEBUG) as logs:
            rasterize_fill([SQUARE], width=5, height=5)
        self.assertIn("4 pixels filled", logs.output[0])


@pytest.mark.parametrize("rule", [FillRule.NONZERO, FillRule.ODD_EVEN])
def test_opposite_wound_hole(rule, donut_contours):
    """An oppositely wound inner contour cuts a hole under both rules."""
    mask = rasterize_fill(donut_contours, width=8, height=8, fill_rule=rule)
    assert int(mask.sum()) == 48
    assert not mask[2:6, 2:6].any()


def test_same_wound_inner_contour(donut_contours):
    """A same-direction inner contour is only a hole under ODD_EVEN."""
    outer, inner = donut_contours
    contours = [outer, list(reversed(inner))]
    assert int(rasterize_fill(contours, 8, 8, fill_rule=FillRule.NONZERO).sum()) == 64
    assert int(rasterize_fill(contours, 8, 8, fill_rule=FillRule.ODD_EVEN).sum()) == 48


def test_row_agreement_identical_shapes(square_contour):
    lengths = row_agreement([square_contour], [square_contour], 5, 5)
    np.testing.assert_allclose(lengths, np.full(5, 5.0))


def test_row_agreement_against_empty(square_contour):
    lengths = row_agreement([square_contour], [], 5, 5)
    np.testing.assert_allclose(lengths, [5.0, 3.0, 3.0, 5.0, 5.0])


def test_row_agreement_with_projection(square_contour):
    """Lengths are reported in shape units."""
    projection = Projection(scale=Vector2(2.0, 2.0))
    lengths = row_agreement([square_contour], [], 10, 10, projection=projection)
    assert lengths[0] == pytest.approx(5.0)
    assert lengths[3] == pytest.approx(3.0)


if __name__ == '__main__':
    unittest.main()
