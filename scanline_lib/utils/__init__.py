"""Utility functions for scanline rasterization.

arithmetic: Scalar helpers (min/max/median/mix/clamp/sign).
rasterize: Polygon contours to scanlines, coverage masks and per-row
    agreement lengths.
"""

from .arithmetic import (
    clamp,
    clamp_between,
    clamp_to_ray,
    maximum,
    median,
    minimum,
    mix,
    non_zero_sign,
    sign,
)
from .rasterize import contour_intersections, rasterize_fill, row_agreement, scanline_at

__all__ = [
    'minimum', 'maximum', 'median', 'mix',
    'clamp', 'clamp_to_ray', 'clamp_between', 'sign', 'non_zero_sign',
    'contour_intersections', 'scanline_at', 'rasterize_fill', 'row_agreement',
]
