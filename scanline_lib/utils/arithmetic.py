"""Scalar helpers shared by the rasterization code.

The module provides the following functions:
    minimum, maximum: Comparison-based min/max that return the first
        argument on ties.
    median: Middle of three values.
    mix: Linear interpolation.
    clamp, clamp_to_ray, clamp_between: Range limiting.
    sign, non_zero_sign: Sign extraction.

All functions work on plain Python numbers and on numpy scalars.
"""

from __future__ import annotations


def minimum(a, b):
    return a if a < b else b


def maximum(a, b):
    return a if a > b else b


def median(a, b, c):
    """Middle value of three."""
    return maximum(minimum(a, b), minimum(maximum(a, b), c))


def mix(a, b, weight: float):
    """Weighted average, a at weight 0 and b at weight 1."""
    return (1 - weight) * a + weight * b


def clamp(x):
    """Clamp to [0, 1]."""
    if x > 1:
        return 1
    if x < 0:
        return 0
    return x


def clamp_to_ray(x, limit):
    """Clamp to [0, limit].

    Raises:
        ValueError: If limit is not positive.
    """
    if not limit > 0:
        raise ValueError(f"limit must be positive, got {limit!r}")
    if x < 0:
        return 0
    if x > limit:
        return limit
    return x


def clamp_between(x, low, high):
    """Clamp to [low, high]."""
    if x > high:
        return high
    if x < low:
        return low
    return x


def sign(x) -> int:
    """1 for positive, -1 for negative, 0 for zero."""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def non_zero_sign(x) -> int:
    """1 for non-negative values, -1 for negative values."""
    return 1 if x >= 0 else -1
