"""Geometric value objects for shape rasterization.

The module provides the following classes:
    Vector2: Immutable 2D vector, also used as a point (alias Point2).
    Projection: Scale-and-translate mapping between shape coordinates and
        pixel coordinates.

Example usage:
    Mapping pixel centres into shape space::

        from scanline_lib.domain.geometry import Projection, Vector2

        projection = Projection(scale=Vector2(2.0, 2.0), translate=Vector2(0.0, 0.0))
        projection.unproject(Vector2(10.0, 4.0))  # Vector2(x=5.0, y=2.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vector2:
        """Vector with both components set to value."""
        return cls(value, value)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        return Vector2(self.x / other, self.y / other)

    def __rtruediv__(self, other: float) -> Vector2:
        return Vector2(other / self.x, other / self.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __bool__(self) -> bool:
        return self.x != 0.0 or self.y != 0.0

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length())

    def normalize(self, allow_zero: bool = False) -> Vector2:
        """Unit vector in the same direction.

        A zero vector normalizes to (0, 0) when allow_zero is set and to
        (0, 1) otherwise.
        """
        length = self.length()
        if length > 0.0:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0) if allow_zero else Vector2(0.0, 1.0)

    def orthogonal(self, polarity: bool = True) -> Vector2:
        """Perpendicular vector, rotated counter-clockwise when polarity is True."""
        if polarity:
            return Vector2(-self.y, self.x)
        return Vector2(self.y, -self.x)

    def orthonormal(self, polarity: bool = True, allow_zero: bool = False) -> Vector2:
        """Unit perpendicular vector."""
        return self.orthogonal(polarity).normalize(allow_zero)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Vector2:
        """Create from tuple."""
        return cls(t[0], t[1])


Point2 = Vector2


def dot_product(a: Vector2, b: Vector2) -> float:
    return a.dot(b)


def cross_product(a: Vector2, b: Vector2) -> float:
    return a.cross(b)


@dataclass(frozen=True)
class Projection:
    """Mapping between shape space and pixel space.

    A shape coordinate c maps to the pixel coordinate scale * (c + translate).

    Attributes:
        scale: Per-axis scale factor.
        translate: Offset applied in shape space before scaling.
    """
    scale: Vector2 = field(default_factory=lambda: Vector2.splat(1.0))
    translate: Vector2 = field(default_factory=lambda: Vector2.splat(0.0))

    def project(self, coord: Vector2) -> Vector2:
        """Convert a shape coordinate to a pixel coordinate."""
        return self.scale * (coord + self.translate)

    def unproject(self, coord: Vector2) -> Vector2:
        """Convert a pixel coordinate to a shape coordinate."""
        return coord / self.scale - self.translate

    def project_vector(self, vector: Vector2) -> Vector2:
        return self.scale * vector

    def unproject_vector(self, vector: Vector2) -> Vector2:
        return vector / self.scale

    def project_x(self, x: float) -> float:
        return self.scale.x * (x + self.translate.x)

    def project_y(self, y: float) -> float:
        return self.scale.y * (y + self.translate.y)

    def unproject_x(self, x: float) -> float:
        return x / self.scale.x - self.translate.x

    def unproject_y(self, y: float) -> float:
        return y / self.scale.y - self.translate.y
