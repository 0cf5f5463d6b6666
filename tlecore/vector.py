"""A small three-dimensional vector with an extra magnitude-like component."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """Cartesian vector; ``w`` carries a range or range rate alongside."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def scaled(self, factor: float) -> Vector:
        """Return the vector with every component multiplied by ``factor``.

        ``w`` is multiplied by the absolute value of the factor.
        """
        return Vector(
            self.x * factor,
            self.y * factor,
            self.z * factor,
            self.w * abs(factor),
        )

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(
            self.x - other.x,
            self.y - other.y,
            self.z - other.z,
            self.w - other.w,
        )

    def angle(self, other: Vector) -> float:
        """Angle in radians between this vector and ``other``."""
        cosine = self.dot(other) / (self.magnitude() * other.magnitude())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def magnitude(self) -> float:
        """Euclidean length of the x, y, z part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: Vector) -> float:
        """Dot product of the x, y, z parts."""
        return self.x * other.x + self.y * other.y + self.z * other.z