"""Three-component vectors and points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

EPSILON = 0.00001


def is_equal(a: float, b: float) -> bool:
    """Return True when ``a`` and ``b`` differ by less than EPSILON."""
    return math.fabs(a - b) < EPSILON


@dataclass(frozen=True)
class Vec:
    """An immutable 3D vector."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vec:
        """Return the zero vector."""
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def __mul__(self, t: float) -> Vec:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> Vec:
        return self.__mul__(t)

    def __truediv__(self, t: float) -> Vec:
        if not isinstance(t, Real):
            return NotImplemented
        return Vec(self.x / t, self.y / t, self.z / t)

    def __str__(self) -> str:
        return f"vec({self.x:f}, {self.y:f}, {self.z:f})"

    def dot(self, other: Vec) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        """Return the cross product with ``other``."""
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def squared_magnitude(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Return the length."""
        return math.sqrt(self.squared_magnitude())

    def normalized(self) -> Vec:
        """Return the unit vector in the same direction; the zero vector is returned unchanged."""
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return self / mag


def point(x: float, y: float, z: float) -> Vec:
    """Return a point, represented as a vector."""
    return Vec(x, y, z)