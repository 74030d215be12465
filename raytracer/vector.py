"""Vectors, intervals and rays plus the random vector helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.rng import RandomSource, default_generator

_NEAR_ZERO = 1.0e-8


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable three-component vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> Vector:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> Vector:
        return self.__mul__(t)

    def __truediv__(self, t: float) -> Vector:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def hadamard(self, other: Vector) -> Vector:
        """Component-wise product."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> Vector:
        return self / self.length()

    def reflect(self, normal: Vector) -> Vector:
        """Mirror this vector about a surface normal."""
        return self - normal * (2.0 * self.dot(normal))

    def refract(self, normal: Vector, constant: float) -> Vector:
        """Refract a unit vector through a surface with the given index ratio."""
        cos_theta = min((-self).dot(normal), 1.0)
        perp = (self + normal * cos_theta) * constant
        abs_len_sq = abs(1.0 - perp.length_squared())
        para = normal * math.sqrt(abs_len_sq)
        return perp - para

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        return all(abs(c) < _NEAR_ZERO for c in (self.x, self.y, self.z))


def _source(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else default_generator()


def random_vector(
    minimum: float, maximum: float, rng: RandomSource | None = None
) -> Vector:
    """Vector with each component uniform in [minimum, maximum)."""
    src = _source(rng)
    span = maximum - minimum
    x = span * src.random() + minimum
    y = span * src.random() + minimum
    z = span * src.random() + minimum
    return Vector(x, y, z)


def random_unit_vector(rng: RandomSource | None = None) -> Vector:
    """Uniformly distributed direction of length one."""
    src = _source(rng)
    while True:
        p = random_vector(-1.0, 1.0, src)
        len_squared = p.length_squared()
        if 1.0e-160 < len_squared <= 1.0:
            return p / math.sqrt(len_squared)


def random_in_hemisphere(normal: Vector, rng: RandomSource | None = None) -> Vector:
    """Random unit vector on the same side as ``normal``."""
    v = random_unit_vector(rng)
    return v if v.dot(normal) > 0.0 else -v


def random_in_unit_disk(rng: RandomSource | None = None) -> Vector:
    """Random point inside the unit disk in the xy plane."""
    src = _source(rng)
    while True:
        x = 2 * src.random() - 1.0
        y = 2 * src.random() - 1.0
        p = Vector(x, y, 0.0)
        if p.length_squared() < 1.0:
            return p


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of ray parameters."""

    minimum: float
    maximum: float

    def contains(self, value: float) -> bool:
        """Strictly inside the bounds."""
        return self.minimum < value < self.maximum

    def surrounds(self, value: float) -> bool:
        """Inside the bounds, endpoints included."""
        return self.minimum <= value <= self.maximum

    @classmethod
    def universe(cls) -> Interval:
        return cls(-1000.0, 1000.0)


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Vector
    direction: Vector

    def at(self, t: float) -> Vector:
        """Point reached after travelling ``t`` directions from the origin."""
        return self.origin + self.direction * t