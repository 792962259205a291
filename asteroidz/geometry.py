"""Vector and quaternion arithmetic used by the game objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

DEG2RAD = math.pi / 180


def deg2rad(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * DEG2RAD


@dataclass(frozen=True)
class Vector2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y

    def length_sqr(self) -> float:
        """Squared length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())


@dataclass(frozen=True)
class Vector3:
    """An immutable three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Vector product with another vector."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_sqr(self) -> float:
        """Squared length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with real part ``w`` and imaginary part ``v``."""

    w: float = 1.0
    v: Vector3 = Vector3()

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Build a rotation quaternion from an axis and an angle in radians.

        The real part is ``cos(angle)`` and the imaginary part is the unit axis
        scaled by ``sin(angle / 2)``.
        """
        return cls(math.cos(angle), axis.normalized() * math.sin(angle / 2))

    def __add__(self, other: Quaternion) -> Quaternion:
        return Quaternion(self.w + other.w, self.v + other.v)

    def __sub__(self, other: Quaternion) -> Quaternion:
        return Quaternion(self.w - other.w, self.v - other.v)

    def __mul__(self, other: Quaternion) -> Quaternion:
        return self.cross(other)

    def __truediv__(self, scalar: float) -> Quaternion:
        return Quaternion(self.w / scalar, self.v / scalar)

    def dot(self, other: Quaternion) -> float:
        """Four-dimensional scalar product."""
        return self.w * other.w + self.v.dot(other.v)

    def cross(self, other: Quaternion) -> Quaternion:
        """Hamilton product of this quaternion with another."""
        return Quaternion(
            self.w * other.w - self.v.dot(other.v),
            other.v * self.w + self.v * other.w + self.v.cross(other.v),
        )

    def conjugate(self) -> Quaternion:
        """Complex conjugate."""
        return Quaternion(self.w, -self.v)

    def inverse(self) -> Quaternion:
        """Conjugate divided by the norm."""
        return self.conjugate() / self.norm()

    def norm(self) -> float:
        """Length of the quaternion as a four-vector."""
        return math.sqrt(self.w * self.w + self.v.length_sqr())

    def unit(self) -> Quaternion:
        """The quaternion scaled to norm one."""
        return self / self.norm()

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Rotate ``vector`` by this quaternion (q * v * q')."""
        return (self.cross(Quaternion(0.0, vector)) * self.conjugate()).v