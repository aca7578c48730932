"""Three-component vectors and the small geometric helpers built on them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional, TypeVar

# The game uses this approximation of pi for its own angle conversions.
PI = 3.14159

_EPSILON = 0.0001

T = TypeVar("T")


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

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

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        return self / length if length > 0 else Vector3()

    def clamp_magnitude(self, max_length: float) -> Vector3:
        """The vector shortened to at most ``max_length``."""
        length = self.length()
        if length > max_length and length > _EPSILON:
            return (self / length) * max_length
        return self

    def rotate_y(self, degrees: float) -> Vector3:
        """The vector rotated about the Y axis."""
        radians = degrees * PI / 180.0
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Vector3(
            self.x * cos_a - self.z * sin_a,
            self.y,
            self.x * sin_a + self.z * cos_a,
        )


UP = Vector3(0.0, 1.0, 0.0)
FORWARD = Vector3(0.0, 0.0, 1.0)


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range [low, high]."""
    if value < low:  # type: ignore[operator]
        return low
    if value > high:  # type: ignore[operator]
        return high
    return value


def random_float(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """A uniformly distributed float between ``low`` and ``high``."""
    source = rng if rng is not None else random
    return low + source.random() * (high - low)


def signed_angle_between(from_: Vector3, to: Vector3, axis: Vector3) -> float:
    """Angle in degrees from ``from_`` to ``to`` around ``axis``, signed."""
    axis_norm = axis.normalized()
    from_proj = (from_ - axis_norm * from_.dot(axis_norm)).normalized()
    to_proj = (to - axis_norm * to.dot(axis_norm)).normalized()

    dot = clamp(from_proj.dot(to_proj), -1.0, 1.0)
    angle = math.acos(dot) * (180.0 / PI)

    sign = -1.0 if axis_norm.dot(from_proj.cross(to_proj)) < 0 else 1.0
    return angle * sign


def circle_collision(p1: Vector3, r1: float, p2: Vector3, r2: float) -> bool:
    """Whether two circles overlap (touching does not count)."""
    distance_sq = (p1 - p2).sqr_length()
    min_distance = r1 + r2
    return distance_sq < min_distance * min_distance


def raycast_plane(
    origin: Vector3,
    direction: Vector3,
    plane_point: Vector3,
    plane_normal: Vector3,
) -> Optional[Vector3]:
    """The point where a ray meets a plane, or None if it never does."""
    denom = plane_normal.dot(direction)
    if abs(denom) < _EPSILON:
        return None
    t = (plane_point - origin).dot(plane_normal) / denom
    if t < 0:
        return None
    return origin + direction * t