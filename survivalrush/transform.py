"""Position, rotation and scale of an object, with its model matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import PI, Vector3

_Matrix3 = tuple[tuple[float, float, float], ...]


def _rot_x(degrees: float) -> _Matrix3:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return ((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c))


def _rot_y(degrees: float) -> _Matrix3:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return ((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c))


def _rot_z(degrees: float) -> _Matrix3:
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    return ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))


def _mat_mul(a: _Matrix3, b: _Matrix3) -> _Matrix3:
    columns = list(zip(*b))
    return tuple(tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a)


@dataclass
class Transform:
    """Placement of an object in the world; rotation is Euler angles in degrees."""

    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))

    def set_position(self, position: Vector3) -> None:
        self.position = position

    def set_rotation(self, rotation: Vector3) -> None:
        self.rotation = rotation

    def set_scale(self, scale: Vector3) -> None:
        self.scale = scale

    def move(self, movement: Vector3) -> None:
        self.position = self.position + movement

    def rotate_on_y(self, angle: float) -> None:
        self.rotation = Vector3(self.rotation.x, self.rotation.y + angle, self.rotation.z)

    def forward(self) -> Vector3:
        """Facing direction derived from pitch and yaw."""
        pitch = self.rotation.x * PI / 180.0
        yaw = self.rotation.y * PI / 180.0
        return Vector3(
            math.cos(pitch) * math.sin(yaw),
            math.sin(pitch),
            math.cos(pitch) * math.cos(yaw),
        )

    def right(self) -> Vector3:
        """Sideways direction taken from the model matrix."""
        m = self.matrix()
        return Vector3(-m[0], -m[1], -m[2]).normalized()

    def _linear(self) -> _Matrix3:
        r = _mat_mul(_mat_mul(_rot_z(self.rotation.z), _rot_y(self.rotation.y)), _rot_x(self.rotation.x))
        s = tuple(self.scale)
        return tuple(tuple(value * s[j] for j, value in enumerate(row)) for row in r)

    def matrix(self) -> tuple[float, ...]:
        """Column-major 4x4 model matrix: translate, rotate Z, Y, X, then scale."""
        linear = self._linear()
        columns = list(zip(*linear))
        flat: list[float] = []
        for column in columns:
            flat.extend(column)
            flat.append(0.0)
        flat.extend((self.position.x, self.position.y, self.position.z, 1.0))
        return tuple(flat)

    def apply(self, point: Vector3) -> Vector3:
        """Transform a point from local to world space."""
        linear = self._linear()
        local = tuple(point)
        x, y, z = (sum(a * b for a, b in zip(row, local)) for row in linear)
        return Vector3(x, y, z) + self.position