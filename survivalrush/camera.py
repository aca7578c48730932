"""Perspective camera that follows the player and maps between screen and world."""

from __future__ import annotations

import math
from typing import Optional

from .transform import Transform
from .vector import UP, Vector3

Matrix4 = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

# Below this distance beyond the follow radius the camera stays put.
_FOLLOW_TOLERANCE = 0.01


def _mat_mul(a: Matrix4, b: Matrix4) -> Matrix4:
    columns = list(zip(*b))
    return tuple(tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a)


def _mat_vec(m: Matrix4, v: tuple[float, float, float, float]) -> tuple[float, ...]:
    return tuple(sum(a * b for a, b in zip(row, v)) for row in m)


def _invert(m: Matrix4) -> Matrix4:
    """Inverse of a 4x4 matrix by Gauss-Jordan elimination."""
    size = 4
    work = [list(row) + [1.0 if i == j else 0.0 for j in range(size)] for i, row in enumerate(m)]
    for col in range(size):
        pivot = max(range(col, size), key=lambda r: abs(work[r][col]))
        if abs(work[pivot][col]) < 1e-12:
            raise ValueError("matrix is not invertible")
        work[col], work[pivot] = work[pivot], work[col]
        factor = work[col][col]
        work[col] = [value / factor for value in work[col]]
        for row in range(size):
            if row != col and work[row][col] != 0.0:
                scale = work[row][col]
                work[row] = [a - scale * b for a, b in zip(work[row], work[col])]
    return tuple(tuple(row[size:]) for row in work)


def _perspective(fov: float, aspect: float, near: float, far: float) -> Matrix4:
    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    return (
        (f / aspect, 0.0, 0.0, 0.0),
        (0.0, f, 0.0, 0.0),
        (0.0, 0.0, (far + near) / (near - far), 2.0 * far * near / (near - far)),
        (0.0, 0.0, -1.0, 0.0),
    )


class Camera:
    """A camera hovering above the player, following once it leaves a radius."""

    def __init__(self, follow_radius: float, normalize_speed: float) -> None:
        self.follow_radius = follow_radius
        self.normalize_speed = normalize_speed
        self.offset = Vector3()
        self.transform = Transform(position=self.offset)
        self.projection: Matrix4 = _IDENTITY
        self.viewport: tuple[int, int, int, int] = (0, 0, 800, 600)

    def init(self, fov: float, aspect: float, near: float, far: float) -> None:
        """Set a perspective projection; ``fov`` is the vertical angle in degrees."""
        self.projection = _perspective(fov, aspect, near, far)

    def set_viewport(self, width: int, height: int) -> None:
        self.viewport = (0, 0, width, height)

    def update(self, player_pos: Vector3, dt: float) -> None:
        """Pull the camera along once the player leaves the follow radius."""
        follow_pos = self.transform.position - self.offset
        follow_dir = player_pos - follow_pos
        excess = follow_dir.length() - self.follow_radius
        if excess > _FOLLOW_TOLERANCE:
            self.transform.move(follow_dir.normalized() * excess)

    def view_matrix(self) -> Matrix4:
        """Row-major look-at matrix from the camera towards its forward direction."""
        eye = self.transform.position
        f = self.transform.forward().normalized()
        s = f.cross(UP).normalized()
        u = s.cross(f)
        rotation: Matrix4 = (
            (s.x, s.y, s.z, 0.0),
            (u.x, u.y, u.z, 0.0),
            (-f.x, -f.y, -f.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
        translation: Matrix4 = (
            (1.0, 0.0, 0.0, -eye.x),
            (0.0, 1.0, 0.0, -eye.y),
            (0.0, 0.0, 1.0, -eye.z),
            (0.0, 0.0, 0.0, 1.0),
        )
        return _mat_mul(rotation, translation)

    def _view_projection(self) -> Matrix4:
        return _mat_mul(self.projection, self.view_matrix())

    def world_to_screen(self, point: Vector3) -> Optional[tuple[float, float]]:
        """Screen position (origin top-left) of a world point, or None if behind."""
        clip = _mat_vec(self._view_projection(), (point.x, point.y, point.z, 1.0))
        w = clip[3]
        if w <= 0.0:
            return None
        ndc_x, ndc_y = clip[0] / w, clip[1] / w
        vx, vy, vw, vh = self.viewport
        win_x = vx + (ndc_x + 1.0) * vw / 2.0
        win_y = vy + (ndc_y + 1.0) * vh / 2.0
        return (win_x, vh - win_y)

    def screen_to_world(self, x: float, y: float, depth: float) -> Vector3:
        """World point under a screen position at a depth between 0 (near) and 1 (far)."""
        vx, vy, vw, vh = self.viewport
        win_y = vh - y
        ndc = (
            (x - vx) / vw * 2.0 - 1.0,
            (win_y - vy) / vh * 2.0 - 1.0,
            2.0 * depth - 1.0,
            1.0,
        )
        out = _mat_vec(_invert(self._view_projection()), ndc)
        if out[3] == 0.0:
            raise ValueError("screen point does not map to a world point")
        return Vector3(out[0] / out[3], out[1] / out[3], out[2] / out[3])