"""Keyboard and mouse state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .vector import UP, Vector3, raycast_plane

if TYPE_CHECKING:
    from .camera import Camera


class InputState:
    """Movement keys, weapon slot, mouse position and button as last reported."""

    UP_KEY = "w"
    DOWN_KEY = "s"
    LEFT_KEY = "a"
    RIGHT_KEY = "d"
    SLOT_KEYS = {"1": 0, "2": 1, "3": 2}

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.selected_slot = 0
        self.left_mouse_down = False
        self._up = False
        self._down = False
        self._left = False
        self._right = False

    def key_down(self, key: str) -> None:
        if key == self.UP_KEY:
            self._up = True
        if key == self.DOWN_KEY:
            self._down = True
        if key == self.RIGHT_KEY:
            self._right = True
        if key == self.LEFT_KEY:
            self._left = True
        if key in self.SLOT_KEYS:
            self.selected_slot = self.SLOT_KEYS[key]

    def key_up(self, key: str) -> None:
        if key == self.UP_KEY:
            self._up = False
        if key == self.DOWN_KEY:
            self._down = False
        if key == self.RIGHT_KEY:
            self._right = False
        if key == self.LEFT_KEY:
            self._left = False

    def horizontal(self) -> float:
        """-1, 0 or 1 from the left and right keys."""
        return float(self._right) - float(self._left)

    def vertical(self) -> float:
        """-1, 0 or 1 from the up and down keys."""
        return float(self._up) - float(self._down)

    def set_mouse_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def hit_on_xz(self, camera: Camera) -> Optional[Vector3]:
        """Where the ray under the mouse meets the ground plane, if it does."""
        origin = camera.screen_to_world(self.x, self.y, 0.0)
        target = camera.screen_to_world(self.x, self.y, 1.0)
        direction = (target - origin).normalized()
        return raycast_plane(origin, direction, Vector3(), UP)