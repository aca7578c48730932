"""Weapons that fire bullets from a template at a limited rate."""

from __future__ import annotations

import copy

from .bullet import Bullet, BulletManager
from .vector import Vector3


class Weapon:
    """Fires one bullet at a time, no more often than every ``fire_rate`` seconds."""

    def __init__(self, bullet_template: Bullet, fire_rate: float) -> None:
        self.bullet_template = bullet_template
        self.fire_rate = fire_rate
        self.timer = 0.0

    def fire(self, direction: Vector3, position: Vector3, bullets: BulletManager) -> bool:
        """Fire if the weapon is ready; True when a shot went out."""
        if self.timer < self.fire_rate:
            return False
        bullets.add(self.bullet_template.clone(direction, position))
        self.timer = 0.0
        return True

    def update(self, dt: float) -> None:
        self.timer += dt

    def clone(self) -> Weapon:
        return copy.deepcopy(self)


class ShotgunWeapon(Weapon):
    """Fires a fan of bullets spread evenly around the aim direction."""

    def __init__(
        self,
        bullet_template: Bullet,
        fire_rate: float,
        bullet_count: int,
        bullet_spread: float,
    ) -> None:
        super().__init__(bullet_template, fire_rate)
        self.bullet_count = bullet_count
        self.bullet_spread = bullet_spread

    def fire(self, direction: Vector3, position: Vector3, bullets: BulletManager) -> bool:
        if self.timer < self.fire_rate:
            return False
        current = direction.rotate_y((self.bullet_count - 1) * -self.bullet_spread / 2.0)
        for _ in range(self.bullet_count):
            bullets.add(self.bullet_template.clone(current, position))
            current = current.rotate_y(self.bullet_spread)
        self.timer = 0.0
        return True