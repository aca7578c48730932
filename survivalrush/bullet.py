"""Projectiles and the manager that moves them."""

from __future__ import annotations

import copy
from typing import Any, Iterator, Optional

from .collider import Collider
from .debug import DebugLayer
from .geometry import SimpleCharacter, SimpleGeo
from .vector import UP, Vector3, signed_angle_between


class Bullet(SimpleCharacter):
    """A projectile that shrinks as it travels and vanishes at its range."""

    # Entities compare by identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(
        self,
        geometry: SimpleGeo,
        speed: float,
        damage: float,
        max_range: float,
        collider: Collider,
    ) -> None:
        super().__init__(geometry)
        self.speed = speed
        self.damage = damage
        self.max_range = max_range
        self.collider = collider
        self.direction = Vector3()
        self.total_distance = 0.0

    def clone(self, direction: Vector3, position: Vector3) -> Bullet:
        """A new bullet from this template, placed and facing ``direction``."""
        bullet = copy.deepcopy(self)
        bullet.direction = direction
        bullet.transform.set_position(position)
        angle = signed_angle_between(bullet.transform.forward(), direction, UP)
        bullet.transform.rotate_on_y(angle)
        return bullet

    def move(self, dt: float) -> None:
        amount = self.speed * dt
        self.total_distance += amount
        self.transform.move(self.direction.normalized() * amount)
        scale = 1.0 - self.total_distance / self.max_range
        self.transform.set_scale(Vector3(scale, scale, scale))

    def bullet_update(
        self,
        enemies: Any,
        collectibles: Any = None,
        debug: Optional[DebugLayer] = None,
    ) -> bool:
        """Check for hits; True when the bullet is spent."""
        if debug is not None:
            self.collider.draw_debug(debug, self.transform.position, self.transform.scale)
        hit = enemies.check_hits(self, collectibles)
        return self.total_distance >= self.max_range or hit


class BulletManager:
    """All bullets in flight."""

    def __init__(self) -> None:
        self.bullets: list[Bullet] = []

    def __iter__(self) -> Iterator[Bullet]:
        return iter(self.bullets)

    def __len__(self) -> int:
        return len(self.bullets)

    def add(self, bullet: Bullet) -> None:
        self.bullets.append(bullet)

    def update(
        self,
        dt: float,
        enemies: Any,
        collectibles: Any = None,
        debug: Optional[DebugLayer] = None,
    ) -> None:
        """Move every bullet and drop those that hit or ran out of range."""
        survivors = []
        for bullet in self.bullets:
            bullet.move(dt)
            if not bullet.bullet_update(enemies, collectibles, debug):
                survivors.append(bullet)
        self.bullets[:] = survivors

    def clear(self) -> None:
        self.bullets.clear()