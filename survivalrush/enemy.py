"""Enemies that chase the player, and the manager that spawns them."""

from __future__ import annotations

import copy
import random
from typing import TYPE_CHECKING, Any, Iterator, Optional

from .collider import Collider
from .color import BLACK
from .debug import DebugLayer
from .geometry import GeoType, SimpleCharacter, SimpleGeo
from .vector import FORWARD, UP, Vector3, circle_collision, clamp, random_float, signed_angle_between

if TYPE_CHECKING:
    from .bullet import Bullet

_CONTACT_KILL = 10000.0
_MAX_SPAWN_TIME = 10000.0


class Enemy(SimpleCharacter):
    """A steering enemy that hurts the player on contact."""

    # Entities compare by identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(
        self,
        geometry: SimpleGeo,
        speed: float,
        contact_damage: float,
        health: float,
        max_force: float,
        collider: Collider,
    ) -> None:
        super().__init__(geometry)
        self.speed = speed
        self.contact_damage = contact_damage
        self.health = health
        self.max_force = max_force
        self.collider = collider
        self.velocity = Vector3()

    def clone(self) -> Enemy:
        return copy.deepcopy(self)

    def move(
        self,
        target: Vector3,
        enemies: list[Enemy],
        dt: float,
        debug: Optional[DebugLayer] = None,
    ) -> None:
        """Steer towards ``target``, pushing apart from overlapping enemies."""
        desired = (target - self.transform.position).normalized() * self.speed
        force = (desired - self.velocity).clamp_magnitude(self.max_force)
        self.velocity = (self.velocity + force).clamp_magnitude(self.speed)

        movement = self.velocity * dt
        for other in enemies:
            if other is self:
                continue
            p1 = self.transform.position + movement
            p2 = other.transform.position
            r1 = self.collider.radius_for(self.transform.scale.x)
            r2 = other.collider.radius_for(self.transform.scale.x)
            if circle_collision(p1, r1, p2, r2):
                push = (p1 - p2).normalized()
                self.velocity = self.velocity + push
                other.velocity = other.velocity - push

        self.transform.move(self.velocity * dt)
        heading = self.velocity.normalized()
        self.transform.rotate_on_y(signed_angle_between(self.transform.forward(), heading, UP))

        if debug is not None:
            self.collider.draw_debug(debug, self.transform.position, self.transform.scale)

    def damage(self, amount: float) -> None:
        self.health -= amount

    def dead(self) -> bool:
        return self.health <= 0


class EnemyManager:
    """Spawns enemies at a quickening pace and moves them towards the player."""

    def __init__(
        self,
        spawn_new_enemy_time: float = 3.0,
        spawn_min_time: float = 0.1,
        time_decrease_per_spawn: float = 0.05,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.spawn_new_enemy_time = spawn_new_enemy_time
        self.spawn_min_time = spawn_min_time
        self.time_decrease_per_spawn = time_decrease_per_spawn
        self.rng = rng
        self.enemies: list[Enemy] = []
        self.timer = 0.0

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self.enemies)

    def __len__(self) -> int:
        return len(self.enemies)

    def create_enemy(self, position: Vector3) -> Enemy:
        enemy = Enemy(SimpleGeo(GeoType.SQUARE, BLACK), 5, 10, 25, 8, Collider(0.5))
        enemy.transform.set_position(position)
        self.enemies.append(enemy)
        return enemy

    def update(self, player: Any, dt: float, debug: Optional[DebugLayer] = None) -> None:
        """Spawn when due, move living enemies, resolve contact, drop the dead."""
        player_pos = player.transform.position
        self.timer += dt

        if self.timer >= self.spawn_new_enemy_time:
            # Enemies appear straight ahead (+Z) of the player at a random distance.
            distance = random_float(10, 15, self.rng)
            self.create_enemy(player_pos + FORWARD * distance)
            self.spawn_new_enemy_time = clamp(
                self.spawn_new_enemy_time - self.time_decrease_per_spawn,
                self.spawn_min_time,
                _MAX_SPAWN_TIME,
            )
            self.timer = 0.0

        player_radius = player.collider.radius_for(player.transform.scale.x)
        for enemy in self.enemies:
            if enemy.dead():
                continue
            enemy.move(player_pos, self.enemies, dt, debug)
            radius = enemy.collider.radius_for(enemy.transform.scale.x)
            if circle_collision(enemy.transform.position, radius, player_pos, player_radius):
                enemy.damage(_CONTACT_KILL)
                player.damage(enemy.contact_damage)

        self.enemies[:] = [enemy for enemy in self.enemies if not enemy.dead()]

    def check_hits(self, bullet: Bullet, collectibles: Any = None) -> bool:
        """Damage the first living enemy the bullet touches; True if one was hit."""
        bullet_pos = bullet.transform.position
        bullet_radius = bullet.collider.radius_for(bullet.transform.scale.x)
        for enemy in self.enemies:
            if enemy.dead():
                continue
            radius = enemy.collider.radius_for(enemy.transform.scale.x)
            if circle_collision(enemy.transform.position, radius, bullet_pos, bullet_radius):
                enemy.damage(bullet.damage)
                if enemy.dead() and collectibles is not None:
                    collectibles.create_collectible(enemy.transform.position)
                return True
        return False

    def clear(self) -> None:
        self.enemies.clear()

    def reset(self) -> None:
        self.clear()
        self.timer = 0.0