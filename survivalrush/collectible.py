"""Health pickups dropped by defeated enemies."""

from __future__ import annotations

import copy
from typing import Any, Iterator, Optional

from .collider import Collider
from .color import BLUE, WHITE
from .debug import DebugLayer
from .geometry import GeoType, SimpleCharacter, SimpleGeo
from .vector import Vector3, circle_collision

HEAL_AMOUNT = 5.0


class Collectible(SimpleCharacter):
    """A pickup that fades over its lifetime and homes in on a nearby player."""

    # Entities compare by identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(
        self,
        geometry: SimpleGeo,
        speed: float,
        max_force: float,
        collect_radius: float,
        life_time: float,
        collider: Collider,
    ) -> None:
        super().__init__(geometry)
        self.speed = speed
        self.max_force = max_force
        self.collect_radius = collect_radius
        self.life_time = life_time
        self.collider = collider
        self.velocity = Vector3()
        self.destroy = False
        self.activated = False
        self.timer = 0.0

    def clone(self) -> Collectible:
        return copy.deepcopy(self)

    def move(self, player_pos: Vector3, dt: float, debug: Optional[DebugLayer] = None) -> None:
        """Steer towards the player."""
        desired = (player_pos - self.transform.position).normalized() * self.speed
        force = (desired - self.velocity).clamp_magnitude(self.max_force)
        self.velocity = (self.velocity + force).clamp_magnitude(self.speed)
        self.transform.move(self.velocity * dt)
        if debug is not None:
            self.collider.draw_debug(debug, self.transform.position, self.transform.scale)

    def collectible_update(self, player: Any, dt: float, debug: Optional[DebugLayer] = None) -> None:
        """Fade and wait for the player, or chase and heal once activated."""
        player_pos = player.transform.position
        player_radius = player.collider.radius_for(player.transform.scale.x)

        if not self.activated:
            if self.timer >= self.life_time:
                self.destroy = True
                return

            self.transform.set_scale(Vector3(1.0, 1.0, 1.0) * (1.0 - self.timer / self.life_time))

            distance_sq = (self.transform.position - player_pos).sqr_length()
            if distance_sq <= self.collect_radius * self.collect_radius:
                self.activated = True

            self.timer += dt

            if debug is not None:
                marker = SimpleCharacter(SimpleGeo(GeoType.CIRCLE_BOUNDS, BLUE, 1.0))
                marker.transform.set_position(self.transform.position)
                marker.transform.set_scale(self.transform.scale * self.collect_radius * 2)
                debug.add(marker)
            return

        self.move(player_pos, dt, debug)
        radius = self.collider.radius_for(self.transform.scale.x)
        if circle_collision(self.transform.position, radius, player_pos, player_radius):
            player.heal(HEAL_AMOUNT)
            self.destroy = True


class CollectibleManager:
    """All pickups lying in the arena."""

    def __init__(self) -> None:
        self.collectibles: list[Collectible] = []

    def __iter__(self) -> Iterator[Collectible]:
        return iter(self.collectibles)

    def __len__(self) -> int:
        return len(self.collectibles)

    def create_collectible(self, position: Vector3) -> Collectible:
        collectible = Collectible(SimpleGeo(GeoType.CIRCLE, WHITE, 0.5), 10, 5, 3, 6, Collider(0.25))
        collectible.transform.set_position(position)
        self.collectibles.append(collectible)
        return collectible

    def update(self, player: Any, dt: float, debug: Optional[DebugLayer] = None) -> None:
        """Update every pickup, then drop the used and expired ones."""
        for collectible in self.collectibles:
            collectible.collectible_update(player, dt, debug)
        self.collectibles[:] = [c for c in self.collectibles if not c.destroy]

    def clear(self) -> None:
        self.collectibles.clear()

    def reset(self) -> None:
        self.clear()