"""The player's ship: movement, aiming, health and weapons."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .bullet import Bullet, BulletManager
from .collider import Collider
from .color import BLUE, GREEN, MAGENTA, RED, WHITE, YELLOW
from .debug import DebugLayer
from .geometry import GeoType, SimpleCharacter, SimpleGeo
from .input import InputState
from .vector import UP, Vector3, clamp, signed_angle_between
from .weapon import ShotgunWeapon, Weapon

if TYPE_CHECKING:
    from .camera import Camera


def _default_weapons() -> list[Weapon]:
    return [
        Weapon(Bullet(SimpleGeo(GeoType.CIRCLE, YELLOW, 0.5), 30, 5, 20, Collider(0.25)), 0.5),
        Weapon(Bullet(SimpleGeo(GeoType.SQUARE, RED, 0.3), 25, 25, 100, Collider(0.15)), 2),
        ShotgunWeapon(
            Bullet(SimpleGeo(GeoType.TRIANGLE, MAGENTA, 0.5), 15, 15, 15, Collider(0.25)), 1.5, 3, 10
        ),
    ]


class Player(SimpleCharacter):
    """A triangle that turns towards the mouse and moves with the keyboard."""

    # Entities compare by identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(
        self,
        health: float,
        speed: float,
        damping: float,
        max_force: float,
        rotation_speed: float,
        collider: Collider,
    ) -> None:
        super().__init__(SimpleGeo(GeoType.TRIANGLE, GREEN))
        self.health = health
        self.max_health = health
        self.speed = speed
        self.damping = damping
        self.max_force = max_force
        self.rotation_speed = rotation_speed
        self.collider = collider
        self.velocity = Vector3()
        self.weapons = _default_weapons()

    def motion_update(
        self,
        input_state: InputState,
        camera: Camera,
        dt: float,
        debug: Optional[DebugLayer] = None,
    ) -> None:
        """Turn towards the mouse's ground point, then accelerate from the keys."""
        hit = input_state.hit_on_xz(camera)
        hit_pos = hit if hit is not None else Vector3()

        aim = (hit_pos - self.transform.position).normalized()
        angle = signed_angle_between(self.transform.forward(), aim, UP)
        max_turn = 180.0 * dt * self.rotation_speed
        self.transform.rotate_on_y(clamp(angle, -max_turn, max_turn))

        forward_input = self.transform.forward() * input_state.vertical()
        right_input = self.transform.right() * input_state.horizontal()
        direction = (forward_input + right_input).normalized()

        desired = direction * (self.speed * dt)
        force = desired - self.velocity
        damping_force = -self.velocity * self.damping
        force = force - damping_force

        self.velocity = self.velocity + force.clamp_magnitude(self.max_force) * dt
        self.velocity = self.velocity.clamp_magnitude(self.speed)
        self.transform.move(self.velocity)

        if debug is not None:
            input_marker = SimpleCharacter(SimpleGeo(GeoType.CIRCLE, WHITE))
            forward_marker = SimpleCharacter(SimpleGeo(GeoType.SQUARE, BLUE))
            right_marker = SimpleCharacter(SimpleGeo(GeoType.SQUARE, RED))
            input_marker.transform.set_position(hit_pos)
            forward_marker.transform.set_position(self.transform.position + self.transform.forward() * 3)
            right_marker.transform.set_position(self.transform.position + self.transform.right() * 3)
            debug.add(input_marker)
            debug.add(forward_marker)
            debug.add(right_marker)
            self.collider.draw_debug(debug, self.transform.position, self.transform.scale)

    def action_update(self, input_state: InputState, dt: float, bullets: BulletManager) -> None:
        """Fire the selected weapon while the button is held; let all weapons recharge."""
        current = self.weapons[input_state.selected_slot]
        if input_state.left_mouse_down:
            current.fire(self.transform.forward(), self.transform.position, bullets)
        for weapon in self.weapons:
            weapon.update(dt)

    def reset(self) -> None:
        self.health = self.max_health
        self.velocity = Vector3()
        self.transform.set_position(Vector3())
        self.transform.set_rotation(Vector3())

    def damage(self, amount: float) -> None:
        self.health -= amount

    def heal(self, amount: float) -> None:
        self.health = min(self.health + amount, self.max_health)

    def dead(self) -> bool:
        return self.health <= 0