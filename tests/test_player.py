import pytest

from survivalrush.bullet import BulletManager
from survivalrush.camera import Camera
from survivalrush.collider import Collider
from survivalrush.debug import DebugLayer
from survivalrush.input import InputState
from survivalrush.player import Player
from survivalrush.vector import Vector3


def make_player():
    return Player(50, 10, 0.1, 1, 10, Collider(0.5))


def make_camera():
    camera = Camera(5, 3)
    camera.transform.set_position(Vector3(0, 20, 0))
    camera.transform.set_rotation(Vector3(-90, 0, 0))
    camera.init(60, 800 / 600, 0.1, 100)
    camera.set_viewport(800, 600)
    return camera


def test_damage_until_dead():
    player = make_player()
    assert not player.dead()
    player.damage(player.max_health)
    assert player.dead()


def test_heal_is_capped():
    player = make_player()
    player.damage(10)
    player.heal(5)
    assert player.health == pytest.approx(player.max_health - 5)
    player.heal(1000)
    assert player.health == player.max_health


def test_reset_restores_state():
    player = make_player()
    player.damage(30)
    player.transform.set_position(Vector3(3, 0, 4))
    player.transform.rotate_on_y(45)
    player.velocity = Vector3(1, 0, 1)
    player.reset()
    assert player.health == player.max_health
    assert player.transform.position == Vector3()
    assert player.transform.rotation == Vector3()
    assert player.velocity == Vector3()


def test_primary_weapon_needs_recharge():
    player = make_player()
    state = InputState()
    state.left_mouse_down = True
    bullets = BulletManager()
    player.action_update(state, 1.0, bullets)
    assert len(bullets) == 0
    player.action_update(state, 1.0, bullets)
    assert len(bullets) == 1


def test_shotgun_slot_fires_three():
    player = make_player()
    state = InputState()
    state.key_down("3")
    bullets = BulletManager()
    player.action_update(state, 2.0, bullets)
    assert len(bullets) == 0
    state.left_mouse_down = True
    player.action_update(state, 2.0, bullets)
    assert len(bullets) == 3


def test_no_fire_without_mouse_button():
    player = make_player()
    state = InputState()
    bullets = BulletManager()
    for _ in range(3):
        player.action_update(state, 5.0, bullets)
    assert len(bullets) == 0


def test_turn_is_limited_per_frame():
    player = make_player()
    state = InputState()
    state.set_mouse_position(400, 100)
    player.motion_update(state, make_camera(), 0.001)
    assert abs(player.transform.rotation.y) <= 180.0 * 0.001 * player.rotation_speed + 1e-9


def test_turns_to_face_mouse_point():
    player = make_player()
    camera = make_camera()
    state = InputState()
    state.set_mouse_position(400, 100)
    hit = state.hit_on_xz(camera)
    aim = Vector3(hit.x, 0, hit.z).normalized()
    player.motion_update(state, camera, 1.0)
    assert player.transform.forward().dot(aim) > 0.999


def test_movement_follows_velocity_and_debug_markers():
    player = make_player()
    camera = make_camera()
    state = InputState()
    state.set_mouse_position(400, 100)
    state.key_down("w")
    debug = DebugLayer()
    player.motion_update(state, camera, 0.1, debug)
    pos = player.transform.position
    assert pos.x == pytest.approx(player.velocity.x)
    assert pos.z == pytest.approx(player.velocity.z)
    assert 0 < player.velocity.length() <= player.speed
    assert len(debug) == 4
    hit = state.hit_on_xz(camera)
    marker = debug.items[0].transform.position
    assert marker.x == pytest.approx(hit.x)
    assert marker.z == pytest.approx(hit.z)