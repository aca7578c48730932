from dataclasses import dataclass, field

import pytest

from survivalrush.bullet import Bullet
from survivalrush.collider import Collider
from survivalrush.color import YELLOW
from survivalrush.debug import DebugLayer
from survivalrush.enemy import EnemyManager
from survivalrush.geometry import GeoType, SimpleGeo
from survivalrush.transform import Transform
from survivalrush.vector import Vector3


@dataclass
class FakePlayer:
    transform: Transform = field(default_factory=Transform)
    collider: Collider = field(default_factory=lambda: Collider(0.5))
    health: float = 50.0

    def damage(self, amount):
        self.health -= amount


class FakeCollectibles:
    def __init__(self):
        self.positions = []

    def create_collectible(self, position):
        self.positions.append(position)


def _bullet_at(position):
    template = Bullet(SimpleGeo(GeoType.CIRCLE, YELLOW, 0.5), 30, 5, 20, Collider(0.25))
    return template.clone(Vector3(1, 0, 0), position)


def test_damage_and_death():
    manager = EnemyManager()
    enemy = manager.create_enemy(Vector3())
    start = enemy.health
    enemy.damage(10)
    assert enemy.health == start - 10
    assert not enemy.dead()
    enemy.damage(enemy.health)
    assert enemy.dead()


def test_clone_is_independent():
    enemy = EnemyManager().create_enemy(Vector3(1, 0, 1))
    copy = enemy.clone()
    copy.transform.move(Vector3(5, 0, 0))
    copy.damage(1)
    assert enemy.transform.position == Vector3(1, 0, 1)
    assert copy.health == enemy.health - 1


def test_move_heads_towards_target_and_faces_it():
    manager = EnemyManager()
    enemy = manager.create_enemy(Vector3())
    debug = DebugLayer()
    enemy.move(Vector3(10, 0, 0), manager.enemies, 0.1, debug)
    assert enemy.transform.position.x > 0
    assert enemy.transform.position.z == pytest.approx(0.0, abs=1e-9)
    assert enemy.velocity.length() <= enemy.speed + 1e-9
    facing = enemy.transform.forward()
    heading = enemy.velocity.normalized()
    assert (facing.x, facing.z) == pytest.approx((heading.x, heading.z), abs=1e-4)
    assert len(debug) == 1


def test_overlapping_enemies_push_apart():
    manager = EnemyManager()
    first = manager.create_enemy(Vector3(0, 0, 0))
    second = manager.create_enemy(Vector3(0.5, 0, 0))
    first.move(Vector3(0, 0, 100), manager.enemies, 0.1)
    assert first.velocity.x < 0
    assert second.velocity.x > 0


def test_no_spawn_before_time():
    manager = EnemyManager()
    manager.update(FakePlayer(), manager.spawn_new_enemy_time / 2)
    assert len(manager) == 0


def test_spawn_distance_and_quickening():
    manager = EnemyManager()
    initial = manager.spawn_new_enemy_time
    manager.timer = initial
    player = FakePlayer()
    manager.update(player, 0.0)
    assert len(manager) == 1
    distance = (manager.enemies[0].transform.position - player.transform.position).length()
    assert 10 <= distance <= 15
    assert manager.spawn_new_enemy_time == pytest.approx(initial - manager.time_decrease_per_spawn)
    assert manager.timer == 0.0


def test_spawn_time_does_not_drop_below_minimum():
    manager = EnemyManager(spawn_new_enemy_time=0.1, spawn_min_time=0.1)
    manager.timer = 0.1
    manager.update(FakePlayer(), 0.0)
    assert manager.spawn_new_enemy_time == pytest.approx(manager.spawn_min_time)


def test_contact_hurts_player_and_removes_enemy():
    manager = EnemyManager()
    player = FakePlayer()
    enemy = manager.create_enemy(Vector3(0.2, 0, 0))
    start = player.health
    manager.update(player, 0.01)
    assert player.health == start - enemy.contact_damage
    assert len(manager) == 0


def test_check_hits_damages_enemy():
    manager = EnemyManager()
    enemy = manager.create_enemy(Vector3(5, 0, 0))
    start = enemy.health
    bullet = _bullet_at(Vector3(5, 0, 0))
    assert manager.check_hits(bullet, FakeCollectibles()) is True
    assert enemy.health == start - bullet.damage


def test_check_hits_kill_drops_collectible():
    manager = EnemyManager()
    enemy = manager.create_enemy(Vector3(5, 0, 0))
    enemy.health = 1
    collectibles = FakeCollectibles()
    assert manager.check_hits(_bullet_at(Vector3(5, 0, 0)), collectibles)
    assert collectibles.positions == [Vector3(5, 0, 0)]


def test_check_hits_miss():
    manager = EnemyManager()
    manager.create_enemy(Vector3(5, 0, 0))
    assert manager.check_hits(_bullet_at(Vector3(-5, 0, 0)), FakeCollectibles()) is False


def test_reset_clears_enemies_and_timer():
    manager = EnemyManager()
    manager.create_enemy(Vector3())
    manager.timer = 2.0
    manager.reset()
    assert len(manager) == 0
    assert manager.timer == 0.0