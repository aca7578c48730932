import pytest

from survivalrush.transform import Transform
from survivalrush.vector import FORWARD, Vector3


def test_default_matrix_is_identity():
    identity = (1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0)
    assert Transform().matrix() == pytest.approx(identity)


def test_matrix_holds_translation_in_last_column():
    t = Transform()
    t.set_position(Vector3(4.0, 5.0, 6.0))
    assert t.matrix()[12:15] == pytest.approx((4.0, 5.0, 6.0))


def test_apply_origin_gives_position():
    t = Transform(position=Vector3(2.0, -1.0, 3.0), rotation=Vector3(10.0, 45.0, 0.0))
    assert tuple(t.apply(Vector3())) == pytest.approx((2.0, -1.0, 3.0))


def test_apply_respects_scale():
    t = Transform(rotation=Vector3(0.0, 33.0, 0.0))
    t.set_scale(Vector3(3.0, 3.0, 3.0))
    assert t.apply(Vector3(1.0, 0.0, 0.0)).length() == pytest.approx(3.0)


def test_move_accumulates():
    t = Transform()
    t.move(Vector3(1.0, 0.0, 0.0))
    t.move(Vector3(1.0, 0.0, 2.0))
    assert t.position == Vector3(2.0, 0.0, 2.0)


def test_rotate_on_y_accumulates():
    t = Transform()
    t.rotate_on_y(30.0)
    t.rotate_on_y(15.0)
    assert t.rotation.y == pytest.approx(45.0)


def test_forward_default_is_world_forward():
    assert tuple(Transform().forward()) == pytest.approx(tuple(FORWARD))


@pytest.mark.parametrize("yaw", [0.0, 30.0, 90.0, 200.0])
def test_forward_and_right_are_perpendicular_units(yaw):
    t = Transform(rotation=Vector3(0.0, yaw, 0.0))
    assert t.forward().length() == pytest.approx(1.0)
    assert t.right().length() == pytest.approx(1.0)
    assert t.forward().dot(t.right()) == pytest.approx(0.0, abs=1e-4)


def test_right_default_is_negative_x():
    assert tuple(Transform().right()) == pytest.approx((-1.0, 0.0, 0.0))


def test_set_rotation_replaces():
    t = Transform()
    t.rotate_on_y(50.0)
    t.set_rotation(Vector3())
    assert t.rotation == Vector3()