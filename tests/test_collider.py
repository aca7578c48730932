import pytest

from survivalrush.collider import Collider
from survivalrush.color import CYAN
from survivalrush.debug import DebugLayer
from survivalrush.geometry import GeoType
from survivalrush.vector import Vector3


def test_radius_scales_linearly():
    collider = Collider(0.5)
    assert collider.radius_for(1.0) == 0.5
    assert collider.radius_for(4.0) == pytest.approx(4.0 * collider.radius_for(1.0))


def test_draw_debug_adds_cyan_outline():
    debug = DebugLayer()
    center = Vector3(1.0, 0.0, 2.0)
    outline = Collider(0.25).draw_debug(debug, center, Vector3(1.0, 1.0, 1.0))
    assert list(debug) == [outline]
    assert outline.geometry.geo_type is GeoType.CIRCLE_BOUNDS
    assert outline.geometry.color == CYAN
    assert outline.transform.position == center


def test_draw_debug_outline_matches_diameter():
    debug = DebugLayer()
    scale = Vector3(2.0, 2.0, 2.0)
    collider = Collider(0.25)
    outline = collider.draw_debug(debug, Vector3(), scale)
    assert outline.transform.scale == scale * (collider.radius * 2)
    rim = outline.geometry.world_vertices(outline.transform)
    for point in rim:
        assert point.length() == pytest.approx(collider.radius_for(scale.x))