"""Circular colliders."""

from __future__ import annotations

from dataclasses import dataclass

from .color import CYAN
from .debug import DebugLayer
from .geometry import GeoType, SimpleCharacter, SimpleGeo
from .vector import Vector3


@dataclass
class Collider:
    """A circle of a base radius that grows with the owner's scale."""

    radius: float

    def radius_for(self, scale: float) -> float:
        return self.radius * scale

    def draw_debug(self, debug: DebugLayer, center: Vector3, scale: Vector3) -> SimpleCharacter:
        """Add an outline of the collider to the debug layer and return it."""
        outline = SimpleCharacter(SimpleGeo(GeoType.CIRCLE_BOUNDS, CYAN, 1.0))
        outline.transform.set_position(center)
        outline.transform.set_scale(scale * (self.radius * 2))
        debug.add(outline)
        return outline