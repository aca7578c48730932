"""Flat shapes drawn on the XZ plane and the characters made of them."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

from .color import WHITE, Color
from .transform import Transform
from .vector import UP, Vector3

Projector = Callable[[Vector3], Optional[tuple[float, float]]]

_CIRCLE_STEPS = 64
_TWO_PI = 2 * 3.14159
_PLANE_COLOR = Color(0.6, 0.8, 0.6)


class GeoType(enum.Enum):
    TRIANGLE = enum.auto()
    CIRCLE = enum.auto()
    SQUARE = enum.auto()
    CIRCLE_BOUNDS = enum.auto()


def _circle_points(half_size: float, count: int) -> list[Vector3]:
    return [
        Vector3(
            math.cos(i / _CIRCLE_STEPS * _TWO_PI) * half_size,
            0.0,
            math.sin(i / _CIRCLE_STEPS * _TWO_PI) * half_size,
        )
        for i in range(count)
    ]


def _draw_outline(surface, project: Projector, points: list[Vector3], color: Color, filled: bool) -> None:
    screen = [project(p) for p in points]
    if any(s is None for s in screen) or len(screen) < 3:
        return
    if filled:
        pygame.draw.polygon(surface, color.to_rgb255(), screen)
    else:
        pygame.draw.lines(surface, color.to_rgb255(), True, screen, 2)


@dataclass
class SimpleGeo:
    """A single flat shape of a given colour and size."""

    geo_type: GeoType
    color: Color = WHITE
    size: float = 1.0

    def local_vertices(self) -> list[Vector3]:
        """Outline vertices in local space, lying on the XZ plane."""
        half = self.size / 2.0
        if self.geo_type is GeoType.TRIANGLE:
            return [Vector3(0.0, 0.0, half), Vector3(-half, 0.0, -half), Vector3(half, 0.0, -half)]
        if self.geo_type is GeoType.SQUARE:
            return [
                Vector3(half, 0.0, half),
                Vector3(half, 0.0, -half),
                Vector3(-half, 0.0, -half),
                Vector3(-half, 0.0, half),
            ]
        if self.geo_type is GeoType.CIRCLE:
            return _circle_points(half, _CIRCLE_STEPS + 1)
        return _circle_points(half, _CIRCLE_STEPS)

    def world_vertices(self, transform: Transform) -> list[Vector3]:
        return [transform.apply(v) for v in self.local_vertices()]

    def draw(self, surface, project: Projector, transform: Transform) -> None:
        """Draw the shape; ``project`` maps world points to screen points."""
        _draw_outline(
            surface,
            project,
            self.world_vertices(transform),
            self.color,
            filled=self.geo_type is not GeoType.CIRCLE_BOUNDS,
        )


@dataclass
class SimpleCharacter:
    """A shape placed in the world."""

    geometry: SimpleGeo
    transform: Transform = field(default_factory=Transform)

    def draw(self, surface, project: Projector) -> None:
        self.geometry.draw(surface, project, self.transform)

    def set_color(self, color: Color) -> None:
        self.geometry.color = color


@dataclass
class Plane:
    """A square ground plane centred on the origin at height zero."""

    size: float
    normal: Vector3 = UP

    @property
    def half_size(self) -> float:
        return self.size / 2.0

    def vertices(self) -> list[Vector3]:
        h = self.half_size
        return [
            Vector3(-h, 0.0, -h),
            Vector3(h, 0.0, -h),
            Vector3(h, 0.0, h),
            Vector3(-h, 0.0, h),
        ]

    def draw(self, surface, project: Projector) -> None:
        _draw_outline(surface, project, self.vertices(), _PLANE_COLOR, filled=True)