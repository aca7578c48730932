"""RGBA colours with components in the range 0..1."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A colour with float components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgb255(self) -> tuple[int, int, int]:
        """The colour as 8-bit red, green and blue values."""
        return tuple(  # type: ignore[return-value]
            max(0, min(255, round(component * 255))) for component in (self.r, self.g, self.b)
        )


RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0)
YELLOW = Color(1.0, 1.0, 0.0)
CYAN = Color(0.0, 1.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0)
ORANGE = Color(1.0, 0.5, 0.0)
PURPLE = Color(0.5, 0.0, 0.5)
WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)