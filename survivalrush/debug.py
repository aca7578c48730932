"""Per-frame collection of debug shapes."""

from __future__ import annotations

from typing import Iterator

from .geometry import Projector, SimpleCharacter


class DebugLayer:
    """Shapes gathered during a frame and drawn on top when debugging is on."""

    def __init__(self) -> None:
        self.items: list[SimpleCharacter] = []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[SimpleCharacter]:
        return iter(self.items)

    def add(self, item: SimpleCharacter) -> None:
        self.items.append(item)

    def draw(self, surface, project: Projector) -> None:
        for item in self.items:
            item.draw(surface, project)

    def cleanup(self) -> None:
        """Forget every shape gathered so far."""
        self.items.clear()