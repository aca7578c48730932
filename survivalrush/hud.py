"""On-screen text: score and health."""

from __future__ import annotations

from .color import WHITE


def score_text(score: float) -> str:
    """Survival time as minutes and seconds."""
    total = int(score)
    minutes = int(total / 60)
    seconds = total - minutes * 60
    return "Score: %02dm %02ds" % (minutes, seconds)


def health_text(health: float, max_health: float) -> str:
    return "Health: %.0f/%.0f" % (health, max_health)


def draw_text(surface, font, text: str, x: float, y: float):
    """Draw white text with its baseline ``y`` pixels above the bottom edge.

    Returns the rectangle that was drawn to.
    """
    image = font.render(text, True, WHITE.to_rgb255())
    top = surface.get_height() - y - font.get_ascent()
    return surface.blit(image, (round(x), round(top)))