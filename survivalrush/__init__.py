"""A top-down arena survival game drawn with pygame."""

__version__ = "0.1.0"
__all__ = [
    "bullet",
    "camera",
    "clock",
    "collectible",
    "collider",
    "color",
    "debug",
    "enemy",
    "game",
    "geometry",
    "hud",
    "input",
    "player",
    "transform",
    "vector",
    "weapon",
]