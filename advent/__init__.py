"""A small 2D platformer: a tile level, box bodies with separating-axis
collisions, keyboard control and a pygame window."""

__version__ = "0.1.0"

__all__ = [
    "body",
    "controller",
    "game",
    "geometry",
    "palette",
    "transform",
    "vector",
    "world",
]