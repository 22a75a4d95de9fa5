"""Rigid 2D transform: a translation plus a precomputed rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from advent.vector import Vec2


@dataclass(frozen=True, slots=True)
class Transform2D:
    """Translation (x, y) and rotation stored as its cosine and sine."""

    x: float
    y: float
    cos: float
    sin: float

    @classmethod
    def from_angle(cls, x: float, y: float, angle: float) -> Transform2D:
        """Build a transform from a translation and an angle in radians."""
        return cls(x, y, math.cos(angle), math.sin(angle))

    @classmethod
    def from_position(cls, position: Vec2, angle: float) -> Transform2D:
        """Build a transform from a position vector and an angle in radians."""
        return cls.from_angle(position.x, position.y, angle)