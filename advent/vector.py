"""Immutable two-dimensional vector type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec2:
    """A 2D vector of floats.

    Adding or subtracting a plain number applies it to both components.
    """

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, scalar: Number) -> Vec2:
        if isinstance(scalar, (int, float)):
            return Vec2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __rmul__(self, scalar: Number) -> Vec2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Number) -> Vec2:
        if isinstance(scalar, (int, float)):
            return Vec2(self.x / scalar, self.y / scalar)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)