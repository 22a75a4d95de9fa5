"""Vector helpers used by the collision code."""

from __future__ import annotations

import math

from advent.transform import Transform2D
from advent.vector import Vec2

_MIN_LENGTH = 0.0001


def transform(pos: Vec2, trans: Transform2D) -> Vec2:
    """Rotate ``pos`` about the origin, then translate it."""
    rx = pos.x * trans.cos - pos.y * trans.sin
    ry = pos.x * trans.sin + pos.y * trans.cos
    return Vec2(rx + trans.x, ry + trans.y)


def dot_product(vec_a: Vec2, vec_b: Vec2) -> float:
    """Return the dot product of two vectors."""
    return vec_a.x * vec_b.x + vec_a.y * vec_b.y


def vector_length(vec: Vec2) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(dot_product(vec, vec))


def unit_vector(vec: Vec2) -> Vec2:
    """Return ``vec`` scaled to length one; near-zero vectors come back unchanged."""
    length = vector_length(vec)
    if length < _MIN_LENGTH:
        return Vec2(vec.x, vec.y)
    return Vec2(vec.x / length, vec.y / length)