"""Colours and random helpers used when populating the world."""

from __future__ import annotations

import random
from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


GLOBAL_PADDING = 20

GROUND_COLOR = Color(70, 63, 58)

VALID_COLORS: tuple[Color, ...] = (
    Color(52, 82, 74),
    Color(162, 232, 221),
    Color(184, 12, 9),
    Color(107, 43, 6),
    Color(229, 231, 230),
    Color(160, 113, 120),
    Color(119, 98, 116),
)

GROUNDED_COLOR = Color(119, 98, 116)
AIRBORNE_COLOR = Color(160, 113, 120)


def random_float(low: float, high: float) -> float:
    """Return a uniformly distributed float in ``[low, high)``."""
    return low + (high - low) * random.random()


def random_int(low: int, high: int) -> int:
    """Return a random float in ``[low, high)`` truncated towards zero."""
    return int(random_float(float(low), float(high)))