"""Tile level, rigid bodies and separating-axis collision handling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from advent.body import BoxBody
from advent.geometry import dot_product, vector_length
from advent.palette import GROUND_COLOR, VALID_COLORS, random_float, random_int
from advent.vector import Vec2

LEVEL_WIDTH = 20
LEVEL_HEIGHT = 15
BLOCK_SIZE = 64

LEVEL = (
    "...................."
    "...................."
    ".######............."
    ".....###............"
    "......###..........."
    ".......###.........."
    "........###...##...."
    "...............#...."
    "...........##..#...."
    "..........##..##...."
    ".........##..###...."
    ".......####........."
    "..........######...."
    "####################"
    "####################"
)

GRAVITY = Vec2(0.0, 9.81 * 40.0)
SUB_STEPS = 30
RESTITUTION = 0.01

_PLAYER_COLUMN = 0
_PLAYER_ROW = 11
_UP_AXIS = Vec2(0.0, 1.0)


@dataclass(frozen=True)
class Collision:
    """Unit normal pointing from the first body to the second, and overlap depth."""

    normal: Vec2
    depth: float


def project_vertices(vertices: Iterable[Vec2], axis: Vec2) -> tuple[float, float]:
    """Return the (min, max) projection of ``vertices`` onto ``axis``."""
    projections = [dot_product(vertex, axis) for vertex in vertices]
    return min(projections), max(projections)


def _bounds_separated(vertices_a: Sequence[Vec2], vertices_b: Sequence[Vec2]) -> bool:
    min_ax = min(v.x for v in vertices_a)
    max_ax = max(v.x for v in vertices_a)
    min_bx = min(v.x for v in vertices_b)
    max_bx = max(v.x for v in vertices_b)
    if min_ax >= max_bx or min_bx >= max_ax:
        return True
    min_ay = min(v.y for v in vertices_a)
    max_ay = max(v.y for v in vertices_a)
    min_by = min(v.y for v in vertices_b)
    max_by = max(v.y for v in vertices_b)
    return min_ay >= max_by or min_by >= max_ay


def _edge_normals(vertices: Sequence[Vec2]) -> Iterable[Vec2]:
    for start, end in zip(vertices, (*vertices[1:], vertices[0])):
        diff = end - start
        yield Vec2(-diff.y, diff.x)


def intersect_polygons(
    vertices_a: Sequence[Vec2],
    vertices_b: Sequence[Vec2],
    center_a: Vec2,
    center_b: Vec2,
) -> Collision | None:
    """Test two convex polygons for overlap; return the collision or ``None``."""
    # Touching or separated bounding boxes mean the convex shapes cannot overlap.
    if _bounds_separated(vertices_a, vertices_b):
        return None

    normal = Vec2(0.0, 0.0)
    depth = math.inf
    for axis in (*_edge_normals(vertices_a), *_edge_normals(vertices_b)):
        min_a, max_a = project_vertices(vertices_a, axis)
        min_b, max_b = project_vertices(vertices_b, axis)
        if min_a >= max_b or min_b >= max_a:
            return None
        axis_depth = min(max_b - min_a, max_a - min_b)
        if axis_depth < depth:
            depth = axis_depth
            normal = axis

    magnitude = vector_length(normal)
    unit = normal / magnitude
    if dot_product(center_b - center_a, unit) < 0.0:
        unit = -unit
    return Collision(unit, depth / magnitude)


def _land_if_on_ground(body: BoxBody, normal: Vec2) -> None:
    alignment = abs(dot_product(normal, _UP_AXIS))
    if 0.97 < alignment < 1.01:
        velocity = body.linear_velocity
        if velocity.y >= 0.0:
            body.touch_ground = True
            body.linear_velocity = Vec2(velocity.x, 0.0)


class World:
    """The level: a player body followed by one static block per '#' tile."""

    def __init__(self) -> None:
        self.gravity = GRAVITY
        self.level = LEVEL
        self.level_width = LEVEL_WIDTH
        self.level_height = LEVEL_HEIGHT
        self.block_size = BLOCK_SIZE

        half = BLOCK_SIZE // 2
        size = float(BLOCK_SIZE)
        self.bodies: list[BoxBody] = [
            BoxBody(
                float(_PLAYER_COLUMN * BLOCK_SIZE + half),
                float(_PLAYER_ROW * BLOCK_SIZE + half),
                0.0,
                size,
                size,
                VALID_COLORS[2],
            )
        ]
        for row in range(LEVEL_HEIGHT):
            tiles = LEVEL[row * LEVEL_WIDTH:(row + 1) * LEVEL_WIDTH]
            for column, tile in enumerate(tiles):
                if tile == "#":
                    self.bodies.append(
                        BoxBody(
                            float(column * BLOCK_SIZE + half),
                            float(row * BLOCK_SIZE + half),
                            0.0,
                            size,
                            size,
                            GROUND_COLOR,
                            True,
                        )
                    )

    @property
    def player(self) -> BoxBody:
        return self.bodies[0]

    def add_body(self, position: Iterable[float]) -> BoxBody:
        """Add a square dynamic body of random size and colour at ``position``."""
        x, y = position
        size = random_float(30.0, 50.0)
        color = VALID_COLORS[random_int(0, len(VALID_COLORS))]
        body = BoxBody(float(x), float(y), 0.0, size, size, color)
        self.bodies.append(body)
        return body

    def remove_body(self, index: int) -> BoxBody:
        """Remove and return the body at ``index``; raise IndexError if absent."""
        if not 0 <= index < len(self.bodies):
            raise IndexError(f"no body at index {index}")
        return self.bodies.pop(index)

    def handle_collision(self) -> None:
        """Push overlapping bodies apart and exchange impulses."""
        dynamic = [body for body in self.bodies if not body.is_static]
        for body_a in self.bodies:
            body_a.update_vertices()
            others = dynamic if body_a.is_static else self.bodies
            for body_b in others:
                if body_a is body_b:
                    continue
                body_b.update_vertices()
                hit = intersect_polygons(
                    body_a.vertices, body_b.vertices, body_a.position, body_b.position
                )
                if hit is None:
                    continue
                normal, depth = hit.normal, hit.depth
                if body_a.is_static:
                    body_b.move(normal * depth)
                    _land_if_on_ground(body_b, normal)
                elif body_b.is_static:
                    body_a.move(normal * -depth)
                    _land_if_on_ground(body_a, normal)
                else:
                    body_a.move(normal * (depth / 2.0) * -1.0)
                    body_b.move(normal * (depth / 2.0))
                body_a.update_vertices()
                body_b.update_vertices()
                self.resolve_collision(body_a, body_b, normal, depth)

    def resolve_collision(
        self, body_a: BoxBody, body_b: BoxBody, normal: Vec2, depth: float
    ) -> None:
        """Apply an impulse along ``normal`` if the bodies are approaching."""
        relative = body_b.linear_velocity - body_a.linear_velocity
        approach = dot_product(relative, normal)
        if approach > 0.0:
            return
        impulse = -(1.0 + RESTITUTION) * approach
        impulse /= body_a.inv_mass + body_b.inv_mass
        body_a.linear_velocity = body_a.linear_velocity - normal * (impulse * body_a.inv_mass)
        body_b.linear_velocity = body_b.linear_velocity + normal * (impulse * body_b.inv_mass)

    def step(self, time: float) -> None:
        """Advance the simulation by ``time`` seconds in fixed sub-steps."""
        for _ in range(SUB_STEPS):
            for body in self.bodies:
                body.step(time, self.gravity, SUB_STEPS)
            self.handle_collision()