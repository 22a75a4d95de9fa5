"""Axis-aligned-at-rest rectangular rigid body."""

from __future__ import annotations

from advent.geometry import transform
from advent.palette import AIRBORNE_COLOR, GROUNDED_COLOR, Color
from advent.transform import Transform2D
from advent.vector import Vec2

_DEFAULT_MASS = 50.0


class BoxBody:
    """A rectangle with position, rotation and linear velocity.

    Transformed vertices are cached; they are refreshed by
    :meth:`update_vertices` after the body has moved or rotated.
    """

    def __init__(
        self,
        x: float,
        y: float,
        rotation: float,
        width: float,
        height: float,
        color: Color,
        is_static: bool = False,
    ) -> None:
        self._position = Vec2(x, y)
        self._rotation = rotation
        self.width = width
        self.height = height
        self.is_static = is_static
        self.color = color
        self.linear_velocity = Vec2(0.0, 0.0)
        self.force = Vec2(0.0, 0.0)
        self.inv_mass = 0.0 if is_static else 1.0 / _DEFAULT_MASS
        self.restitution = 1.0
        self.touch_ground = False

        left = -width / 2.0
        right = left + width
        top = -height / 2.0
        bottom = top + height
        self._local_vertices = (
            Vec2(left, top),
            Vec2(right, top),
            Vec2(right, bottom),
            Vec2(left, bottom),
        )
        self._vertices = self._local_vertices
        self._update_required = True
        self.update_vertices()

    @property
    def position(self) -> Vec2:
        return self._position

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def vertices(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """World-space corners as of the last :meth:`update_vertices`."""
        return self._vertices

    def update_vertices(self) -> None:
        """Recompute world-space corners if the body moved since last time."""
        if not self._update_required:
            return
        current = Transform2D.from_position(self._position, self._rotation)
        self._vertices = tuple(transform(v, current) for v in self._local_vertices)
        self._update_required = False

    def move(self, offset: Vec2) -> None:
        self._position = self._position + offset
        self._update_required = True

    def move_to(self, position: Vec2) -> None:
        self._position = position
        self._update_required = True

    def rotate(self, angle: float) -> None:
        self._rotation += angle
        self._update_required = True

    def rotate_to(self, angle: float) -> None:
        self._rotation = angle
        self._update_required = True

    def add_force(self, force: Vec2) -> None:
        self.force = self.force + force

    def step(self, time: float, gravity: Vec2, iterations: int) -> None:
        """Advance one sub-step of ``time / iterations`` under gravity."""
        if self.is_static:
            return
        self.color = GROUNDED_COLOR if self.touch_ground else AIRBORNE_COLOR
        dt = time / iterations
        self.linear_velocity = self.linear_velocity + gravity * dt
        self._position = self._position + self.linear_velocity * dt
        self._update_required = True
        self.force = Vec2(0.0, 0.0)