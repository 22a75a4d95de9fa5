"""Keyboard-driven movement of the player body."""

from __future__ import annotations

from advent.body import BoxBody
from advent.vector import Vec2

JUMP_VELOCITY = Vec2(0.0, -340.0)
AIR_CONTROL = 0.7


class Controller:
    """Moves a body left, right or up according to the pressed keys."""

    def __init__(self, player: BoxBody, speed: float) -> None:
        self.player = player
        self.speed = speed

    def _walk(self, direction: Vec2, time: float) -> None:
        factor = 1.0 if self.player.touch_ground else AIR_CONTROL
        self.player.move(direction * self.speed * factor * time)
        self.player.touch_ground = False

    def move_player(
        self, time: float, jump: bool = False, right: bool = False, left: bool = False
    ) -> None:
        """Apply one frame of input lasting ``time`` seconds."""
        player = self.player
        if jump and player.touch_ground:
            velocity = Vec2(player.linear_velocity.x, 0.0)
            player.linear_velocity = velocity + JUMP_VELOCITY
            player.touch_ground = False
        if right:
            self._walk(Vec2(1.0, 0.0), time)
        if left:
            self._walk(Vec2(-1.0, 0.0), time)