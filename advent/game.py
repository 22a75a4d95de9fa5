"""Game loop: input, simulation, drawing and the window."""

from __future__ import annotations

import argparse
import math
import time as _time
from typing import Sequence

import pygame

from advent.controller import Controller
from advent.world import World

WINDOW_SIZE = (1280, 960)
FRAME_RATE = 60
PLAYER_SPEED = 200.0
FONT_SIZE = 32
TEXT_COLOR = (255, 255, 255)
BACKGROUND = (0, 0, 0)


class Game:
    """Holds the world and the player controller, and times each step."""

    def __init__(self) -> None:
        self.world = World()
        self.controller = Controller(self.world.player, PLAYER_SPEED)
        self.duration = 0.0

    def run(
        self, time: float, jump: bool = False, right: bool = False, left: bool = False
    ) -> None:
        """Apply input, then advance the world by ``time`` seconds."""
        self.controller.move_player(time, jump=jump, right=right, left=left)
        start = _time.perf_counter()
        self.world.step(time)
        elapsed = _time.perf_counter() - start
        # Step time is reported in whole milliseconds, expressed in seconds.
        self.duration = math.floor(elapsed * 1000.0) / 1000.0

    def status_text(self) -> str:
        return f"Step : {self.duration:f}\n Total Objects {len(self.world.bodies)}"

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw every body and the status text onto ``surface``."""
        for body in self.world.bodies:
            body.update_vertices()
            points = [(vertex.x, vertex.y) for vertex in body.vertices]
            pygame.draw.polygon(surface, tuple(body.color), points)
        y = 0
        for line in self.status_text().split("\n"):
            rendered = font.render(line, True, TEXT_COLOR)
            surface.blit(rendered, (0, y))
            y += font.get_linesize()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="advent", description="Side-scrolling physics sandbox.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Advent")
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()
        game = Game()
        clock.tick(FRAME_RATE)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            screen.fill(BACKGROUND)
            elapsed = clock.tick(FRAME_RATE) / 1000.0
            keys = pygame.key.get_pressed()
            game.run(
                elapsed,
                jump=bool(keys[pygame.K_SPACE]),
                right=bool(keys[pygame.K_RIGHT]),
                left=bool(keys[pygame.K_LEFT]),
            )
            game.draw(screen, font)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0