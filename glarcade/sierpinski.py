"""Sierpinski triangle drawn point by point with the chaos game."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable

import pygame

from glarcade.geometry import Vec2

VERTICES: tuple[Vec2, ...] = (Vec2(0.0, 1.0), Vec2(-1.0, -1.0), Vec2(1.0, -1.0))

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
TITLE = "Sierpinski Triangle"
POINT_SIZE = 2
FRAME_RATE = 60
BUTTON_RECT = (5, 5 + 50 + 16 + 5, 150, 30)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_BUTTON_COLOR = (66, 150, 250)


class ChaosGame:
    """A point that jumps halfway towards a randomly chosen triangle vertex."""

    def __init__(self, rng: random.Random | None = None, start: Vec2 | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.vertices = VERTICES
        if start is None:
            start = Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
        self.position = start

    def step(self) -> Vec2:
        """Move to the midpoint towards a random vertex and return the new position."""
        vertex = self.rng.choice(self.vertices)
        self.position = (self.position + vertex) / 2.0
        return self.position

    def points(self, count: int) -> list[Vec2]:
        """The next ``count`` positions of the walk."""
        if count < 0:
            raise ValueError("count must not be negative")
        return [self.step() for _ in range(count)]


def to_screen(point: Iterable[float], width: int, height: int) -> tuple[int, int]:
    """Pixel of a point given in [-1, 1] coordinates, y pointing up."""
    x, y = point
    return (
        round((x + 1.0) * 0.5 * (width - 1)),
        round((1.0 - y) * 0.5 * (height - 1)),
    )


def _run(width: int, height: int, per_frame: int) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        canvas = pygame.Surface((width, height))
        canvas.fill(_BLACK)
        font = pygame.font.Font(None, 22)
        button = pygame.Rect(BUTTON_RECT)
        label = font.render("Clear window", True, _WHITE)
        clock = pygame.time.Clock()
        game = ChaosGame()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and button.collidepoint(event.pos)
                ):
                    canvas.fill(_BLACK)
            for _ in range(per_frame):
                x, y = to_screen(game.position, width, height)
                canvas.fill(_WHITE, pygame.Rect(x, y, POINT_SIZE, POINT_SIZE))
                game.step()
            screen.blit(canvas, (0, 0))
            pygame.draw.rect(screen, _BUTTON_COLOR, button)
            screen.blit(label, label.get_rect(center=button.center))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Open a window and draw the Sierpinski triangle until it is closed."""
    parser = argparse.ArgumentParser(prog="sierpinski", description=TITLE)
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument(
        "--points-per-frame", type=int, default=1, help="points drawn each frame"
    )
    args = parser.parse_args(argv)
    if args.points_per_frame < 1:
        parser.error("--points-per-frame must be at least 1")
    try:
        return _run(args.width, args.height, args.points_per_frame)
    except pygame.error as error:
        print(error, file=sys.stderr)
        return -1


if __name__ == "__main__":
    raise SystemExit(main())