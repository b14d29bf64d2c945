"""Window, input handling and drawing for the pong game."""

from __future__ import annotations

import argparse
import functools
import sys

import pygame

from glarcade.geometry import Vec2
from glarcade.pong.game import PongGame
from glarcade.pong.gamedata import State

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
TITLE = "Pong"
FONT_SIZE = 30
FRAME_RATE = 60
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)

_KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


def _to_pixels(point: Vec2, width: int, height: int) -> tuple[float, float]:
    return ((point.x + 1.0) * 0.5 * width, (1.0 - point.y) * 0.5 * height)


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _fill_polygon(surface: pygame.Surface, points: list[Vec2]) -> None:
    width, height = surface.get_size()
    pygame.draw.polygon(surface, _WHITE, [_to_pixels(p, width, height) for p in points])


def render(surface: pygame.Surface, game: PongGame) -> None:
    """Draw one frame of ``game`` onto ``surface``."""
    surface.fill(_BLACK)
    if game.game_data.state is State.PLAYING:
        _fill_polygon(surface, game.bar_left.corners())
        _fill_polygon(surface, game.bar_right.corners())
        for wall in game.scenery.walls():
            _fill_polygon(surface, wall)
    _fill_polygon(surface, game.ball.outline())

    text = game.message()
    if text:
        image = _font(FONT_SIZE).render(text, True, _WHITE)
        width, height = surface.get_size()
        surface.blit(image, image.get_rect(center=(width // 2, height // 2)))


def _handle_event(game: PongGame, event: pygame.event.Event) -> bool:
    """Apply one event to the game; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        game.handle_key(_KEY_NAMES.get(event.key), event.type == pygame.KEYDOWN)
    elif event.type == pygame.VIDEORESIZE:
        game.resize(event.w, event.h)
    return True


def _run(width: int, height: int) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = PongGame()
        game.resize(width, height)

        running = True
        while running:
            for event in pygame.event.get():
                if not _handle_event(game, event):
                    running = False
                    break
            delta_time = clock.tick(FRAME_RATE) / 1000.0
            game.update(delta_time)
            render(screen, game)
            pygame.display.flip()
    finally:
        _font.cache_clear()
        pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Open the pong window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="pong", description="Play pong for two.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    args = parser.parse_args(argv)
    try:
        return _run(args.width, args.height)
    except pygame.error as error:
        print(error, file=sys.stderr)
        return -1


if __name__ == "__main__":
    raise SystemExit(main())