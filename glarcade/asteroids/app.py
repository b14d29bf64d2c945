"""Window, input handling and drawing for the asteroids game."""

from __future__ import annotations

import argparse
import functools
import sys

import pygame

from glarcade.asteroids.game import AsteroidsGame
from glarcade.asteroids.gamedata import Input, State
from glarcade.geometry import Vec2

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
TITLE = "Asteroids"
FONT_SIZE = 60
FRAME_RATE = 60
_WRAP_OFFSETS = (-2, 0, 2)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_TRAIL_ALPHA = 128

_KEY_INPUTS = {
    pygame.K_SPACE: Input.FIRE,
    pygame.K_UP: Input.UP,
    pygame.K_w: Input.UP,
    pygame.K_DOWN: Input.DOWN,
    pygame.K_s: Input.DOWN,
    pygame.K_LEFT: Input.LEFT,
    pygame.K_a: Input.LEFT,
    pygame.K_RIGHT: Input.RIGHT,
    pygame.K_d: Input.RIGHT,
}

_MOUSE_INPUTS = {
    1: Input.FIRE,
    3: Input.UP,
}


def key_to_input(key: int) -> Input | None:
    """The game input bound to a pygame key code, or None if it is unbound."""
    return _KEY_INPUTS.get(key)


def _to_pixels(point: Vec2, width: int, height: int) -> tuple[float, float]:
    return ((point.x + 1.0) * 0.5 * width, (1.0 - point.y) * 0.5 * height)


def _shade(color: tuple[float, ...]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(channel * 255))) for channel in color[:3])


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_stars(surface: pygame.Surface, game: AsteroidsGame) -> None:
    width, height = surface.get_size()
    for layer in game.star_layers.layers:
        size = max(1, round(layer.point_size))
        for star in layer.stars:
            shade = _shade((star.intensity,) * 3)
            for i in _WRAP_OFFSETS:
                for j in _WRAP_OFFSETS:
                    point = star.position + layer.translation + Vec2(j, i)
                    px, py = _to_pixels(point, width, height)
                    rect = pygame.Rect(0, 0, size, size)
                    rect.center = (round(px), round(py))
                    surface.fill(shade, rect, special_flags=pygame.BLEND_ADD)


def _draw_asteroids(surface: pygame.Surface, game: AsteroidsGame) -> None:
    width, height = surface.get_size()
    for asteroid in game.asteroids.asteroids:
        shade = _shade(asteroid.color)
        outline = asteroid.outline()
        for i in _WRAP_OFFSETS:
            for j in _WRAP_OFFSETS:
                offset = Vec2(j, i)
                points = [_to_pixels(p + offset, width, height) for p in outline]
                pygame.draw.polygon(surface, shade, points)


def _draw_bullets(surface: pygame.Surface, game: AsteroidsGame) -> None:
    width, height = surface.get_size()
    radius = max(1, round(game.bullets.scale * width * 0.5))
    for bullet in game.bullets.bullets:
        center = _to_pixels(bullet.translation, width, height)
        pygame.draw.circle(surface, _WHITE, center, radius)


def _draw_ship(surface: pygame.Surface, game: AsteroidsGame) -> None:
    ship = game.ship
    if game.game_data.state is not State.PLAYING:
        return
    width, height = surface.get_size()

    def place(point: Vec2) -> tuple[float, float]:
        world = point.rotated(ship.rotation) * ship.scale + ship.translation
        return _to_pixels(world, width, height)

    if ship.show_thruster(game.game_data):
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        for triangle in ship.triangles(with_trail=True):
            pygame.draw.polygon(
                overlay, (*_WHITE, _TRAIL_ALPHA), [place(p) for p in triangle]
            )
        surface.blit(overlay, (0, 0))

    shade = _shade(ship.color)
    for triangle in ship.triangles():
        pygame.draw.polygon(surface, shade, [place(p) for p in triangle])


def _draw_message(surface: pygame.Surface, game: AsteroidsGame) -> None:
    text = game.message()
    if not text:
        return
    image = _font(FONT_SIZE).render(text, True, _WHITE)
    width, height = surface.get_size()
    surface.blit(image, image.get_rect(center=(width // 2, height // 2)))


def render(surface: pygame.Surface, game: AsteroidsGame) -> None:
    """Draw one frame of ``game`` onto ``surface``."""
    surface.fill(_BLACK)
    _draw_stars(surface, game)
    _draw_asteroids(surface, game)
    _draw_bullets(surface, game)
    _draw_ship(surface, game)
    _draw_message(surface, game)


def _handle_event(game: AsteroidsGame, event: pygame.event.Event) -> bool:
    """Apply one event to the game; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = key_to_input(event.key)
        if key is not None:
            if event.type == pygame.KEYDOWN:
                game.press(key)
            else:
                game.release(key)
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        key = _MOUSE_INPUTS.get(event.button)
        if key is not None:
            if event.type == pygame.MOUSEBUTTONDOWN:
                game.press(key)
            else:
                game.release(key)
    elif event.type == pygame.MOUSEMOTION:
        game.aim(*event.pos)
    elif event.type == pygame.VIDEORESIZE:
        game.resize(event.w, event.h)
    return True


def _run(width: int, height: int) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = AsteroidsGame()
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
    """Open the asteroids window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="asteroids", description="Play asteroids.")
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