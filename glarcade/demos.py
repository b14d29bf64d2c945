"""Two small demo windows: a colour-interpolated triangle and a widget showcase."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import pygame

from glarcade.geometry import Vec2

Color = tuple[float, float, float]

DEFAULT_CLEAR_COLOR: tuple[float, float, float, float] = (0.906, 0.910, 0.918, 1.0)
COMBO_ITEMS: tuple[str, ...] = ("First item", "Second item", "Third item", "Fourth item")

HELLO_WIDTH = 600
HELLO_HEIGHT = 600
HELLO_TITLE = "Hello, World!"
FIRST_APP_WIDTH = 800
FIRST_APP_HEIGHT = 600
FIRST_APP_TITLE = "First App"
FRAME_RATE = 60

_EPSILON = 1e-9
_TEXT = (20, 20, 20)
_PANEL = (250, 250, 250)
_BUTTON = (66, 150, 250)
_WHITE = (255, 255, 255)


@dataclass(frozen=True)
class ColoredVertex:
    """A triangle corner with its RGB colour."""

    position: Vec2
    color: Color


def triangle_vertices() -> list[ColoredVertex]:
    """The red, magenta and green corners of the hello-world triangle."""
    return [
        ColoredVertex(Vec2(0.0, 0.5), (1.0, 0.0, 0.0)),
        ColoredVertex(Vec2(0.5, -0.5), (1.0, 0.0, 1.0)),
        ColoredVertex(Vec2(-0.5, -0.5), (0.0, 1.0, 0.0)),
    ]


def interpolate_color(
    vertices: Sequence[ColoredVertex], point: Iterable[float]
) -> Color | None:
    """Barycentric blend of the corner colours at ``point``.

    Returns None when the point lies outside the triangle. Raises ValueError
    unless exactly three vertices spanning a non-degenerate triangle are given.
    """
    if len(vertices) != 3:
        raise ValueError(f"expected 3 vertices, got {len(vertices)}")
    a, b, c = (vertex.position for vertex in vertices)
    px, py = point

    denominator = (b.y - c.y) * (a.x - c.x) + (c.x - b.x) * (a.y - c.y)
    if abs(denominator) < _EPSILON:
        raise ValueError("the vertices do not span a triangle")

    w1 = ((b.y - c.y) * (px - c.x) + (c.x - b.x) * (py - c.y)) / denominator
    w2 = ((c.y - a.y) * (px - c.x) + (a.x - c.x) * (py - c.y)) / denominator
    w3 = 1.0 - w1 - w2
    weights = (w1, w2, w3)
    if any(weight < -_EPSILON for weight in weights):
        return None

    return tuple(
        sum(weight * vertex.color[channel] for weight, vertex in zip(weights, vertices))
        for channel in range(3)
    )


@dataclass
class DemoSettings:
    """State of the demo widgets."""

    clear_color: tuple[float, float, float, float] = DEFAULT_CLEAR_COLOR
    combo_items: tuple[str, ...] = COMBO_ITEMS
    current_index: int = 0
    slider: float = 0.0
    option_enabled: bool = True
    show_another_window: bool = False
    show_compliment: bool = False
    presses: list[str] = field(default_factory=list)

    def status_line(self, width: int, height: int) -> str:
        """The text reporting the window size."""
        return f"Current window size: {width}x{height} (in windowed mode)"

    def select(self, index: int) -> str:
        """Choose a combo box entry and return its label."""
        if not 0 <= index < len(self.combo_items):
            raise IndexError(f"no combo item at index {index}")
        self.current_index = index
        return self.combo_items[index]


def _to_pixel_color(color: Iterable[float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(channel * 255))) for channel in list(color)[:3])


def _triangle_surface(width: int, height: int) -> pygame.Surface:
    vertices = triangle_vertices()
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    xs = [v.position.x for v in vertices]
    ys = [v.position.y for v in vertices]
    left = max(0, int((min(xs) + 1.0) * 0.5 * width) - 1)
    right = min(width, int((max(xs) + 1.0) * 0.5 * width) + 2)
    top = max(0, int((1.0 - max(ys)) * 0.5 * height) - 1)
    bottom = min(height, int((1.0 - min(ys)) * 0.5 * height) + 2)
    for py in range(top, bottom):
        y = 1.0 - (py + 0.5) / height * 2.0
        for px in range(left, right):
            x = (px + 0.5) / width * 2.0 - 1.0
            color = interpolate_color(vertices, (x, y))
            if color is not None:
                surface.set_at((px, py), (*_to_pixel_color(color), 255))
    return surface


def _draw_lines(
    surface: pygame.Surface, font: pygame.font.Font, lines: Iterable[str], origin: tuple[int, int]
) -> None:
    x, y = origin
    for line in lines:
        image = font.render(line, True, _TEXT)
        surface.blit(image, (x, y))
        y += image.get_height() + 4


def _fps_line(clock: pygame.time.Clock) -> str:
    fps = clock.get_fps()
    ms = 1000.0 / fps if fps > 0 else 0.0
    return f"Application average {ms:.3f} ms/frame ({fps:.1f} FPS)"


def _parse(prog: str, argv: list[str] | None, width: int, height: int) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--width", type=int, default=width)
    parser.add_argument("--height", type=int, default=height)
    return parser.parse_args(argv)


def _run_hello_world(width: int, height: int) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(HELLO_TITLE)
        font = pygame.font.Font(None, 22)
        clock = pygame.time.Clock()
        settings = DemoSettings()
        triangle = _triangle_surface(width, height)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    width, height = event.w, event.h
                    triangle = _triangle_surface(width, height)
                elif event.type == pygame.KEYDOWN:
                    count = len(settings.combo_items)
                    if event.key == pygame.K_DOWN:
                        settings.select((settings.current_index + 1) % count)
                    elif event.key == pygame.K_UP:
                        settings.select((settings.current_index - 1) % count)
                    elif event.key == pygame.K_a:
                        settings.show_another_window = not settings.show_another_window

            screen.fill(_to_pixel_color(settings.clear_color))
            screen.blit(triangle, (0, 0))
            lines = [
                "Some example widgets are given below.",
                f"A combo box: {settings.combo_items[settings.current_index]}",
                f"[{'x' if settings.show_another_window else ' '}] Show another window",
                _fps_line(clock),
            ]
            if settings.show_another_window:
                lines.append("Hello from another window!")
            _draw_lines(screen, font, lines, (5, 75))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


def _run_first_app(width: int, height: int) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(FIRST_APP_TITLE)
        print(f"Initial window size: {width}x{height}")
        font = pygame.font.Font(None, 22)
        clock = pygame.time.Clock()
        settings = DemoSettings()
        button = pygame.Rect(10, 120, 100, 50)
        checkbox = pygame.Rect(10, 180, 16, 16)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    width, height = event.w, event.h
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if button.collidepoint(event.pos):
                        settings.presses.append("Press me!")
                        print("Button pressed.")
                    elif checkbox.collidepoint(event.pos):
                        settings.option_enabled = not settings.option_enabled
                        state = "enabled" if settings.option_enabled else "disabled"
                        print(f"The checkbox is {state}")
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_m:
                    settings.show_compliment = not settings.show_compliment

            screen.fill(_to_pixel_color(settings.clear_color))
            pygame.draw.rect(screen, _PANEL, pygame.Rect(5, 5, 420, 230))
            _draw_lines(
                screen,
                font,
                ["Hello, First App!", settings.status_line(width, height), _fps_line(clock)],
                (10, 10),
            )
            pygame.draw.rect(screen, _BUTTON, button)
            label = font.render("Press me!", True, _WHITE)
            screen.blit(label, label.get_rect(center=button.center))
            pygame.draw.rect(screen, _TEXT, checkbox, 0 if settings.option_enabled else 1)
            _draw_lines(screen, font, ["Some option"], (checkbox.right + 6, checkbox.top))
            if settings.show_compliment:
                _draw_lines(screen, font, ["You're a beautiful person."], (10, 205))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


def hello_world_main(argv: list[str] | None = None) -> int:
    """Open the colour-interpolated triangle window."""
    args = _parse("hello-world", argv, HELLO_WIDTH, HELLO_HEIGHT)
    try:
        return _run_hello_world(args.width, args.height)
    except pygame.error as error:
        print(error, file=sys.stderr)
        return -1


def first_app_main(argv: list[str] | None = None) -> int:
    """Open the widget showcase window."""
    args = _parse("first-app", argv, FIRST_APP_WIDTH, FIRST_APP_HEIGHT)
    try:
        return _run_first_app(args.width, args.height)
    except pygame.error as error:
        print(error, file=sys.stderr)
        return -1