"""The pong ball."""

from __future__ import annotations

from dataclasses import dataclass

from glarcade.geometry import Vec2, regular_polygon

SIDES = 10


@dataclass
class Ball:
    """A small disc travelling horizontally, back and forth between paddles."""

    dead: bool = False
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    direction: bool = False
    scale: float = 0.05
    ball_speed: float = 1.5

    def reset(self) -> None:
        """Put the ball back at the centre with its starting velocity.

        The travel direction is kept, so a new round serves toward the side
        the ball was last heading.
        """
        self.dead = False
        self.translation = Vec2()
        self.velocity = Vec2(1.0, 0.0) * self.ball_speed

    def update(self, delta_time: float) -> None:
        """Move along the velocity, backwards unless ``direction`` is set."""
        step = self.velocity * delta_time
        if self.direction:
            self.translation = self.translation + step
        else:
            self.translation = self.translation - step

    def outline(self) -> list[Vec2]:
        """Rim vertices of the disc in screen space."""
        rim = regular_polygon(SIDES)[1:-1]
        return [point * self.scale + self.translation for point in rim]