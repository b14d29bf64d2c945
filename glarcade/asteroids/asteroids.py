"""Randomly shaped asteroids drifting and spinning across the screen."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from glarcade.asteroids.ship import Ship
from glarcade.geometry import Vec2, regular_polygon, wrap_angle, wrap_around

MIN_SIDES = 6
MAX_SIDES = 20
DEFAULT_SCALE = 0.25
SPEED_DIVISOR = 7.0
SAFE_DISTANCE = 0.5


@dataclass
class Asteroid:
    """One asteroid: a jagged polygon with its own motion."""

    angular_velocity: float = 0.0
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    hit: bool = False
    polygon_sides: int = MIN_SIDES
    rotation: float = 0.0
    scale: float = DEFAULT_SCALE
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    radii: list[float] = field(default_factory=list)

    def outline(self) -> list[Vec2]:
        """Rim vertices in screen space: rotated, scaled and translated."""
        radii = self.radii or None
        rim = regular_polygon(self.polygon_sides, radii)[1:-1]
        return [
            point.rotated(self.rotation) * self.scale + self.translation
            for point in rim
        ]


class Asteroids:
    """The field of asteroids of one round."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.asteroids: list[Asteroid] = []

    def _random_unit(self) -> float:
        return self.rng.uniform(-1.0, 1.0)

    def reset(self, quantity: int) -> None:
        """Replace the field with ``quantity`` asteroids kept away from the centre."""
        self.asteroids = []
        for _ in range(quantity):
            asteroid = self.create_asteroid()
            while True:
                asteroid.translation = Vec2(self._random_unit(), self._random_unit())
                if asteroid.translation.length() >= SAFE_DISTANCE:
                    break
            self.asteroids.append(asteroid)

    def create_asteroid(
        self, translation: Vec2 = Vec2(), scale: float = DEFAULT_SCALE
    ) -> Asteroid:
        """Build a new asteroid with random shape, shade, spin and heading."""
        rng = self.rng
        sides = rng.randint(MIN_SIDES, MAX_SIDES)
        intensity = rng.uniform(0.5, 1.0)
        angular_velocity = self._random_unit()

        while True:
            direction = Vec2(self._random_unit(), self._random_unit())
            if direction.length() > 0.0:
                break
        velocity = direction.normalized() / SPEED_DIVISOR

        radii = [rng.uniform(0.8, 1.0) for _ in range(sides)]
        return Asteroid(
            angular_velocity=angular_velocity,
            color=(intensity, intensity, intensity, 1.0),
            polygon_sides=sides,
            rotation=0.0,
            scale=scale,
            translation=translation,
            velocity=velocity,
            radii=radii,
        )

    def update(self, ship: Ship, delta_time: float) -> None:
        """Move every asteroid relative to the ship and wrap it around the screen."""
        for asteroid in self.asteroids:
            position = asteroid.translation - ship.velocity * delta_time
            asteroid.rotation = wrap_angle(
                asteroid.rotation + asteroid.angular_velocity * delta_time
            )
            position = position + asteroid.velocity * delta_time
            asteroid.translation = wrap_around(position)