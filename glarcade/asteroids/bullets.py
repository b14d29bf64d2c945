"""Bullets fired in pairs from the ship's cannons."""

from __future__ import annotations

from dataclasses import dataclass

from glarcade.asteroids.gamedata import GameData, Input, State
from glarcade.asteroids.ship import Ship
from glarcade.geometry import Vec2, regular_polygon

COOL_DOWN = 0.25
BULLET_SPEED = 2.0
RECOIL = 0.1
CANNON_OFFSET = 11.0 / 15.5
SCREEN_LIMIT = 1.1
SHAPE: tuple[Vec2, ...] = tuple(regular_polygon(10))


@dataclass
class Bullet:
    dead: bool = False
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()


class Bullets:
    """All bullets in flight."""

    def __init__(self, scale: float = 0.015) -> None:
        self.scale = scale
        self.bullets: list[Bullet] = []

    def reset(self) -> None:
        """Remove every bullet."""
        self.bullets = []

    def update(self, ship: Ship, game_data: GameData, delta_time: float) -> None:
        """Fire if allowed, move the bullets and drop the ones off screen."""
        if game_data.is_pressed(Input.FIRE) and game_data.state is State.PLAYING:
            if ship.bullet_cool_down_timer.elapsed() > COOL_DOWN:
                ship.bullet_cool_down_timer.restart()

                forward = Vec2(0.0, 1.0).rotated(ship.rotation)
                right = Vec2(1.0, 0.0).rotated(ship.rotation)
                offset = right * (CANNON_OFFSET * ship.scale)
                velocity = ship.velocity + forward * BULLET_SPEED

                self.bullets.append(Bullet(False, ship.translation + offset, velocity))
                self.bullets.append(Bullet(False, ship.translation - offset, velocity))

                ship.velocity = ship.velocity - forward * RECOIL

        for bullet in self.bullets:
            bullet.translation = (
                bullet.translation
                - ship.velocity * delta_time
                + bullet.velocity * delta_time
            )
            x, y = bullet.translation
            if not (-SCREEN_LIMIT <= x <= SCREEN_LIMIT and -SCREEN_LIMIT <= y <= SCREEN_LIMIT):
                bullet.dead = True

        self.bullets = [bullet for bullet in self.bullets if not bullet.dead]