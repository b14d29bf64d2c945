"""The rules of an asteroids round: collisions, winning and restarting."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable

from glarcade.asteroids.asteroids import Asteroid, Asteroids
from glarcade.asteroids.bullets import Bullets
from glarcade.asteroids.gamedata import GameData, Input, State
from glarcade.asteroids.ship import Ship
from glarcade.asteroids.starlayers import StarLayers
from glarcade.geometry import Vec2
from glarcade.timing import ElapsedTimer

STAR_QUANTITY = 25
ASTEROID_QUANTITY = 3
RESTART_DELAY = 5.0
MIN_SPLIT_SCALE = 0.10
_WRAP_OFFSETS = (-2, 0, 2)


class AsteroidsGame:
    """Everything that makes up one asteroids session."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.game_data = GameData()
        self.ship = Ship(
            trail_blink_timer=ElapsedTimer(clock),
            bullet_cool_down_timer=ElapsedTimer(clock),
        )
        self.star_layers = StarLayers(self.rng)
        self.asteroids = Asteroids(self.rng)
        self.bullets = Bullets()
        self.restart_wait_timer = ElapsedTimer(clock)
        self.viewport_width = 0
        self.viewport_height = 0
        self.restart()

    def restart(self) -> None:
        """Start a new round."""
        self.game_data.state = State.PLAYING
        self.star_layers.reset(STAR_QUANTITY)
        self.ship.reset()
        self.asteroids.reset(ASTEROID_QUANTITY)
        self.bullets.reset()

    def update(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""
        if (
            self.game_data.state is not State.PLAYING
            and self.restart_wait_timer.elapsed() > RESTART_DELAY
        ):
            self.restart()
            return

        self.ship.update(self.game_data, delta_time)
        self.star_layers.update(self.ship, delta_time)
        self.asteroids.update(self.ship, delta_time)
        self.bullets.update(self.ship, self.game_data, delta_time)

        if self.game_data.state is State.PLAYING:
            self.check_collisions()
            self.check_win_condition()

    def _lose(self) -> None:
        self.game_data.state = State.GAME_OVER
        self.restart_wait_timer.restart()

    def check_collisions(self) -> None:
        """Handle ship crashes and bullets breaking asteroids."""
        ship = self.ship
        for asteroid in self.asteroids.asteroids:
            distance = ship.translation.distance(asteroid.translation)
            if distance < ship.scale * 0.9 + asteroid.scale * 0.85:
                self._lose()

        for bullet in self.bullets.bullets:
            if bullet.dead:
                continue

            for asteroid in self.asteroids.asteroids:
                reach = self.bullets.scale + asteroid.scale * 0.85
                for i in _WRAP_OFFSETS:
                    for j in _WRAP_OFFSETS:
                        image = asteroid.translation + Vec2(i, j)
                        if bullet.translation.distance(image) < reach:
                            asteroid.hit = True
                            bullet.dead = True

            fragments: list[Asteroid] = []
            for asteroid in self.asteroids.asteroids:
                if asteroid.hit and asteroid.scale > MIN_SPLIT_SCALE:
                    for _ in range(3):
                        offset = Vec2(
                            self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0)
                        )
                        fragments.append(
                            self.asteroids.create_asteroid(
                                asteroid.translation + offset * (asteroid.scale * 0.5),
                                asteroid.scale * 0.5,
                            )
                        )
            self.asteroids.asteroids = [
                asteroid
                for asteroid in [*self.asteroids.asteroids, *fragments]
                if not asteroid.hit
            ]

    def check_win_condition(self) -> None:
        """Declare victory once every asteroid is destroyed."""
        if not self.asteroids.asteroids:
            self.game_data.state = State.WIN
            self.restart_wait_timer.restart()

    def press(self, key: Input) -> None:
        self.game_data.press(key)

    def release(self, key: Input) -> None:
        self.game_data.release(key)

    def aim(self, x: int, y: int) -> None:
        """Point the ship at the mouse position given in window pixels."""
        dx = x - self.viewport_width // 2
        dy = -(y - self.viewport_height // 2)
        self.ship.rotation = math.atan2(dy, dx) - math.pi / 2

    def resize(self, width: int, height: int) -> None:
        self.viewport_width = width
        self.viewport_height = height

    def message(self) -> str:
        """Banner text for the current state; empty while playing."""
        if self.game_data.state is State.GAME_OVER:
            return "Game Over!"
        if self.game_data.state is State.WIN:
            return "*You Win!*"
        return ""