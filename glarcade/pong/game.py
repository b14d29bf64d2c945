"""The rules of a pong match: bounces, scoring and restarting."""

from __future__ import annotations

import time
from collections.abc import Callable

from glarcade.geometry import Vec2
from glarcade.pong.ball import Ball
from glarcade.pong.gamedata import GameData, Input, State
from glarcade.pong.paddle import MODEL_EXTENT, Paddle, Side
from glarcade.pong.scenery import Scenery
from glarcade.timing import ElapsedTimer

RESTART_DELAY = 5.0
COLLISION_COOL_DOWN = 0.1
PADDLE_FACE = 14.5
PADDLE_HALF_HEIGHT = 3.5
WALL_FACE = 14.5

_KEY_BINDINGS: dict[str, tuple[int, Input]] = {
    "w": (1, Input.UP),
    "s": (1, Input.DOWN),
    "up": (2, Input.UP),
    "down": (2, Input.DOWN),
}


class PongGame:
    """Everything that makes up one pong session."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.game_data = GameData()
        self.bar_left = Paddle(Side.LEFT)
        self.bar_right = Paddle(Side.RIGHT)
        self.ball = Ball()
        self.scenery = Scenery()
        self.restart_wait_timer = ElapsedTimer(clock)
        self.collision_timer = ElapsedTimer(clock)
        self.viewport_width = 0
        self.viewport_height = 0
        self.restart()

    def restart(self) -> None:
        """Start a new round."""
        self.game_data.state = State.PLAYING
        self.bar_left.reset()
        self.bar_right.reset()
        self.ball.reset()
        self.scenery = Scenery()

    def update(self, delta_time: float) -> None:
        """Advance the match by ``delta_time`` seconds."""
        if (
            self.game_data.state is not State.PLAYING
            and self.restart_wait_timer.elapsed() > RESTART_DELAY
        ):
            self.restart()
            return

        self.bar_right.update(self.game_data, delta_time)
        self.bar_left.update(self.game_data, delta_time)
        self.ball.update(delta_time)
        self.scenery.update(self.game_data)

        if self.game_data.state is State.PLAYING:
            self.check_collisions()
            self.check_win_condition()

    def _collision_ready(self) -> bool:
        if self.collision_timer.elapsed() > COLLISION_COOL_DOWN:
            self.collision_timer.restart()
            return True
        return False

    @staticmethod
    def _within_paddle(ball_y: float, paddle: Paddle) -> bool:
        centre = paddle.translation.y * MODEL_EXTENT
        return centre - PADDLE_HALF_HEIGHT <= ball_y <= centre + PADDLE_HALF_HEIGHT

    def check_collisions(self) -> None:
        """Bounce the ball off the paddles and the walls."""
        ball = self.ball
        position = ball.translation * MODEL_EXTENT
        relative_y = position.y / MODEL_EXTENT

        if position.x <= -PADDLE_FACE and self._within_paddle(position.y, self.bar_left):
            if self._collision_ready():
                ball.direction = not ball.direction
                ball.velocity = (
                    Vec2(1.0, relative_y - self.bar_left.translation.y) * ball.ball_speed
                )
        elif position.x >= PADDLE_FACE and self._within_paddle(position.y, self.bar_right):
            if self._collision_ready():
                ball.direction = not ball.direction
                ball.velocity = (
                    Vec2(1.0, self.bar_right.translation.y - relative_y) * ball.ball_speed
                )

        if position.y <= -WALL_FACE or position.y >= WALL_FACE:
            if self._collision_ready():
                ball.velocity = Vec2(1.0, -ball.velocity.y) * ball.ball_speed

    def check_win_condition(self) -> None:
        """Award the round once the ball leaves the court on either side."""
        if self.game_data.state is not State.PLAYING:
            return
        x = self.ball.translation.x * MODEL_EXTENT
        if x > MODEL_EXTENT:
            self.game_data.state = State.WIN_PLAYER1
            self.restart_wait_timer.restart()
        elif x < -MODEL_EXTENT:
            self.game_data.state = State.WIN_PLAYER2
            self.restart_wait_timer.restart()

    def handle_key(self, key: str | None, pressed: bool) -> bool:
        """Apply a key named "w", "s", "up" or "down"; return whether it is bound."""
        binding = _KEY_BINDINGS.get(key) if key is not None else None
        if binding is None:
            return False
        player, action = binding
        self.game_data.set_input(player, action, pressed)
        return True

    def resize(self, width: int, height: int) -> None:
        self.viewport_width = width
        self.viewport_height = height

    def message(self) -> str:
        """Banner text for the current state; empty while playing."""
        if self.game_data.state is State.WIN_PLAYER1:
            return "*Player 1 Win!*"
        if self.game_data.state is State.WIN_PLAYER2:
            return "*Player 2 Win!*"
        return ""