"""The two paddles steered by the players."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from glarcade.geometry import Vec2
from glarcade.pong.gamedata import GameData, Input, State

MODEL_EXTENT = 15.5
PADDLE_SPEED = 300.0

_RAW_CORNERS = {
    1: ((-15.5, -3.5), (-14.5, -3.5), (-14.5, 3.5), (-15.5, 3.5)),
    2: ((15.5, -3.5), (14.5, -3.5), (14.5, 3.5), (15.5, 3.5)),
}

INDICES: tuple[tuple[int, int, int], ...] = ((0, 1, 3), (1, 2, 3))


class Side(enum.IntEnum):
    """Which edge a paddle guards; the value is the controlling player."""

    LEFT = 1
    RIGHT = 2


@dataclass
class Paddle:
    """A vertical bar at one edge of the court."""

    side: Side
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    rotation: float = 0.0
    scale: float = 1.0
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()

    def reset(self) -> None:
        """Centre the paddle vertically and stop it."""
        self.rotation = 0.0
        self.translation = Vec2()
        self.velocity = Vec2()

    def update(self, game_data: GameData, delta_time: float) -> None:
        """Move up or down while the owning player holds a key."""
        self.velocity = Vec2(0.0, PADDLE_SPEED) * delta_time
        held = game_data.input_left if self.side is Side.LEFT else game_data.input_right
        playing = game_data.state is State.PLAYING

        if Input.UP in held and playing:
            self.translation = self.translation + self.velocity * delta_time
        elif Input.DOWN in held and playing:
            self.translation = self.translation - self.velocity * delta_time

    def corners(self) -> list[Vec2]:
        """The four corners in screen space: bottom-outer, bottom-inner, top-inner, top-outer."""
        return [
            Vec2(x / MODEL_EXTENT, y / MODEL_EXTENT).rotated(self.rotation) * self.scale
            + self.translation
            for x, y in _RAW_CORNERS[int(self.side)]
        ]