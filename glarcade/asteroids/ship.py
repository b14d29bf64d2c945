"""The player's ship: steering, thrust and its triangle mesh."""

from __future__ import annotations

from dataclasses import dataclass, field

from glarcade.asteroids.gamedata import GameData, Input, State
from glarcade.geometry import Vec2, wrap_angle
from glarcade.timing import ElapsedTimer

_MODEL_EXTENT = 15.5

_RAW_POSITIONS = (
    # Ship body
    (-2.5, 12.5), (-15.5, 2.5), (-15.5, -12.5), (-9.5, -7.5),
    (-3.5, -12.5), (3.5, -12.5), (9.5, -7.5), (15.5, -12.5),
    (15.5, 2.5), (2.5, 12.5),
    # Cannon left
    (-12.5, 10.5), (-12.5, 4.0), (-9.5, 4.0), (-9.5, 10.5),
    # Cannon right
    (9.5, 10.5), (9.5, 4.0), (12.5, 4.0), (12.5, 10.5),
    # Thruster trail (left)
    (-12.0, -7.5), (-9.5, -18.0), (-7.0, -7.5),
    # Thruster trail (right)
    (7.0, -7.5), (9.5, -18.0), (12.0, -7.5),
)

POSITIONS: tuple[Vec2, ...] = tuple(
    Vec2(x / _MODEL_EXTENT, y / _MODEL_EXTENT) for x, y in _RAW_POSITIONS
)

INDICES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 3), (1, 2, 3), (0, 3, 4), (0, 4, 5),
    (9, 0, 5), (9, 5, 6), (9, 6, 8), (8, 6, 7),
    # Cannons
    (10, 11, 12), (10, 12, 13), (14, 15, 16), (14, 16, 17),
    # Thruster trails
    (18, 19, 20), (21, 22, 23),
)

_SHIP_TRIANGLES = 12
_TRAIL_TRIANGLES = 14

TURN_SPEED = 4.0
BLINK_PERIOD = 0.1
TRAIL_VISIBLE = 0.05


@dataclass
class Ship:
    """The player's ship in normalized device coordinates."""

    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    rotation: float = 0.0
    scale: float = 0.125
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    trail_blink_timer: ElapsedTimer = field(default_factory=ElapsedTimer)
    bullet_cool_down_timer: ElapsedTimer = field(default_factory=ElapsedTimer)

    def reset(self) -> None:
        """Put the ship back at the centre, at rest and facing up."""
        self.rotation = 0.0
        self.translation = Vec2()
        self.velocity = Vec2()

    def update(self, game_data: GameData, delta_time: float) -> None:
        """Turn and accelerate according to the held inputs."""
        if game_data.is_pressed(Input.LEFT):
            self.rotation = wrap_angle(self.rotation + TURN_SPEED * delta_time)
        if game_data.is_pressed(Input.RIGHT):
            self.rotation = wrap_angle(self.rotation - TURN_SPEED * delta_time)

        if game_data.is_pressed(Input.UP) and game_data.state is State.PLAYING:
            forward = Vec2(0.0, 1.0).rotated(self.rotation)
            self.velocity = self.velocity + forward * delta_time

    def show_thruster(self, game_data: GameData) -> bool:
        """Whether the blinking thruster trail is visible in this frame."""
        if game_data.state is not State.PLAYING:
            return False
        if self.trail_blink_timer.elapsed() > BLINK_PERIOD:
            self.trail_blink_timer.restart()
        return (
            game_data.is_pressed(Input.UP)
            and self.trail_blink_timer.elapsed() < TRAIL_VISIBLE
        )

    def triangles(self, with_trail: bool = False) -> list[tuple[Vec2, Vec2, Vec2]]:
        """Triangles of the ship mesh in model space, trail included if asked."""
        count = _TRAIL_TRIANGLES if with_trail else _SHIP_TRIANGLES
        return [
            (POSITIONS[a], POSITIONS[b], POSITIONS[c])
            for a, b, c in INDICES[:count]
        ]