"""The static walls at the top and bottom of the pong court."""

from __future__ import annotations

from dataclasses import dataclass

from glarcade.geometry import Vec2
from glarcade.pong.gamedata import GameData, State

MODEL_EXTENT = 15.5

_RAW_POSITIONS = (
    # Bottom wall
    (-15.5, -15.5), (15.5, -15.5), (15.5, -14.5), (-15.5, -14.5),
    # Top wall
    (-15.5, 15.5), (15.5, 15.5), (15.5, 14.5), (-15.5, 14.5),
)

INDICES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 3), (1, 2, 3), (4, 5, 6), (4, 6, 7),
)


@dataclass
class Scenery:
    """Two horizontal bars bounding the court; shown only during play."""

    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    rotation: float = 0.0
    scale: float = 1.0
    translation: Vec2 = Vec2()
    velocity: Vec2 = Vec2()
    visible: bool = True

    def walls(self) -> list[list[Vec2]]:
        """Corners of the bottom wall and of the top wall, in screen space."""
        points = [
            Vec2(x / MODEL_EXTENT, y / MODEL_EXTENT).rotated(self.rotation) * self.scale
            + self.translation
            for x, y in _RAW_POSITIONS
        ]
        return [points[:4], points[4:]]

    def update(self, game_data: GameData) -> None:
        """The walls never move; they are hidden once the match is decided."""
        self.visible = game_data.state is State.PLAYING