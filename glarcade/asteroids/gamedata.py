"""Shared state of an asteroids round: game phase and held inputs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Input(enum.Enum):
    RIGHT = enum.auto()
    LEFT = enum.auto()
    DOWN = enum.auto()
    UP = enum.auto()
    FIRE = enum.auto()


class State(enum.Enum):
    PLAYING = enum.auto()
    GAME_OVER = enum.auto()
    WIN = enum.auto()


@dataclass
class GameData:
    """Current game state and the set of inputs being held."""

    state: State = State.PLAYING
    inputs: set[Input] = field(default_factory=set)

    def press(self, key: Input) -> None:
        self.inputs.add(key)

    def release(self, key: Input) -> None:
        self.inputs.discard(key)

    def is_pressed(self, key: Input) -> bool:
        return key in self.inputs