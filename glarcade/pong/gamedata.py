"""Shared state of a pong match: phase and each player's held keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Input(enum.Enum):
    UP = enum.auto()
    DOWN = enum.auto()


class State(enum.Enum):
    PLAYING = enum.auto()
    WIN_PLAYER1 = enum.auto()
    WIN_PLAYER2 = enum.auto()


@dataclass
class GameData:
    """Match state; player 1 steers the left paddle, player 2 the right one."""

    state: State = State.PLAYING
    input_left: set[Input] = field(default_factory=set)
    input_right: set[Input] = field(default_factory=set)

    def _inputs(self, player: int) -> set[Input]:
        if player == 1:
            return self.input_left
        if player == 2:
            return self.input_right
        raise ValueError(f"unknown player: {player!r}")

    def set_input(self, player: int, key: Input, pressed: bool) -> None:
        """Record that ``player`` pressed or released ``key``."""
        inputs = self._inputs(player)
        if pressed:
            inputs.add(key)
        else:
            inputs.discard(key)