"""Parallax star field drawn behind the asteroids."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from glarcade.asteroids.ship import Ship
from glarcade.geometry import Vec2, wrap_around

LAYER_COUNT = 5


@dataclass
class Star:
    position: Vec2
    intensity: float


@dataclass
class StarLayer:
    """One layer of stars sharing a point size and a scroll offset."""

    point_size: float = 0.0
    quantity: int = 0
    translation: Vec2 = Vec2()
    stars: list[Star] = field(default_factory=list)


class StarLayers:
    """Several star layers that scroll at different speeds against the ship."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.layers = [StarLayer() for _ in range(LAYER_COUNT)]

    def reset(self, quantity: int) -> None:
        """Scatter new stars; layer ``i`` holds ``quantity * (i + 1)`` of them."""
        uniform = self.rng.uniform
        for index, layer in enumerate(self.layers):
            layer.point_size = 10.0 / (1.0 + index)
            layer.quantity = quantity * (index + 1)
            layer.translation = Vec2()
            layer.stars = [
                Star(Vec2(uniform(-1.0, 1.0), uniform(-1.0, 1.0)), uniform(0.5, 1.0))
                for _ in range(layer.quantity)
            ]

    def update(self, ship: Ship, delta_time: float) -> None:
        """Scroll each layer opposite to the ship, farther layers more slowly."""
        for index, layer in enumerate(self.layers):
            speed_scale = 1.0 / (index + 2.0)
            layer.translation = wrap_around(
                layer.translation - ship.velocity * (delta_time * speed_scale)
            )