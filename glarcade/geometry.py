"""Two-dimensional vector maths and shape helpers shared by the games."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector with the same direction; raises on the zero vector."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def rotated(self, angle: float) -> Vec2:
        """Vector rotated counter-clockwise by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to ``other``."""
        return (self - other).length()


def wrap_angle(angle: float) -> float:
    """Map an angle in radians onto the range [0, 2*pi)."""
    wrapped = angle % TWO_PI
    return 0.0 if wrapped == TWO_PI else wrapped


def wrap_around(position: Vec2) -> Vec2:
    """Bring a position that left the [-1, 1] square back in from the opposite side."""
    x, y = position
    if x < -1.0:
        x += 2.0
    if x > 1.0:
        x -= 2.0
    if y < -1.0:
        y += 2.0
    if y > 1.0:
        y -= 2.0
    return Vec2(x, y)


def regular_polygon(sides: int, radii: Iterable[float] | None = None) -> list[Vec2]:
    """Vertices of a triangle fan around the origin.

    The result starts with the centre, continues with one vertex per side and
    repeats the first rim vertex to close the fan, so it holds ``sides + 2``
    points. ``radii`` gives the distance of each rim vertex; all are 1 if omitted.
    """
    if sides < 3:
        raise ValueError("a polygon needs at least 3 sides")
    radius_list = [1.0] * sides if radii is None else list(radii)
    if len(radius_list) < sides:
        raise ValueError(f"expected {sides} radii, got {len(radius_list)}")

    step = TWO_PI / sides
    rim = [
        Vec2(radius * math.cos(index * step), radius * math.sin(index * step))
        for index, radius in zip(range(sides), radius_list)
    ]
    return [Vec2(0.0, 0.0), *rim, rim[0]]