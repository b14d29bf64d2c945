import math
import random

import pytest

from glarcade.asteroids.asteroids import Asteroid, Asteroids
from glarcade.asteroids.ship import Ship
from glarcade.geometry import Vec2


@pytest.fixture
def field():
    return Asteroids(random.Random(1234))


def test_reset_creates_requested_quantity_away_from_centre(field):
    field.reset(3)
    assert len(field.asteroids) == 3
    for asteroid in field.asteroids:
        assert asteroid.translation.length() >= 0.5
        assert -1.0 <= asteroid.translation.x <= 1.0
        assert -1.0 <= asteroid.translation.y <= 1.0


def test_reset_replaces_previous_asteroids(field):
    field.reset(5)
    field.reset(2)
    assert len(field.asteroids) == 2


def test_create_asteroid_defaults(field):
    asteroid = field.create_asteroid()
    assert asteroid.scale == 0.25
    assert asteroid.translation == Vec2(0.0, 0.0)
    assert asteroid.rotation == 0.0
    assert asteroid.hit is False


@pytest.mark.parametrize("seed", range(20))
def test_create_asteroid_random_properties_in_range(seed):
    field = Asteroids(random.Random(seed))
    asteroid = field.create_asteroid(Vec2(0.3, -0.2), 0.125)
    assert 6 <= asteroid.polygon_sides <= 20
    red, green, blue, alpha = asteroid.color
    assert red == green == blue
    assert 0.5 <= red <= 1.0
    assert alpha == 1.0
    assert -1.0 <= asteroid.angular_velocity <= 1.0
    assert asteroid.velocity.length() == pytest.approx(1.0 / 7.0)
    assert len(asteroid.radii) == asteroid.polygon_sides
    assert all(0.8 <= radius <= 1.0 for radius in asteroid.radii)
    assert asteroid.translation == Vec2(0.3, -0.2)
    assert asteroid.scale == 0.125


def test_outline_lies_within_scaled_radii(field):
    asteroid = field.create_asteroid(Vec2(0.4, 0.1), 0.25)
    asteroid.rotation = 1.3
    outline = asteroid.outline()
    assert len(outline) == asteroid.polygon_sides
    for point, radius in zip(outline, asteroid.radii):
        assert point.distance(asteroid.translation) == pytest.approx(radius * 0.25)


def test_outline_without_radii_is_regular():
    asteroid = Asteroid(polygon_sides=6, scale=0.5)
    outline = asteroid.outline()
    assert outline[0].x == pytest.approx(0.5)
    assert outline[0].y == pytest.approx(0.0)
    assert all(p.length() == pytest.approx(0.5) for p in outline)


def test_update_moves_relative_to_ship():
    field = Asteroids(random.Random(0))
    asteroid = Asteroid(
        angular_velocity=0.5, translation=Vec2(0.1, 0.2), velocity=Vec2(0.1, 0.0)
    )
    field.asteroids = [asteroid]
    ship = Ship(velocity=Vec2(0.0, 0.2))
    field.update(ship, 0.5)
    assert asteroid.translation.x == pytest.approx(0.15)
    assert asteroid.translation.y == pytest.approx(0.1)
    assert asteroid.rotation == pytest.approx(0.25)


def test_update_wraps_around_screen():
    field = Asteroids(random.Random(0))
    asteroid = Asteroid(translation=Vec2(0.99, -0.99), velocity=Vec2(0.1, -0.1))
    field.asteroids = [asteroid]
    field.update(Ship(), 1.0)
    assert asteroid.translation.x == pytest.approx(-0.91)
    assert asteroid.translation.y == pytest.approx(0.91)


def test_update_keeps_rotation_wrapped():
    field = Asteroids(random.Random(0))
    asteroid = Asteroid(angular_velocity=-1.0)
    field.asteroids = [asteroid]
    field.update(Ship(), 0.5)
    assert 0.0 <= asteroid.rotation < 2 * math.pi
    assert asteroid.rotation == pytest.approx(2 * math.pi - 0.5)