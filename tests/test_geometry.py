import math

import pytest

from glarcade.geometry import Vec2, regular_polygon, wrap_angle, wrap_around


def test_vector_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(0.5, -3.0)
    assert a + b - b == a
    assert -a + a == Vec2(0.0, 0.0)
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0


def test_unpacking():
    x, y = Vec2(3.0, -7.0)
    assert (x, y) == (3.0, -7.0)


def test_length_of_axis_vector():
    assert Vec2(0.0, -4.0).length() == 4.0


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(3.0, 4.0)
    n = v.normalized()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.x * v.y - n.y * v.x, 0.0, abs_tol=1e-12)
    assert n.x * v.x + n.y * v.y > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalized()


@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, math.pi, -2.0, 7.5])
def test_rotation_preserves_length(angle):
    v = Vec2(1.5, -0.25)
    assert math.isclose(v.rotated(angle).length(), v.length())


def test_rotation_round_trip():
    v = Vec2(0.7, 0.2)
    back = v.rotated(1.234).rotated(-1.234)
    assert math.isclose(back.x, v.x, abs_tol=1e-12)
    assert math.isclose(back.y, v.y, abs_tol=1e-12)


def test_rotation_by_zero_is_identity():
    v = Vec2(0.0, 1.0)
    assert v.rotated(0.0) == v


def test_distance_is_symmetric_and_zero_to_self():
    a = Vec2(1.0, 1.0)
    b = Vec2(-2.0, 5.0)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0.0
    assert a.distance(b) == (a - b).length()


@pytest.mark.parametrize("angle", [-10.0, -0.1, 0.0, 1.0, 6.5, 100.0])
def test_wrap_angle_range_and_periodicity(angle):
    wrapped = wrap_angle(angle)
    assert 0.0 <= wrapped < 2 * math.pi
    assert math.isclose(math.cos(wrapped), math.cos(angle), abs_tol=1e-9)
    assert math.isclose(math.sin(wrapped), math.sin(angle), abs_tol=1e-9)
    assert math.isclose(wrap_angle(angle + 2 * math.pi), wrapped, abs_tol=1e-9)


def test_wrap_angle_keeps_angles_in_range():
    assert wrap_angle(1.0) == 1.0


def test_wrap_around_leaves_inside_point_alone():
    p = Vec2(0.9, -0.9)
    assert wrap_around(p) == p


def test_wrap_around_moves_outside_point_by_two():
    p = Vec2(1.5, -1.5)
    wrapped = wrap_around(p)
    assert wrapped == Vec2(-0.5, 0.5)
    assert -1.0 <= wrapped.x <= 1.0 and -1.0 <= wrapped.y <= 1.0


@pytest.mark.parametrize("sides", [6, 10, 20])
def test_regular_polygon_shape(sides):
    points = regular_polygon(sides)
    assert len(points) == sides + 2
    assert points[0] == Vec2(0.0, 0.0)
    assert points[-1] == points[1]
    for point in points[1:]:
        assert math.isclose(point.length(), 1.0)


def test_regular_polygon_uses_radii():
    radii = [0.8, 0.9, 1.0, 0.85, 0.95, 0.8]
    points = regular_polygon(6, radii)
    lengths = [p.length() for p in points[1:-1]]
    assert lengths == pytest.approx(radii)


def test_regular_polygon_too_few_radii():
    with pytest.raises(ValueError):
        regular_polygon(6, [1.0, 1.0])


def test_regular_polygon_too_few_sides():
    with pytest.raises(ValueError):
        regular_polygon(2)