import pytest

from glarcade.demos import (
    ColoredVertex,
    DemoSettings,
    first_app_main,
    hello_world_main,
    interpolate_color,
    triangle_vertices,
)
from glarcade.geometry import Vec2


def test_triangle_vertices_match_source():
    vertices = triangle_vertices()
    assert [v.position for v in vertices] == [
        Vec2(0.0, 0.5),
        Vec2(0.5, -0.5),
        Vec2(-0.5, -0.5),
    ]
    assert [v.color for v in vertices] == [
        (1.0, 0.0, 0.0),
        (1.0, 0.0, 1.0),
        (0.0, 1.0, 0.0),
    ]


@pytest.mark.parametrize("index", [0, 1, 2])
def test_color_at_vertex_is_vertex_color(index):
    vertices = triangle_vertices()
    color = interpolate_color(vertices, vertices[index].position)
    assert color == pytest.approx(vertices[index].color)


def test_centroid_is_mean_of_colors():
    vertices = triangle_vertices()
    centroid = sum((v.position for v in vertices), Vec2()) / 3.0
    color = interpolate_color(vertices, centroid)
    expected = [sum(v.color[c] for v in vertices) / 3.0 for c in range(3)]
    assert color == pytest.approx(expected)


def test_edge_midpoint_blends_two_corners():
    vertices = triangle_vertices()
    a, b = vertices[0], vertices[1]
    midpoint = (a.position + b.position) / 2.0
    color = interpolate_color(vertices, midpoint)
    assert color == pytest.approx([(x + y) / 2.0 for x, y in zip(a.color, b.color)])


def test_point_outside_has_no_color():
    vertices = triangle_vertices()
    assert interpolate_color(vertices, (0.9, 0.9)) is None
    assert interpolate_color(vertices, Vec2(0.0, -0.9)) is None


def test_wrong_vertex_count_raises():
    with pytest.raises(ValueError):
        interpolate_color(triangle_vertices()[:2], (0.0, 0.0))


def test_degenerate_triangle_raises():
    flat = [
        ColoredVertex(Vec2(0.0, 0.0), (1.0, 0.0, 0.0)),
        ColoredVertex(Vec2(1.0, 1.0), (0.0, 1.0, 0.0)),
        ColoredVertex(Vec2(2.0, 2.0), (0.0, 0.0, 1.0)),
    ]
    with pytest.raises(ValueError):
        interpolate_color(flat, (0.5, 0.5))


def test_default_settings():
    settings = DemoSettings()
    assert settings.clear_color == (0.906, 0.910, 0.918, 1.0)
    assert settings.combo_items[settings.current_index] == "First item"
    assert settings.show_another_window is False


def test_status_line():
    settings = DemoSettings()
    assert settings.status_line(600, 600) == (
        "Current window size: 600x600 (in windowed mode)"
    )


def test_select_returns_label_and_stores_index():
    settings = DemoSettings()
    assert settings.select(2) == "Third item"
    assert settings.current_index == 2


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_select_out_of_range_raises(index):
    settings = DemoSettings()
    with pytest.raises(IndexError):
        settings.select(index)
    assert settings.current_index == 0


@pytest.mark.parametrize("entry", [hello_world_main, first_app_main])
def test_bad_arguments_exit(entry):
    with pytest.raises(SystemExit):
        entry(["--width", "wide"])