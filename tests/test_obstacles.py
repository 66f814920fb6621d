import math

import pytest

from floorpath.nav.coordinate import Coordinate
from floorpath.nav.obstacles import (
    SAFE_AREA_MARGIN,
    Circle,
    Rectangle,
    area_points,
    contains,
)


def test_rectangle_contains_edges_and_safe_area() -> None:
    table = _rectangle(1, 1, 2, 2)

    assert table.contains(Coordinate(1.5, 1.5))
    assert table.contains(Coordinate(2.0, 1.0))
    assert not table.contains(Coordinate(2.3, 1.5))
    assert table.contains(Coordinate(2.3, 1.5), safe_area=True)
    assert not table.contains(Coordinate(2.5, 1.5), safe_area=True)


def test_circle_contains_and_safe_area() -> None:
    pillar = Circle(center=Coordinate(0, 0), radius=1.0)

    assert pillar.contains(Coordinate(0.6, 0.6))
    assert pillar.contains(Coordinate(1.0, 0.0))
    assert not pillar.contains(Coordinate(1.3, 0.0))
    assert pillar.contains(Coordinate(1.3, 0.0), safe_area=True)
    assert SAFE_AREA_MARGIN == 0.35


def test_invalid_shapes_fail_fast() -> None:
    with pytest.raises(ValueError, match="top_left"):
        _rectangle(2, 0, 1, 1)
    with pytest.raises(ValueError, match="top_left"):
        _rectangle(0, 2, 1, 1)
    with pytest.raises(ValueError, match="radius"):
        Circle(center=Coordinate(0, 0), radius=-0.1)


def test_closest_edge_point() -> None:
    table = _rectangle(1, 1, 2, 2)
    assert table.closest_edge_point(Coordinate(3, 1.5)) == Coordinate(2, 1.5)
    assert table.closest_edge_point(Coordinate(0, 0)) == Coordinate(1, 1)

    pillar = Circle(center=Coordinate(0, 0), radius=1.0)
    assert pillar.closest_edge_point(Coordinate(2, 0)) == Coordinate(1, 0)
    assert pillar.closest_edge_point(Coordinate(0, -3)) == Coordinate(0, -1)
    assert pillar.closest_edge_point(Coordinate(0, 0)) == Coordinate(1, 0)


def test_distance_to_is_zero_inside() -> None:
    table = _rectangle(1, 1, 2, 2)
    assert table.distance_to(Coordinate(3, 3)) == pytest.approx(math.sqrt(2))
    assert table.distance_to(Coordinate(1.5, 0.5)) == pytest.approx(0.5)
    assert table.distance_to(Coordinate(1.5, 1.5)) == 0.0

    pillar = Circle(center=Coordinate(0, 0), radius=1.0)
    assert pillar.distance_to(Coordinate(2, 0)) == pytest.approx(1.0)
    assert pillar.distance_to(Coordinate(0.2, 0.2)) == 0.0


def test_area_points_cover_the_footprint() -> None:
    table = _rectangle(0, 0, 0.2, 0.1)
    points = table.area_points(0.1)
    assert len(points) == 6
    assert Coordinate(0.2, 0.1) in points
    assert all(not point.is_walkable for point in points)

    pillar = Circle(center=Coordinate(0, 0), radius=0.1)
    assert set(area_points(pillar, 0.1)) == {
        Coordinate(0, 0),
        Coordinate(0.1, 0),
        Coordinate(-0.1, 0),
        Coordinate(0, 0.1),
        Coordinate(0, -0.1),
    }


def test_rectangle_contains_rectangle() -> None:
    room = _rectangle(0, 0, 4, 4)
    assert room.contains_rectangle(_rectangle(1, 1, 2, 2))
    assert not room.contains_rectangle(_rectangle(3, 3, 5, 5))


def test_module_level_dispatch_matches_methods() -> None:
    shapes = [_rectangle(0, 0, 1, 1), Circle(center=Coordinate(3, 3), radius=0.5)]
    probe = Coordinate(3.2, 3.0)
    assert [contains(shape, probe) for shape in shapes] == [False, True]


def _rectangle(x0: float, y0: float, x1: float, y1: float) -> Rectangle:
    return Rectangle(top_left=Coordinate(x0, y0), bottom_right=Coordinate(x1, y1))
