import math

import pytest

from floorpath.nav.coordinate import Coordinate, euclidean_distance, round_to_decimal
from floorpath.nav.costs import (
    TOUCHING_PENALTY,
    ProximityCost,
    TurnPenaltyCost,
    cost_with_turn_penalty,
    euclidean_heuristic,
    turn_angle,
)
from floorpath.nav.grid_map import GridMap
from floorpath.nav.obstacles import Rectangle


def test_turn_cost_without_previous_is_rounded_distance() -> None:
    a, b = Coordinate(0, 0), Coordinate(0.5, 0.5)
    assert cost_with_turn_penalty(a, b, None) == round_to_decimal(
        euclidean_distance(a, b), 2
    )
    assert cost_with_turn_penalty(a, b, None) == 0.71


def test_straight_steps_still_pay_the_base_penalty() -> None:
    cost = cost_with_turn_penalty(
        Coordinate(0.5, 0), Coordinate(1.0, 0), Coordinate(0, 0)
    )
    assert cost == 1.5


def test_right_angle_turn_adds_angular_penalty() -> None:
    cost = cost_with_turn_penalty(
        Coordinate(0.5, 0), Coordinate(0.5, 0.5), Coordinate(0, 0)
    )
    assert cost == 1.66


def test_small_turns_snap_to_zero() -> None:
    cost = cost_with_turn_penalty(
        Coordinate(1, 0), Coordinate(2, 0.3), Coordinate(0, 0)
    )
    assert cost == 2.04


def test_turn_angle_is_reflected_into_zero_to_pi() -> None:
    angle = turn_angle(Coordinate(1, 0), Coordinate(0, 0), Coordinate(0, -1))
    assert angle == pytest.approx(math.pi / 2)
    reverse = turn_angle(Coordinate(0, 0), Coordinate(1, 0), Coordinate(0, 0))
    assert reverse == pytest.approx(math.pi)


def test_turn_policy_matches_function() -> None:
    grid_map = GridMap(3, 2, resolution=0.5)
    policy = TurnPenaltyCost()
    args = (Coordinate(0.5, 0), Coordinate(0.5, 0.5), Coordinate(0, 0))
    assert policy.cost(grid_map, *args) == cost_with_turn_penalty(*args)


def test_proximity_factor_is_validated() -> None:
    with pytest.raises(ValueError, match="shortest_path_factor"):
        ProximityCost(1.5)
    with pytest.raises(ValueError, match="shortest_path_factor"):
        ProximityCost(-0.1)
    assert ProximityCost(0.7).proximity_obstacle_factor == pytest.approx(0.3)


def test_proximity_cost_without_obstacles_is_weighted_distance() -> None:
    grid_map = GridMap(3, 2, resolution=0.5)
    policy = ProximityCost(0.5)
    assert policy.cost(grid_map, Coordinate(0, 0), Coordinate(0, 0.5)) == 0.25


def test_proximity_cost_penalizes_the_nearest_edge_or_wall() -> None:
    grid_map = _boxed_map()
    policy = ProximityCost(0.5)

    # nearest obstacle edge is sqrt(2) away, the left and bottom walls 1.0
    cost = policy.cost(grid_map, Coordinate(0.5, 1.0), Coordinate(1.0, 1.0))
    assert cost == pytest.approx(0.5 * 0.5 + 0.5 * 1.0)

    # next to the obstacle: edge distance 0.5 beats the wall distance 1.5
    cost = policy.cost(grid_map, Coordinate(1.0, 2.0), Coordinate(1.5, 2.0))
    assert cost == pytest.approx(0.5 * 0.5 + 0.5 * 2.0)


def test_touching_a_wall_is_effectively_infinite() -> None:
    grid_map = _boxed_map()
    penalty = ProximityCost.proximity_penalty(grid_map, Coordinate(0, 1))
    assert penalty == TOUCHING_PENALTY

    costly = ProximityCost(0.5).cost(grid_map, Coordinate(0.5, 1), Coordinate(0, 1))
    assert costly > 1e300

    # with no proximity weight the penalty vanishes entirely
    plain = ProximityCost(1.0).cost(grid_map, Coordinate(0.5, 1), Coordinate(0, 1))
    assert plain == 0.5


def test_euclidean_heuristic() -> None:
    assert euclidean_heuristic(Coordinate(0, 0), Coordinate(3, 2)) == math.hypot(3, 2)


def _boxed_map() -> GridMap:
    return GridMap(
        4,
        4,
        [Rectangle(top_left=Coordinate(2, 2), bottom_right=Coordinate(3, 3))],
        resolution=0.5,
    )
