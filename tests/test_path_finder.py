from __future__ import annotations

from pathlib import Path

import pytest

from elevator_path.builder import build_state_tree
from elevator_path.generator import generate_schedule
from elevator_path.models import Query, Schedule
from elevator_path.parser import load_problem
from elevator_path.search import find_path
from elevator_path.solver import SolverConfig, find_elevator_path, solve_query
from elevator_path.validation import InvalidQueryError, count_transfers, validate_path

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def _schedule(table):
    return Schedule(elevators={label: tuple(floors) for label, floors in table.items()})


SCENARIO_1 = _schedule(
    {
        "A": [1, 4, 3, 2, 2],
        "B": [3, 3, 3, 4, 2],
        "C": [2, 2, 6, 6, 6],
        "D": [6, 1, 1, 4, 5],
    }
)


def _reachable(schedule: Schedule, start: str, target_floor: int, target_time: int) -> bool:
    # Layered reachability, independent of the tree.
    if target_time == 0:
        return schedule.floor_at(start, 0) == target_floor
    layer = {start}
    for column in range(target_time):
        layer = {
            label
            for previous in layer
            for label in schedule.elevators
            if label == previous or schedule.floor_at(label, column) == schedule.floor_at(previous, column)
        }
    return any(schedule.floor_at(label, target_time - 1) == target_floor for label in layer)


def test_scenario_one_path():
    result = find_elevator_path(SCENARIO_1, "A", 5, 5)
    assert result.found
    assert result.path == ["A", "A", "B", "D", "D"]
    assert result.transfers == 2


def test_scenario_two_path():
    problem = load_problem(EXAMPLES / "scenario2.json")
    result = solve_query(problem.schedule, problem.query)
    assert result.path == ["D", "E", "E", "C", "A", "A"]
    assert result.transfers == 4


def test_scenario_three_has_no_solution():
    problem = load_problem(EXAMPLES / "scenario3.json")
    result = solve_query(problem.schedule, problem.query)
    assert not result.found
    assert result.path is None


def test_root_matches_start():
    tree = build_state_tree(SCENARIO_1, "C")
    assert tree.root.elevator == "C"
    assert tree.root.floor == 2
    assert tree.root.time == 0


def test_children_advance_one_step_and_share_floor():
    tree = build_state_tree(SCENARIO_1, "A")
    for node in tree.iter_breadth_first():
        for child in node.children:
            assert child.time == node.time + 1
            assert child.floor == SCENARIO_1.elevators[child.elevator][node.time]
            assert child.floor == SCENARIO_1.elevators[node.elevator][node.time]
        if node.children:
            assert node.children[0].elevator == node.elevator
    assert tree.depth() == SCENARIO_1.horizon


def test_tree_layout_for_scenario_one():
    tree = build_state_tree(SCENARIO_1, "A")
    level_three = [node for node in tree.iter_breadth_first() if node.time == 3]
    assert [(node.elevator, node.floor) for node in level_three] == [("A", 3), ("B", 3)]
    assert tree.node_count() == 11


def test_mutual_transfers_share_states():
    schedule = _schedule({"A": [2, 2, 2], "B": [2, 2, 2]})
    tree = build_state_tree(schedule, "A")
    assert tree.node_count() == 1 + 2 + 2 + 2
    assert find_path(tree, 2, 3) == ["A", "A", "A"]
    step_one = tree.root.children
    assert [child.elevator for child in step_one] == ["A", "B"]
    assert step_one[0].children[1] is step_one[1].children[0]


def test_long_co_located_horizon_stays_small():
    horizon = 40
    schedule = _schedule({label: [2] * horizon for label in "ABC"})
    tree = build_state_tree(schedule, "A")
    assert tree.node_count() == 1 + 3 * horizon
    assert find_path(tree, 2, horizon) == ["A"] * horizon
    assert find_path(tree, 3, horizon) is None
    assert not find_elevator_path(schedule, "B", 3, horizon).found


def test_target_time_zero_returns_empty_path():
    result = find_elevator_path(SCENARIO_1, "A", 1, 0)
    assert result.found
    assert result.path == []
    assert not find_elevator_path(SCENARIO_1, "A", 4, 0).found


def test_search_ignores_unreachable_depth():
    tree = build_state_tree(SCENARIO_1, "A")
    assert find_path(tree, 5, 9) is None
    assert find_path(tree, 5, -1) is None


def test_unknown_start_is_rejected():
    with pytest.raises(InvalidQueryError):
        find_elevator_path(SCENARIO_1, "Z", 5, 5)


@pytest.mark.parametrize("target_time", [-1, 6])
def test_target_time_outside_horizon_is_rejected(target_time):
    with pytest.raises(InvalidQueryError):
        find_elevator_path(SCENARIO_1, "A", 5, target_time)


def test_empty_schedule_is_rejected():
    with pytest.raises(InvalidQueryError):
        find_elevator_path(Schedule(elevators={}), "A", 1, 1)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        find_elevator_path(SCENARIO_1, "A", 5, 5, SolverConfig(backend="bfs"))


def test_repeated_queries_are_deterministic():
    first = find_elevator_path(SCENARIO_1, "A", 5, 5)
    second = find_elevator_path(SCENARIO_1, "A", 5, 5)
    assert first == second


@pytest.mark.parametrize("seed", range(8))
def test_generated_schedules_agree_with_layered_reachability(seed):
    schedule = generate_schedule(elevators=4, horizon=6, floors=4, seed=seed)
    tree = build_state_tree(schedule, "A")
    for target_time in range(schedule.horizon + 1):
        for target_floor in range(1, 5):
            path = find_path(tree, target_floor, target_time)
            assert (path is not None) == _reachable(schedule, "A", target_floor, target_time)
            if path is not None:
                validate_path(schedule, Query("A", target_floor, target_time), path)


def test_count_transfers():
    assert count_transfers("A", ["A", "A", "B", "D", "D"]) == 2
    assert count_transfers("B", []) == 0
