"""Legality checks for queries and elevator paths."""

from __future__ import annotations

from typing import Sequence

from .models import Query, Schedule


class InvalidQueryError(ValueError):
    """Raised when a query cannot be answered against a schedule."""


class PathValidationError(ValueError):
    """Raised when a path breaks the schedule."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise PathValidationError(message)


def validate_query(schedule: Schedule, query: Query) -> None:
    if not schedule.elevators:
        raise InvalidQueryError("schedule has no elevators")
    if query.start not in schedule:
        raise InvalidQueryError(f"starting elevator {query.start!r} is not in the schedule")
    if query.target_time < 0:
        raise InvalidQueryError(f"target time {query.target_time} is negative")
    if query.target_time > schedule.horizon:
        raise InvalidQueryError(
            f"target time {query.target_time} is beyond the schedule horizon {schedule.horizon}"
        )


def count_transfers(start: str, path: Sequence[str]) -> int:
    transfers = 0
    previous = start
    for elevator in path:
        if elevator != previous:
            transfers += 1
        previous = elevator
    return transfers


def validate_path(schedule: Schedule, query: Query, path: Sequence[str]) -> None:
    """Replay `path` from the query start and raise `PathValidationError` on failure."""
    _require(
        len(path) == query.target_time,
        f"path has {len(path)} steps, expected {query.target_time}",
    )

    previous = query.start
    for column, elevator in enumerate(path):
        _require(elevator in schedule, f"step {column + 1} uses unknown elevator {elevator!r}")
        if elevator == previous:
            continue
        here = schedule.floor_at(previous, column)
        there = schedule.floor_at(elevator, column)
        _require(
            here is not None and here == there,
            f"step {column + 1} transfers from {previous} (floor {here}) to {elevator} (floor {there})",
        )
        previous = elevator

    if path:
        final_floor = schedule.floor_at(path[-1], query.target_time - 1)
    else:
        final_floor = schedule.floor_at(query.start, 0)
    _require(
        final_floor == query.target_floor,
        f"path ends on floor {final_floor} at time {query.target_time}, expected {query.target_floor}",
    )
