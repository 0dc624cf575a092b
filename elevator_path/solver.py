"""Query orchestration: validate, build, search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .builder import build_state_tree
from .models import Query, Schedule, SolverResult
from .search import find_path
from .validation import count_transfers, validate_path, validate_query

BACKENDS = ("tree", "milp")


class SolverError(RuntimeError):
    """Raised when a backend gives up without deciding whether a path exists."""


@dataclass(slots=True)
class SolverConfig:
    backend: str = "tree"
    validate: bool = True
    time_limit: Optional[float] = None


def solve_query(schedule: Schedule, query: Query, config: SolverConfig | None = None) -> SolverResult:
    config = config or SolverConfig()
    if config.backend not in BACKENDS:
        raise ValueError(f"unknown backend {config.backend!r}; expected one of {BACKENDS}")
    validate_query(schedule, query)

    node_count = 0
    if config.backend == "milp":
        from .solvers.milp_pulp import solve_milp

        path = solve_milp(schedule, query, time_limit=config.time_limit)
    else:
        tree = build_state_tree(schedule, query.start)
        node_count = tree.node_count()
        path = find_path(tree, query.target_floor, query.target_time)

    if path is None:
        return SolverResult(path=None, transfers=0, backend=config.backend, node_count=node_count)

    if config.validate:
        validate_path(schedule, query, path)
    return SolverResult(
        path=path,
        transfers=count_transfers(query.start, path),
        backend=config.backend,
        node_count=node_count,
    )


def find_elevator_path(
    schedule: Schedule,
    start: str,
    target_floor: int,
    target_time: int,
    config: SolverConfig | None = None,
) -> SolverResult:
    """Answer one query; ``result.path is None`` means there is no solution.

    Raises `InvalidQueryError` for an unknown start elevator or a target time
    outside ``0..schedule.horizon``.
    """
    query = Query(start=start, target_floor=target_floor, target_time=target_time)
    return solve_query(schedule, query, config)
