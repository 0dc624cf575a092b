from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pulp

from ..models import Query, Schedule
from ..solver import SolverError


def _co_located(schedule: Schedule, a: str, b: str, column: int) -> bool:
    if a == b:
        return True
    floor = schedule.floor_at(a, column)
    return floor is not None and floor == schedule.floor_at(b, column)


def solve_milp(
    schedule: Schedule,
    query: Query,
    *,
    time_limit: Optional[float] = None,
    solver: Optional[pulp.LpSolver] = None,
) -> Optional[List[str]]:
    """Fewest-transfer path as a MILP using PuLP (CBC by default).

    x[t, e] = 1 when the rider is on elevator e during step t (1-based);
    s[t] = 1 when step t boards a different elevator than step t - 1.
    Returns ``None`` when the model is infeasible and raises `SolverError`
    when CBC stops (e.g. on its time limit) before deciding either way.
    """
    start = query.start
    steps = query.target_time
    labels = schedule.labels
    index = {label: position for position, label in enumerate(labels)}

    if steps == 0:
        return [] if schedule.floor_at(start, 0) == query.target_floor else None

    m = pulp.LpProblem("elevator_transfers", pulp.LpMinimize)

    x_vars: Dict[Tuple[int, str], pulp.LpVariable] = {}
    s_vars: Dict[int, pulp.LpVariable] = {}
    for t in range(1, steps + 1):
        column = t - 1
        s_vars[t] = pulp.LpVariable(f"s_{t}", lowBound=0.0, upBound=1.0)
        for label in labels:
            # Step 1 can only board elevators sharing the start's column-0 floor.
            if t == 1 and not _co_located(schedule, start, label, column):
                continue
            x_vars[(t, label)] = pulp.LpVariable(f"x_{t}_{index[label]}", cat="Binary")

    # 1) Exactly one elevator per step
    for t in range(1, steps + 1):
        m += (
            pulp.lpSum(x_vars[(t, label)] for label in labels if (t, label) in x_vars) == 1
        ), f"one_elevator_t{t}"

    # 2) Consecutive steps must be a stay or a co-located transfer
    for t in range(2, steps + 1):
        column = t - 1
        for prev in labels:
            if (t - 1, prev) not in x_vars:
                continue
            for label in labels:
                if (t, label) not in x_vars or _co_located(schedule, prev, label, column):
                    continue
                m += (x_vars[(t - 1, prev)] + x_vars[(t, label)] <= 1), f"no_jump_t{t}_{index[prev]}_{index[label]}"

    # 3) Final step sits on the target floor
    for label in labels:
        key = (steps, label)
        if key in x_vars and schedule.floor_at(label, steps - 1) != query.target_floor:
            m += (x_vars[key] == 0), f"target_{index[label]}"

    # 4) Transfer indicators: s_t >= x[t, e] - x[t-1, e]
    for t in range(1, steps + 1):
        for label in labels:
            if (t, label) not in x_vars:
                continue
            if t == 1:
                if label != start:
                    m += (s_vars[t] >= x_vars[(t, label)]), f"transfer_t{t}_{index[label]}"
                continue
            previous = x_vars.get((t - 1, label), 0)
            m += (s_vars[t] >= x_vars[(t, label)] - previous), f"transfer_t{t}_{index[label]}"

    m += pulp.lpSum(s_vars.values())

    if solver is None:
        solver = pulp.PULP_CBC_CMD(msg=False, timeLimit=time_limit)
    m.solve(solver)

    status = pulp.LpStatus[m.status]
    if status == "Infeasible":
        return None
    if status not in {"Optimal", "Feasible"}:
        raise SolverError(f"MILP backend stopped without a decision (status {status!r})")

    path: List[str] = []
    for t in range(1, steps + 1):
        chosen = max(
            (label for label in labels if (t, label) in x_vars),
            key=lambda label: x_vars[(t, label)].value() or 0.0,
        )
        path.append(chosen)
    return path
