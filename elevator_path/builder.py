"""Construction of the reachable (elevator, floor, time) state graph."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .models import Schedule, StateNode, StateTree

StateKey = Tuple[str, int]


def _continuations(schedule: Schedule, node: StateNode) -> List[Tuple[str, int]]:
    column = node.time
    continuation = schedule.floor_at(node.elevator, column)
    if continuation is None:
        return []

    moves = [(node.elevator, continuation)]
    for label in schedule.elevators:
        if label == node.elevator:
            continue
        if schedule.floor_at(label, column) == continuation:
            moves.append((label, continuation))
    return moves


def build_state_tree(schedule: Schedule, start: str) -> StateTree:
    """Materialise every state reachable from `start` at time 0.

    The node at time ``t >= 1`` rides its elevator on ``floors[t - 1]``; the
    root shares column 0 with its first children. Staying is always the first
    child, transfers follow in schedule order. There is one node per
    (elevator, time) pair and parents reaching the same pair share it.
    """
    root = StateNode(elevator=start, floor=schedule.elevators[start][0], time=0)
    states: Dict[StateKey, StateNode] = {(start, 0): root}

    queue = [root]
    pointer = 0
    while pointer < len(queue):
        current = queue[pointer]
        pointer += 1
        for label, floor in _continuations(schedule, current):
            key = (label, current.time + 1)
            child = states.get(key)
            if child is None:
                child = StateNode(elevator=label, floor=floor, time=current.time + 1)
                states[key] = child
                queue.append(child)
            current.add_child(child)

    return StateTree(root=root)
