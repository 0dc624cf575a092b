"""Depth-first search for a destination node in a built state graph."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from .models import StateNode, StateTree


def find_path(tree: StateTree, target_floor: int, target_time: int) -> Optional[List[str]]:
    """Return the elevator sequence for steps ``1..target_time`` or ``None``.

    Nodes are visited in pre-order following child insertion order, so the
    answer is the first match under the build order, not the one with the
    fewest transfers. Each stack entry carries its own root-to-node prefix.
    """
    if target_time < 0:
        return None

    # A state popped a second time had its whole subtree searched already:
    # nothing at the same time can sit below it, so that search failed.
    explored: Set[Tuple[str, int]] = set()
    stack: List[Tuple[StateNode, Tuple[str, ...]]] = [(tree.root, ())]
    while stack:
        node, prefix = stack.pop()
        key = (node.elevator, node.time)
        if key in explored:
            continue
        explored.add(key)
        if node.time == target_time:
            if node.floor == target_floor:
                return list(prefix)
            continue
        for child in reversed(node.children):
            stack.append((child, prefix + (child.elevator,)))
    return None
