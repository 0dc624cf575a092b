"""Core data structures shared by the path-finding modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(slots=True)
class Schedule:
    """Floor of every elevator at every time column, in insertion order."""

    elevators: Dict[str, Tuple[int, ...]]

    @property
    def horizon(self) -> int:
        for floors in self.elevators.values():
            return len(floors)
        return 0

    @property
    def labels(self) -> List[str]:
        return list(self.elevators)

    def floor_at(self, elevator: str, column: int) -> Optional[int]:
        floors = self.elevators[elevator]
        if 0 <= column < len(floors):
            return floors[column]
        return None

    def __contains__(self, elevator: object) -> bool:
        return elevator in self.elevators


@dataclass(slots=True)
class Query:
    start: str
    target_floor: int
    target_time: int


@dataclass(slots=True)
class Problem:
    schedule: Schedule
    query: Optional[Query] = None


@dataclass(slots=True, eq=False)
class StateNode:
    elevator: str
    floor: int
    time: int
    children: List["StateNode"] = field(default_factory=list, repr=False)

    def add_child(self, node: "StateNode") -> None:
        self.children.append(node)


@dataclass(slots=True)
class StateTree:
    root: StateNode

    def iter_breadth_first(self) -> Iterator[StateNode]:
        """Yield each (elevator, time) state once, level by level."""
        queue = [self.root]
        seen = {(self.root.elevator, self.root.time)}
        pointer = 0
        while pointer < len(queue):
            node = queue[pointer]
            pointer += 1
            for child in node.children:
                key = (child.elevator, child.time)
                if key not in seen:
                    seen.add(key)
                    queue.append(child)
            yield node

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_breadth_first())

    def depth(self) -> int:
        return max(node.time for node in self.iter_breadth_first())


@dataclass(slots=True)
class SolverResult:
    path: Optional[List[str]]
    transfers: int
    backend: str
    node_count: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None
