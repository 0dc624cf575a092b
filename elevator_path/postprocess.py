"""Path formatting and serialisation utilities."""

from __future__ import annotations

from typing import List, Sequence

from .models import Query, SolverResult

NO_SOLUTION_MESSAGE = "There is no solution"
EMPTY_PATH_MESSAGE = "(stay)"


def format_path(path: Sequence[str]) -> str:
    if all(len(label) == 1 for label in path):
        return "".join(path)
    return ",".join(path)


def path_from_text(text: str) -> List[str]:
    stripped = text.strip()
    if "," in stripped:
        return [part.strip() for part in stripped.split(",") if part.strip()]
    if any(ch.isspace() for ch in stripped):
        return stripped.split()
    return list(stripped)


def result_to_text(result: SolverResult) -> str:
    if result.path is None:
        return NO_SOLUTION_MESSAGE
    if not result.path:
        return EMPTY_PATH_MESSAGE
    return format_path(result.path)


def result_to_dict(query: Query, result: SolverResult) -> dict:
    return {
        "start": query.start,
        "destination": {"floor": query.target_floor, "time": query.target_time},
        "backend": result.backend,
        "found": result.found,
        "path": result.path,
        "transfers": result.transfers if result.found else None,
        "node_count": result.node_count,
    }
