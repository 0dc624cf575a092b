"""Input parsing for schedules, destinations and full path-finding cases.

In the text format each line is `LABEL f0 f1 ...`; lines starting with
`start` or `destination` are directives, so those words cannot name an
elevator in either format.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import Problem, Query, Schedule


class ProblemFormatError(ValueError):
    """Raised when an input file or token cannot be parsed."""


RESERVED_LABELS = ("start", "destination")


def _parse_int(token: str, what: str) -> int:
    digits = token[1:] if token[:1] in "+-" else token
    if not (digits.isascii() and digits.isdigit()):
        raise ProblemFormatError(f"{what} must be an integer, got {token!r}")
    return int(token)


def _json_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProblemFormatError(f"{what} must be an integer, got {value!r}")
    return value


def parse_destination(token: str) -> Tuple[int, int]:
    """Split a ``floor-time`` token such as ``"5-5"`` into ``(floor, time)``."""
    parts = token.strip().split("-")
    if len(parts) != 2 or not all(parts):
        raise ProblemFormatError(f"destination must look like FLOOR-TIME, got {token!r}")
    floor = _parse_int(parts[0], "destination floor")
    time_step = _parse_int(parts[1], "destination time")
    return floor, time_step


def _build_schedule(rows: List[Tuple[str, List[object]]], convert: Callable[[Any, str], int]) -> Schedule:
    if not rows:
        raise ProblemFormatError("input is empty; expected at least one elevator")

    elevators: Dict[str, Tuple[int, ...]] = {}
    for label, raw_floors in rows:
        if label in RESERVED_LABELS:
            raise ProblemFormatError(f"{label!r} is reserved and cannot name an elevator")
        if label in elevators:
            raise ProblemFormatError(f"elevator {label!r} is defined twice")
        floors = tuple(convert(value, f"floor of elevator {label!r}") for value in raw_floors)
        if not floors:
            raise ProblemFormatError(f"elevator {label!r} has no floors")
        if any(floor <= 0 for floor in floors):
            raise ProblemFormatError(f"elevator {label!r} has a non-positive floor")
        elevators[label] = floors

    lengths = {len(floors) for floors in elevators.values()}
    if len(lengths) != 1:
        raise ProblemFormatError(f"elevators have differing schedule lengths: {sorted(lengths)}")
    return Schedule(elevators=elevators)


def _make_query(start: Optional[str], destination: Optional[str]) -> Optional[Query]:
    if start is None and destination is None:
        return None
    if start is None or destination is None:
        raise ProblemFormatError("a case needs both a start elevator and a destination")
    floor, time_step = parse_destination(destination)
    return Query(start=start, target_floor=floor, target_time=time_step)


def _parse_from_lines(raw_text: str) -> Problem:
    rows: List[Tuple[str, List[object]]] = []
    start: Optional[str] = None
    destination: Optional[str] = None

    for line in raw_text.splitlines():
        tokens = line.split("#", 1)[0].split()
        if not tokens:
            continue
        keyword = tokens[0]
        if keyword in RESERVED_LABELS:
            if len(tokens) != 2:
                raise ProblemFormatError(f"invalid {keyword} line: {line.strip()!r}")
            if keyword == "start":
                start = tokens[1]
            else:
                destination = tokens[1]
            continue
        rows.append((keyword.rstrip(":"), list(tokens[1:])))

    return Problem(schedule=_build_schedule(rows, _parse_int), query=_make_query(start, destination))


def _parse_from_json(payload: object) -> Problem:
    if not isinstance(payload, dict):
        raise ProblemFormatError("JSON input must be an object")

    if "elevators" in payload:
        elevator_payload = payload["elevators"]
        start = payload.get("start")
        destination = payload.get("destination")
    else:
        elevator_payload = payload
        start = destination = None

    if not isinstance(elevator_payload, dict):
        raise ProblemFormatError("'elevators' must map labels to floor lists")
    rows: List[Tuple[str, List[object]]] = []
    for label, floors in elevator_payload.items():
        if not isinstance(floors, list):
            raise ProblemFormatError(f"floors of elevator {label!r} must be a list")
        rows.append((str(label), floors))

    if start is not None:
        start = str(start)
    if destination is not None:
        destination = str(destination)
    return Problem(schedule=_build_schedule(rows, _json_int), query=_make_query(start, destination))


def parse_problem_from_text(raw_text: str) -> Problem:
    """Parse either the line-oriented text format or JSON definitions."""
    stripped = raw_text.lstrip()
    if not stripped:
        raise ProblemFormatError("input is empty; expected a schedule definition")
    if stripped[0] in "{[":
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise ProblemFormatError(f"invalid JSON: {exc}") from exc
        return _parse_from_json(payload)
    return _parse_from_lines(raw_text)


def load_problem(path: str | Path) -> Problem:
    """Load a case from `path` or raise `ProblemFormatError`."""
    try:
        raw_text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ProblemFormatError(f"failed to read {path}: {exc}") from exc
    return parse_problem_from_text(raw_text)
