"""Command-line interface for the elevator path finder."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .models import Problem, Query
from .parser import ProblemFormatError, load_problem, parse_destination, parse_problem_from_text
from .postprocess import result_to_dict, result_to_text
from .solver import BACKENDS, SolverConfig, SolverError, solve_query
from .validation import InvalidQueryError, PathValidationError


def resolve_query(problem: Problem, start: str | None, destination: str | None) -> Query:
    """Merge command-line overrides into the query stored with the case."""
    query = problem.query
    if destination is not None:
        floor, time_step = parse_destination(destination)
    elif query is not None:
        floor, time_step = query.target_floor, query.target_time
    else:
        raise ProblemFormatError("no destination given; pass --destination FLOOR-TIME")

    if start is None:
        if query is None:
            raise ProblemFormatError("no start elevator given; pass --start LABEL")
        start = query.start
    return Query(start=start, target_floor=floor, target_time=time_step)


def read_problem(path: str | None) -> Problem:
    if path:
        return load_problem(path)
    return parse_problem_from_text(sys.stdin.read())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find an elevator transfer path to a floor at a given time",
        epilog="A target time of 0 needs no moves and prints (stay) when the start floor matches.",
    )
    parser.add_argument("--input", "-i", help="Path to a text or JSON case file (reads stdin when omitted)")
    parser.add_argument("--start", "-s", help="Starting elevator label (overrides the case file)")
    parser.add_argument("--destination", "-d", help="Target as FLOOR-TIME, e.g. 5-5 (overrides the case file)")
    parser.add_argument("--solver", choices=BACKENDS, default="tree", help="Search backend")
    parser.add_argument("--time-limit", type=float, help="Time limit for the MILP backend (seconds)")
    parser.add_argument("--no-validate", action="store_true", help="Skip replaying the found path")
    parser.add_argument("--output-json", help="Optional file to write the result as JSON")
    parser.add_argument("--stats", action="store_true", help="Print search statistics to stderr")
    args = parser.parse_args(argv)

    try:
        problem = read_problem(args.input)
        query = resolve_query(problem, args.start, args.destination)
    except ProblemFormatError as exc:
        print(f"Failed to parse problem: {exc}", file=sys.stderr)
        return 2

    config = SolverConfig(backend=args.solver, validate=not args.no_validate, time_limit=args.time_limit)
    try:
        result = solve_query(problem.schedule, query, config)
    except InvalidQueryError as exc:
        print(f"Invalid query: {exc}", file=sys.stderr)
        return 2
    except PathValidationError as exc:
        print(f"Path validation failed: {exc}", file=sys.stderr)
        return 3
    except SolverError as exc:
        print(f"Solver failed: {exc}", file=sys.stderr)
        return 4

    print(result_to_text(result))

    if args.stats:
        print(
            f"backend={result.backend} nodes={result.node_count} "
            f"transfers={result.transfers if result.found else '-'}",
            file=sys.stderr,
        )

    if args.output_json:
        payload = result_to_dict(query, result)
        Path(args.output_json).write_text(json.dumps(payload, indent=2), encoding="utf-8")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
