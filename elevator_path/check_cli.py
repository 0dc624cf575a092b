"""CLI wrapper to validate an existing elevator path against a case."""

from __future__ import annotations

import argparse
import sys

from .cli import read_problem, resolve_query
from .parser import ProblemFormatError
from .postprocess import format_path, path_from_text
from .validation import InvalidQueryError, PathValidationError, count_transfers, validate_path, validate_query


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate an elevator path such as AABDD against a schedule.")
    parser.add_argument("--input", "-i", help="Path to a text or JSON case file (reads stdin when omitted)")
    parser.add_argument("--path", "-p", required=True, help="Elevator sequence, e.g. AABDD or E1,E1,E2")
    parser.add_argument("--start", "-s", help="Starting elevator label (overrides the case file)")
    parser.add_argument("--destination", "-d", help="Target as FLOOR-TIME (overrides the case file)")
    args = parser.parse_args(argv)

    try:
        problem = read_problem(args.input)
        query = resolve_query(problem, args.start, args.destination)
        validate_query(problem.schedule, query)
    except (ProblemFormatError, InvalidQueryError) as exc:
        print(f"Failed to parse problem: {exc}", file=sys.stderr)
        return 2

    path = path_from_text(args.path)
    try:
        validate_path(problem.schedule, query, path)
    except PathValidationError as exc:
        print(f"Validation failed: {exc}", file=sys.stderr)
        return 3

    print(f"Valid path: {format_path(path)} ({count_transfers(query.start, path)} transfers)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
