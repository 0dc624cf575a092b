"""High-level entry points for the elevator transfer path finder."""

from .builder import build_state_tree
from .models import Problem, Query, Schedule, SolverResult, StateNode, StateTree
from .parser import ProblemFormatError, load_problem, parse_destination, parse_problem_from_text
from .search import find_path
from .solver import SolverConfig, find_elevator_path, solve_query
from .validation import InvalidQueryError, PathValidationError, validate_path

__all__ = [
    "build_state_tree",
    "find_path",
    "find_elevator_path",
    "solve_query",
    "SolverConfig",
    "SolverResult",
    "Schedule",
    "Query",
    "Problem",
    "StateNode",
    "StateTree",
    "load_problem",
    "parse_destination",
    "parse_problem_from_text",
    "ProblemFormatError",
    "InvalidQueryError",
    "PathValidationError",
    "validate_path",
]
