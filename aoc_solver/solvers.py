from __future__ import annotations
from typing import Callable, Dict, Tuple, Type

from . import day2
from .parsing import FromLine

Solver = Callable[[str], Tuple[int, int]]

# day number -> solve(text) returning (part 1, part 2)
SOLVERS: Dict[int, Solver] = {
    2: day2.solve,
}

# day number -> record type each input line parses into
RECORD_TYPES: Dict[int, Type[FromLine]] = {
    2: day2.Game,
}


def _available() -> str:
    return ", ".join(str(d) for d in sorted(SOLVERS))


def get_solver(day: int) -> Solver:
    try:
        return SOLVERS[day]
    except KeyError:
        raise ValueError(f"No solver for day {day} (available: {_available()})") from None


def get_record_type(day: int) -> Type[FromLine]:
    try:
        return RECORD_TYPES[day]
    except KeyError:
        raise ValueError(f"No solver for day {day} (available: {_available()})") from None
