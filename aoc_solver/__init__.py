"""
Advent of Code solvers - Core modules.
"""

from .parsing import FromLine, split_lines, parse_lines, parse_batch
from .day2 import Color, Cubes, Game, aggregate_feasibility, aggregate_power
from .inputs import load_input, read_input
from .solvers import SOLVERS, get_solver

__all__ = [
    "FromLine",
    "split_lines",
    "parse_lines",
    "parse_batch",
    "Color",
    "Cubes",
    "Game",
    "aggregate_feasibility",
    "aggregate_power",
    "load_input",
    "read_input",
    "SOLVERS",
    "get_solver",
]
