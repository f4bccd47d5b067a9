"""
CLI commands for running the puzzle solvers.
"""

from .run_day import main as solve_day
from .explore import main as explore_games

__all__ = [
    "solve_day",
    "explore_games",
]
