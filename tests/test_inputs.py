"""
Tests for embedded inputs and the solver registry.
"""

import pytest

from aoc_solver.day2 import Game, parse_games
from aoc_solver.inputs import load_input, read_input
from aoc_solver.parsing import split_lines
from aoc_solver.solvers import SOLVERS, get_solver


class TestInputs:
    """Test input loading."""

    def test_day2_embedded(self):
        games = parse_games(load_input(2))
        assert len(games) == 100
        assert [g.id for g in games] == list(range(1, 101))

    def test_day2_lines_all_parse(self):
        lines = split_lines(load_input(2))
        assert all(Game.from_line(line) is not None for line in lines)

    def test_unknown_day(self):
        with pytest.raises(ValueError, match="No embedded input for day 9"):
            load_input(9)

    def test_read_input_file(self, tmp_path, example_text):
        path = tmp_path / "day2.txt"
        path.write_text(example_text, encoding="utf-8")
        assert read_input(str(path)) == example_text

    def test_read_input_falls_back(self):
        assert read_input(None, day=2) == load_input(2)

    def test_read_input_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Input file not found"):
            read_input(str(tmp_path / "nope.txt"))


class TestSolvers:
    """Test the day registry."""

    def test_registered(self):
        assert 2 in SOLVERS

    def test_get_solver(self, example_text):
        assert get_solver(2)(example_text) == (8, 2286)

    def test_unknown(self):
        with pytest.raises(ValueError, match="No solver for day 1 \\(available: 2\\)"):
            get_solver(1)
