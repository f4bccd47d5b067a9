"""
Tests for the command line entry points.
"""

import orjson
from typer.testing import CliRunner

from aoc_solver.cli.explore import app as explore_app
from aoc_solver.cli.run_day import app, run_day
from aoc_solver.day2 import solve
from aoc_solver.inputs import load_input

runner = CliRunner()


class TestRunDay:
    """Test the solve command."""

    def test_embedded_input(self, clean_env):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert result.stdout == "{}\n{}\n".format(*solve(load_input(2)))

    def test_input_path(self, clean_env, example_text):
        path = clean_env / "example.txt"
        path.write_text(example_text)
        result = runner.invoke(app, ["--input-path", str(path)])
        assert result.exit_code == 0
        assert result.stdout == "8\n2286\n"

    def test_input_path_from_env(self, clean_env, example_text, monkeypatch):
        path = clean_env / "example.txt"
        path.write_text(example_text)
        monkeypatch.setenv("AOC_INPUT_PATH", str(path))
        result = runner.invoke(app, [])
        assert result.stdout == "8\n2286\n"

    def test_json(self, clean_env, example_text):
        path = clean_env / "example.txt"
        path.write_text(example_text)
        result = runner.invoke(app, ["--input-path", str(path), "--json"])
        assert result.exit_code == 0
        assert orjson.loads(result.stdout) == {"day": 2, "part_1": 8, "part_2": 2286}

    def test_unknown_day(self, clean_env):
        result = runner.invoke(app, ["--day", "3"])
        assert result.exit_code == 1
        assert "No solver for day 3" in result.output

    def test_missing_file(self, clean_env):
        result = runner.invoke(app, ["--input-path", str(clean_env / "nope.txt")])
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_verbose(self, clean_env, example_text):
        path = clean_env / "example.txt"
        path.write_text(example_text + "\ngarbage\n")
        result = runner.invoke(app, ["--input-path", str(path), "--verbose"])
        assert result.exit_code == 0
        assert result.stdout == "8\n2286\n"
        assert "Day 2" in result.stderr
        assert "lines=6 parsed=5 skipped=1" in result.stderr

    def test_run_day_function(self, clean_env, example_text):
        path = clean_env / "example.txt"
        path.write_text(example_text)
        assert run_day(2, str(path)) == (8, 2286)


class TestExplore:
    """Test the explore command."""

    def test_summary(self, clean_env, example_text):
        path = clean_env / "example.txt"
        path.write_text(example_text + "\nnot a game\n")
        result = runner.invoke(explore_app, ["--input-path", str(path)])
        assert result.exit_code == 0
        assert "Games: 5" in result.output
        assert "Skipped: 1" in result.output
        assert "Part 1: 8" in result.output
        assert "Part 2: 2286" in result.output
