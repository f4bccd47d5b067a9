"""
Tests for environment configuration.
"""

import os

import pytest

from aoc_solver.core.env import get_default_day, get_input_path, load_env


class TestEnv:
    """Test .env loading and typed accessors."""

    def test_defaults(self, clean_env):
        assert load_env() == {}
        assert get_default_day() == 2
        assert get_input_path() is None

    def test_load_from_dotenv(self, clean_env):
        env_file = clean_env / ".env"
        env_file.write_text("AOC_DAY=2\nAOC_INPUT_PATH=inputs/day2.txt\n")
        found = load_env(str(env_file))
        assert found == {"AOC_DAY": "2", "AOC_INPUT_PATH": "inputs/day2.txt"}
        assert get_input_path() == "inputs/day2.txt"

    def test_environment_wins_over_file(self, clean_env, monkeypatch):
        monkeypatch.setenv("AOC_DAY", "5")
        env_file = clean_env / ".env"
        env_file.write_text("AOC_DAY=2\n")
        load_env(str(env_file))
        assert os.environ["AOC_DAY"] == "5"
        assert get_default_day() == 5

    def test_bad_day(self, clean_env, monkeypatch):
        monkeypatch.setenv("AOC_DAY", "two")
        with pytest.raises(ValueError, match="AOC_DAY must be an integer"):
            get_default_day()
