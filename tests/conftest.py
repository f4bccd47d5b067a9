"""
Shared fixtures for the solver tests.
"""

import pytest

EXAMPLE = """\
Game 1: 3 Blue, 4 Red; 1 Red, 2 Green, 6 Blue; 2 Green
Game 2: 1 Blue, 2 Green; 3 Green, 4 Blue, 1 Red; 1 Green, 1 Blue
Game 3: 8 Green, 6 Blue, 20 Red; 5 Blue, 4 Red, 13 Green; 5 Green, 1 Red
Game 4: 1 Green, 3 Red, 6 Blue; 3 Green, 6 Red; 3 Green, 15 Blue, 14 Red
Game 5: 6 Red, 1 Blue, 3 Green; 2 Blue, 1 Red, 2 Green"""


@pytest.fixture
def example_text():
    return EXAMPLE


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from a developer's .env and AOC_* variables."""
    # setenv first so teardown removes anything a loaded .env adds
    for key in ("AOC_DAY", "AOC_INPUT_PATH"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / "missing.env"))
    return tmp_path
