# aoc_solver/core/env.py
from __future__ import annotations
import os
from typing import Optional
from dotenv import load_dotenv

KNOWN_KEYS = [
    "AOC_DAY",          # default day for the CLI
    "AOC_INPUT_PATH",   # read input from this file instead of the embedded text
]

DEFAULT_DAY = 2

def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns the known keys that are set and their values.
    Variables already present in the environment win over the file.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = v
    return found

def get_default_day() -> int:
    raw = os.getenv("AOC_DAY")
    if not raw:
        return DEFAULT_DAY
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"AOC_DAY must be an integer, got {raw!r}") from None

def get_input_path() -> Optional[str]:
    return os.getenv("AOC_INPUT_PATH") or None
