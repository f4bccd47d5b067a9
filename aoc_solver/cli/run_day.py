#!/usr/bin/env python3
"""Solve one day's puzzle and print both answers."""

from __future__ import annotations
from typing import Optional
import orjson
import typer
from rich.console import Console
from rich.markup import escape

from ..core.env import load_env, get_default_day, get_input_path
from ..inputs import read_input
from ..parsing import parse_batch, split_lines
from ..solvers import get_record_type, get_solver

app = typer.Typer()
err_console = Console(stderr=True)


def run_day(day: int, input_path: Optional[str] = None, verbose: bool = False) -> tuple[int, int]:
    """Read the input for `day` and return (part 1, part 2)."""
    solve = get_solver(day)
    text = read_input(input_path, day)
    if verbose:
        source = input_path or "embedded input"
        n_lines = len(split_lines(text))
        n_records = len(parse_batch(text, get_record_type(day)))
        err_console.print(f"[cyan]Day {day}[/]: reading {escape(source)}")
        err_console.print(
            f"lines={n_lines} parsed={n_records} skipped={n_lines - n_records}"
        )
    return solve(text)


@app.command()
def main(
    day: Optional[int] = typer.Option(None, help="Puzzle day (default: $AOC_DAY or 2)."),
    input_path: Optional[str] = typer.Option(None, help="Read input from a file instead of the embedded text."),
    as_json: bool = typer.Option(False, "--json", help="Print answers as a JSON object."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print diagnostics to stderr."),
):
    try:
        found = load_env()
        if verbose and found:
            err_console.print(f"[dim]env: {escape(str(found))}[/]")
        if day is None:
            day = get_default_day()
        part_1, part_2 = run_day(day, input_path or get_input_path(), verbose=verbose)
    except (ValueError, FileNotFoundError) as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)

    if as_json:
        print(orjson.dumps({"day": day, "part_1": part_1, "part_2": part_2}).decode())
    else:
        print(part_1)
        print(part_2)


if __name__ == "__main__":
    app()
