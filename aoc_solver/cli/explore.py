#!/usr/bin/env python3
"""Show how the day 2 input parses, one row per game."""

from __future__ import annotations
from typing import Optional
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..day2 import Color, parse_games, part_1, part_2
from ..inputs import read_input
from ..parsing import split_lines

app = typer.Typer()
console = Console()


def format_feasible(ok: bool) -> str:
    return "[green]yes[/]" if ok else "[red]no[/]"


def build_table(games) -> Table:
    table = Table(title="Day 2: cube games")
    table.add_column("Game", justify="right", style="cyan")
    table.add_column("Draws", justify="right")
    table.add_column("Feasible", justify="center")
    for color in Color.all():
        table.add_column(f"Max {color.value}", justify="right")
    table.add_column("Power", justify="right", style="bold")

    for game in games:
        table.add_row(
            str(game.id),
            str(len(game.cubes)),
            format_feasible(game.is_feasible()),
            *[str(game.max_count(color)) for color in Color.all()],
            str(game.power()),
        )
    return table


@app.command()
def main(input_path: Optional[str] = None):
    try:
        text = read_input(input_path, day=2)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)

    games = parse_games(text)
    n_lines = len(split_lines(text))

    console.print(build_table(games))
    console.print(
        f"[bold]Lines[/]: {n_lines}  [bold]Games[/]: {len(games)}  "
        f"[bold]Skipped[/]: {n_lines - len(games)}"
    )
    console.print(f"[bold]Part 1[/]: {part_1(games)}  [bold]Part 2[/]: {part_2(games)}")


if __name__ == "__main__":
    app()
