"""
Day 2: the cube game.

Each input line describes one game as a list of draws, e.g.

    Game 3: 8 Green, 6 Blue, 20 Red; 5 Blue, 4 Red, 13 Green

Part 1 sums the ids of games that never exceed the bag's per-colour limit.
Part 2 sums, over all games, the product of the per-colour maxima.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .parsing import parse_batch, parse_uint

GAME_PREFIX_LEN = len("Game ")


class Color(Enum):
    """Cube colours, declared in their fixed iteration order."""
    BLUE = "Blue"
    RED = "Red"
    GREEN = "Green"

    @property
    def threshold(self) -> int:
        """Number of cubes of this colour in the bag (part 1 limit)."""
        return _THRESHOLDS[self]

    @classmethod
    def parse(cls, text: str) -> Optional["Color"]:
        """Exact, case-sensitive label match; anything else gives None."""
        for color in cls:
            if color.value == text:
                return color
        return None

    @classmethod
    def all(cls) -> Tuple["Color", ...]:
        return tuple(cls)


_THRESHOLDS = {
    Color.BLUE: 14,
    Color.RED: 12,
    Color.GREEN: 13,
}


@dataclass(frozen=True)
class Cubes:
    """One draw: the count seen per colour, None when the colour wasn't shown."""
    blue: Optional[int] = None
    red: Optional[int] = None
    green: Optional[int] = None

    def get(self, color: Color) -> Optional[int]:
        return getattr(self, color.name.lower())

    def with_count(self, color: Color, num: int) -> "Cubes":
        # later observations of the same colour overwrite earlier ones
        return replace(self, **{color.name.lower(): num})

    def to_text(self) -> str:
        return ", ".join(
            f"{num} {color.value}"
            for color in Color.all()
            for num in [self.get(color)]
            if num is not None
        )

    @classmethod
    def from_text(cls, text: str) -> "Cubes":
        """Fold the `<n> <Colour>` tokens of one draw; bad tokens are dropped."""
        cubes = cls()
        for token in text.split(", "):
            num_text, sep, label = token.partition(" ")
            if not sep:
                continue
            num = parse_uint(num_text)
            color = Color.parse(label)
            if num is None or color is None:
                continue
            cubes = cubes.with_count(color, num)
        return cubes


def _skip_prefix(line: str) -> Optional[str]:
    """
    Drop the first GAME_PREFIX_LEN bytes of the UTF-8 encoded line.

    None when the line is shorter than that, or when the cut falls inside
    a multi-byte character.
    """
    try:
        raw = line.encode("utf-8")
        if len(raw) < GAME_PREFIX_LEN:
            return None
        return raw[GAME_PREFIX_LEN:].decode("utf-8")
    except UnicodeError:
        return None


@dataclass(frozen=True)
class Game:
    id: int
    cubes: Tuple[Cubes, ...]

    @classmethod
    def from_line(cls, line: str) -> Optional["Game"]:
        rest = _skip_prefix(line)
        if rest is None:
            return None
        game_id, sep, cube_sets = rest.partition(": ")
        if not sep:
            return None
        id_ = parse_uint(game_id)
        if id_ is None:
            return None
        # an empty draw list still yields one (empty) draw
        cubes = tuple(Cubes.from_text(s) for s in cube_sets.split("; "))
        return cls(id=id_, cubes=cubes)

    def to_line(self) -> str:
        return f"Game {self.id}: " + "; ".join(c.to_text() for c in self.cubes)

    def counts(self, color: Color) -> Iterator[int]:
        """Counts observed for `color`, skipping draws that didn't show it."""
        for cubes in self.cubes:
            num = cubes.get(color)
            if num is not None:
                yield num

    def max_count(self, color: Color) -> int:
        return max(self.counts(color), default=0)

    def is_feasible(self) -> bool:
        return all(
            num <= color.threshold
            for color in Color.all()
            for num in self.counts(color)
        )

    def power(self) -> int:
        result = 1
        for color in Color.all():
            result *= self.max_count(color)
        return result


def part_1(games: Iterable[Game]) -> int:
    """Sum of ids of the games possible with the bag's cube limits."""
    return sum(game.id for game in games if game.is_feasible())


def part_2(games: Iterable[Game]) -> int:
    """Sum of the power of the minimum cube set for each game."""
    return sum(game.power() for game in games)


aggregate_feasibility = part_1
aggregate_power = part_2


def parse_games(data: str) -> Sequence[Game]:
    return parse_batch(data, Game)


def solve(data: str) -> Tuple[int, int]:
    games = parse_games(data)
    return part_1(games), part_2(games)
