"""
Line-oriented parsing helpers shared by every puzzle day.
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Protocol, Type, TypeVar

T = TypeVar("T", bound="FromLine")

# ids and counts are machine-sized unsigned integers
MAX_UINT = 2**64 - 1


class FromLine(Protocol):
    """Protocol for records that can be built from a single line of text."""

    @classmethod
    def from_line(cls: Type[T], line: str) -> Optional[T]:
        """
        Parse one line (without its newline) into a record.

        Returns None when the line is not a valid record. Implementations
        must not raise for malformed input.
        """
        ...


def split_lines(data: str) -> List[str]:
    """
    Split on '\\n' only; a '\\r' directly before the '\\n' is dropped too.

    A trailing newline does not produce an extra empty line. Other line
    boundaries that str.splitlines() knows (form feed, U+2028, ...) stay
    inside the line.
    """
    *lines, last = data.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def parse_lines(data: str, record_type: Type[T]) -> Iterator[T]:
    """Yield a record for every line of `data` that parses, in input order."""
    for line in split_lines(data):
        record = record_type.from_line(line)
        if record is not None:
            yield record


def parse_batch(data: str, record_type: Type[T]) -> List[T]:
    """Parse all of `data` into a list, silently dropping unparseable lines."""
    return list(parse_lines(data, record_type))


def parse_uint(text: str) -> Optional[int]:
    """
    Parse a non-negative decimal integer no larger than MAX_UINT.

    Accepts an optional leading '+' followed by ASCII digits only; anything
    else (whitespace, '-', underscores, empty text, overflow) gives None.
    """
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > MAX_UINT:
        return None
    return value
