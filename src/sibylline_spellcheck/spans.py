"""Span types and offset-to-position mapping.

Every offset in this package is a character offset into a decoded text.
:class:`LineIndex` records where each line terminator sits so that an
offset can be turned into the 1-based ``line:column`` pair shown to users.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass

LINE_TERMINATOR = "\n"


@dataclass(frozen=True, slots=True)
class Position:
    """A user-facing location. Both fields are 1-based."""

    line: int
    column: int

    def format(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class RawSpan:
    """Half-open span ``[start, end)`` flagged by a spelling provider."""

    start: int
    end: int
    text: str | None = None
    """The flagged word, when the provider reports it."""

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")


@dataclass(frozen=True, slots=True)
class TextSpan:
    """A pattern match over a text. ``matched_text`` is ``text[start:end]``."""

    start: int
    end: int
    matched_text: str


@dataclass(frozen=True, slots=True)
class Misspelling:
    """A reportable span that survived filtering."""

    start: int
    end: int
    text: str
    position: Position

    def format_position(self) -> str:
        return self.position.format()

    def format_offsets(self) -> str:
        return f"{self.start}-{self.end}"


def build_line_breaks(text: str) -> list[int]:
    """Return the offset of every line terminator in *text*, ascending."""
    breaks: list[int] = []
    pos = text.find(LINE_TERMINATOR)
    while pos != -1:
        breaks.append(pos)
        pos = text.find(LINE_TERMINATOR, pos + 1)
    return breaks


def resolve_position(breaks: list[int], offset: int) -> Position:
    """Map *offset* to a :class:`Position` using precomputed line *breaks*.

    The break that terminates the previous line is the greatest break
    strictly before *offset*. A break at index ``i`` ends line ``i + 1``,
    so the offset sits on line ``i + 2`` and its column is its distance
    past that break. Without a preceding break the offset is on line 1 and
    the column is ``offset + 1``.
    """
    # Number of breaks strictly before offset
    preceding = bisect_left(breaks, offset)
    if preceding == 0:
        return Position(line=1, column=offset + 1)
    i = preceding - 1
    return Position(line=i + 2, column=offset - breaks[i])


class LineIndex:
    """Line-break index over one decoded text.

    Built once per file; lookups are ``O(log n)`` in the number of lines.
    """

    __slots__ = ("breaks", "length")

    def __init__(self, breaks: list[int], length: int) -> None:
        self.breaks = breaks
        self.length = length

    @staticmethod
    def build(text: str) -> LineIndex:
        return LineIndex(breaks=build_line_breaks(text), length=len(text))

    @property
    def line_count(self) -> int:
        return len(self.breaks) + 1

    def resolve(self, offset: int) -> Position:
        """Resolve a character offset into this index's text.

        Raises:
            ValueError: If *offset* is outside ``[0, length]``.
        """
        if offset < 0 or offset > self.length:
            raise ValueError(f"Offset {offset} outside text of length {self.length}")
        return resolve_position(self.breaks, offset)
