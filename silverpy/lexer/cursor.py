"""Character cursor."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CursorCheckpoint:
    """Saved cursor position."""

    position: int


class Cursor:
    """Single-pass reader over a source unit with one character of lookahead.

    `offset` counts consumed characters from the start of the unit.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def peek(self, ahead: int = 0) -> str | None:
        """Character `ahead` positions past the next one, without consuming it."""
        index = self._position + ahead
        if index >= len(self._source):
            return None
        return self._source[index]

    def bump(self) -> str | None:
        """Consume and return the next character."""
        if self.is_eof:
            return None
        char = self._source[self._position]
        self._position += 1
        return char

    def advance(self, steps: int) -> None:
        self._position = min(self._position + steps, len(self._source))

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters matching `predicate`.

        The first non-matching character is left in place.
        """
        start = self._position
        while not self.is_eof and predicate(self._source[self._position]):
            self._position += 1
        return self._source[start : self._position]

    def skip_whitespace(self) -> int:
        """Consume a run of spaces and return how many were consumed.

        Only U+0020 counts; tabs are left for the scanner.
        """
        return len(self.take_while(lambda char: char == " "))

    def checkpoint(self) -> CursorCheckpoint:
        return CursorCheckpoint(self._position)

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._position = checkpoint.position
