"""Indentation tracking.

Works like Python's indentation rules: a stack of open widths, bottom-anchored
at zero, compared against the leading spaces of every logical line.
"""

from silverpy.lexer.errors import InconsistentIndentationError
from silverpy.lexer.tokens import TokenKind


class IndentationTracker:
    """Indentation stack plus logical-line start state."""

    def __init__(self) -> None:
        self._stack: list[int] = [0]
        self.is_line_start = True
        self.line_start = 0

    @property
    def stack(self) -> tuple[int, ...]:
        return tuple(self._stack)

    @property
    def top(self) -> int:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of open levels above the base."""
        return len(self._stack) - 1

    def start_line(self, offset: int) -> None:
        """Mark `offset` as the first character of the next logical line."""
        self.is_line_start = True
        self.line_start = offset

    def resolve(self, width: int) -> list[TokenKind]:
        """Resolve the leading width of the current line into structural tokens.

        Returns `[INDENT]`, `[]`, or one `DEDENT` per closed level (innermost
        first). On an inconsistent dedent the enclosing levels are closed,
        down to the nearest one narrower than `width`, and the error carries
        how many `DEDENT`s that produced.
        """
        self.is_line_start = False

        if width > self.top:
            self._stack.append(width)
            return [TokenKind.INDENT]

        if width == self.top:
            return []

        popped = self._pop_above(width)
        if self.top != width:
            raise InconsistentIndentationError(width, self.line_start, dedents=popped)
        return [TokenKind.DEDENT] * popped

    def close(self) -> int:
        """Close every open level and return how many there were."""
        return self._pop_above(0)

    def _pop_above(self, width: int) -> int:
        popped = 0
        while self._stack[-1] > width:
            self._stack.pop()
            popped += 1
        return popped
