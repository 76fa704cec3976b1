"""Lexical errors raised through the token pull interface."""

from abc import ABC, abstractmethod

from silverpy.diagnostics import LEXER_INCONSISTENT_INDENTATION, Diagnostic
from silverpy.text import Span


class LexError(Exception, ABC):
    """Base class for recoverable lexical errors.

    The lexer is left in a consistent state, so the caller may keep pulling
    tokens after catching one.
    """

    def __init__(self, message: str, span: Span) -> None:
        super().__init__(message)
        self.span = span

    @abstractmethod
    def to_diagnostic(self) -> Diagnostic: ...


class InconsistentIndentationError(LexError):
    """A line dedents to a width that matches no open indentation level."""

    def __init__(self, width: int, offset: int, dedents: int = 0) -> None:
        super().__init__(
            f"inconsistent dedent to width {width} at offset {offset}",
            Span.empty(offset),
        )
        self.width = width
        self.offset = offset
        self.dedents = dedents

    def shift(self, amount: int) -> "InconsistentIndentationError":
        """Same error with its offset moved by `amount`."""
        if amount == 0:
            return self
        return InconsistentIndentationError(self.width, self.offset + amount, self.dedents)

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(
            LEXER_INCONSISTENT_INDENTATION,
            self.span,
            message=f"{LEXER_INCONSISTENT_INDENTATION.message} (width {self.width})",
        )
