import inspect

import pytest

from silverpy.lexer import (
    IndentationTracker,
    InconsistentIndentationError,
    LexError,
    TokenKind,
)

K = TokenKind


def test_starts_at_line_start_with_base_level() -> None:
    tracker = IndentationTracker()

    assert tracker.stack == (0,)
    assert tracker.is_line_start is True
    assert tracker.line_start == 0
    assert tracker.depth == 0


def test_indent_pushes_width() -> None:
    tracker = IndentationTracker()

    assert tracker.resolve(4) == [K.INDENT]
    assert tracker.stack == (0, 4)
    assert tracker.is_line_start is False


def test_same_width_is_a_no_op() -> None:
    tracker = IndentationTracker()
    tracker.resolve(4)
    tracker.start_line(10)

    assert tracker.resolve(4) == []
    assert tracker.stack == (0, 4)
    assert tracker.is_line_start is False


def test_dedent_pops_every_wider_level() -> None:
    tracker = IndentationTracker()
    tracker.resolve(4)
    tracker.resolve(8)
    tracker.resolve(12)
    tracker.start_line(20)

    assert tracker.resolve(4) == [K.DEDENT, K.DEDENT]
    assert tracker.stack == (0, 4)
    assert tracker.resolve(0) == [K.DEDENT]
    assert tracker.stack == (0,)


def test_inconsistent_dedent_recovers_to_enclosing_level() -> None:
    tracker = IndentationTracker()
    tracker.resolve(4)
    tracker.resolve(8)
    tracker.start_line(30)

    with pytest.raises(InconsistentIndentationError) as excinfo:
        tracker.resolve(6)

    assert excinfo.value.width == 6
    assert excinfo.value.offset == 30
    assert excinfo.value.dedents == 1
    assert excinfo.value.span.as_tuple() == (30, 30)
    assert tracker.stack == (0, 4)
    assert tracker.is_line_start is False


def test_inconsistent_dedent_diagnostic() -> None:
    diagnostic = InconsistentIndentationError(3, 12).to_diagnostic()

    assert diagnostic.code == "LEXER_INCONSISTENT_INDENTATION"
    assert diagnostic.severity == "error"
    assert diagnostic.category == "lexer"
    assert "width 3" in diagnostic.message
    assert diagnostic.span.as_tuple() == (12, 12)


def test_shifted_error_keeps_width_and_dedents() -> None:
    error = InconsistentIndentationError(3, 12, dedents=2)

    assert error.shift(0) is error
    shifted = error.shift(100)
    assert (shifted.width, shifted.offset, shifted.dedents) == (3, 112, 2)
    assert shifted.to_diagnostic().span.as_tuple() == (112, 112)


def test_lex_error_base_requires_a_diagnostic() -> None:
    assert inspect.isabstract(LexError)
    assert LexError.__abstractmethods__ == frozenset({"to_diagnostic"})
    assert issubclass(InconsistentIndentationError, LexError)
    assert not inspect.isabstract(InconsistentIndentationError)


def test_close_unwinds_every_open_level() -> None:
    tracker = IndentationTracker()
    tracker.resolve(2)
    tracker.resolve(5)

    assert tracker.close() == 2
    assert tracker.stack == (0,)
    assert tracker.close() == 0
