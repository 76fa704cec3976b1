"""Lexer."""

from collections import deque
from dataclasses import dataclass

from silverpy.diagnostics import LEXER_UNKNOWN_CHARACTER, Diagnostic, has_errors
from silverpy.lexer.cursor import Cursor
from silverpy.lexer.errors import InconsistentIndentationError, LexError
from silverpy.lexer.indentation import IndentationTracker
from silverpy.lexer.operators import is_operator_start, longest_operator
from silverpy.lexer.options import LexerOptions
from silverpy.lexer.tokens import Token, TokenKind
from silverpy.text import Span, slice_span


@dataclass(frozen=True, slots=True)
class LexResult:
    """Every token of one pass plus the diagnostics collected along the way."""

    tokens: tuple[Token, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def kinds(self) -> list[TokenKind]:
        return [token.kind for token in self.tokens]


class Lexer:
    """Pull-based lexer for indentation-structured source.

    Each call to `next_token` yields one token; structural tokens that are
    decided in bulk (several dedents, end-of-input closing) wait in a queue
    and are delivered before anything new is scanned. An inconsistent dedent
    raises `InconsistentIndentationError`; the lexer stays usable and the next
    call carries on from the recovered state.
    """

    def __init__(self, source: str, options: LexerOptions | None = None) -> None:
        self._options = options if options is not None else LexerOptions()
        self._cursor = Cursor(source)
        self._indentation = IndentationTracker()
        self._queue: deque[Token] = deque()
        self._last_kind: TokenKind | None = None
        self._closed = False

    @property
    def source(self) -> str:
        return self._cursor.source

    @property
    def options(self) -> LexerOptions:
        return self._options

    @property
    def indentation_stack(self) -> tuple[int, ...]:
        return self._indentation.stack

    @property
    def is_exhausted(self) -> bool:
        return self._closed and not self._queue

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        if self._queue:
            return self._emit(self._queue.popleft())

        width = self._cursor.skip_whitespace()

        if self._indentation.is_line_start and not self._at_blank_line():
            line_start = self._indentation.line_start
            try:
                kinds = self._indentation.resolve(width)
            except InconsistentIndentationError as error:
                self._push_structural(TokenKind.DEDENT, line_start, error.dedents)
                raise error.shift(self._options.base_offset) from None
            if kinds:
                for kind in kinds:
                    self._push_structural(kind, line_start)
                return self._emit(self._queue.popleft())

        if self._cursor.is_eof:
            if self._closed:
                return None
            self._close()
            if self._queue:
                return self._emit(self._queue.popleft())
            return None

        return self._emit(self._scan())

    def lex(self) -> LexResult:
        """Drain the stream, turning lexical errors into diagnostics."""
        tokens: list[Token] = []
        diagnostics: list[Diagnostic] = []
        while True:
            try:
                token = self.next_token()
            except LexError as error:
                diagnostics.append(error.to_diagnostic())
                continue
            if token is None:
                break
            tokens.append(token)
            if token.kind == TokenKind.UNKNOWN:
                text = token_text(self.source, token, self._options.base_offset)
                diagnostics.append(
                    Diagnostic.from_spec(
                        LEXER_UNKNOWN_CHARACTER,
                        token.span,
                        message=f"Unrecognized character {text!r}.",
                    )
                )
        return LexResult(tokens=tuple(tokens), diagnostics=tuple(diagnostics))

    def _scan(self) -> Token:
        cursor = self._cursor
        start = cursor.offset
        char = cursor.bump()
        assert char is not None

        # Newlines drive line-start tracking and never reach custom rules.
        if char == "\n":
            self._indentation.start_line(cursor.offset)
            return self._token(TokenKind.NEWLINE, start)

        for rule in self._options.rules:
            checkpoint = cursor.checkpoint()
            match = rule(cursor, char)
            if match is not None:
                return self._token(match.kind, start, match.text)
            cursor.rewind(checkpoint)

        if char == "#":
            # Comment runs up to, not including, the newline.
            cursor.take_while(lambda c: c != "\n")
            return self._token(TokenKind.COMMENT, start)

        if is_ident_start(char):
            text = char + cursor.take_while(is_ident_body)
            return self._token(TokenKind.IDENTIFIER, start, text)

        if is_digit(char):
            text = char + cursor.take_while(is_digit)
            return self._token(TokenKind.INTEGER_LITERAL, start, text)

        if is_operator_start(char):
            matched = longest_operator(cursor.source, start)
            assert matched is not None
            kind, length = matched
            cursor.advance(length - 1)
            return self._token(kind, start)

        return self._token(TokenKind.UNKNOWN, start)

    def _close(self) -> None:
        end = self._cursor.offset
        if self._last_kind is not None and self._last_kind != TokenKind.NEWLINE:
            self._push_structural(TokenKind.NEWLINE, end)
        self._push_structural(TokenKind.DEDENT, end, self._indentation.close())
        self._closed = True

    def _at_blank_line(self) -> bool:
        return self._cursor.peek() in (None, "\n")

    def _push_structural(self, kind: TokenKind, offset: int, count: int = 1) -> None:
        span = Span.empty(offset).shift(self._options.base_offset)
        for _ in range(count):
            self._queue.append(Token(kind, span))

    def _token(self, kind: TokenKind, start: int, text: str | None = None) -> Token:
        span = Span(start, self._cursor.offset).shift(self._options.base_offset)
        return Token(kind, span, text)

    def _emit(self, token: Token) -> Token:
        self._last_kind = token.kind
        return token


def is_ident_start(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalpha())


def is_ident_body(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def tokenize(source: str, options: LexerOptions | None = None) -> LexResult:
    """Lex a whole source unit in one go."""
    return Lexer(source, options).lex()


def token_text(source: str, token: Token, base_offset: int = 0) -> str:
    """Get the text of a token from its unit's source based on its span."""
    span = token.span
    return slice_span(source, Span(span.start - base_offset, span.end - base_offset))


def dump_tokens(
    tokens: list[Token] | tuple[Token, ...],
    source: str,
    diagnostics: list[Diagnostic] | tuple[Diagnostic, ...] | None = None,
    base_offset: int = 0,
) -> None:
    """Print token list with kind, span, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok, base_offset)
        print(f"{i:03d} {tok.kind.name:<18} span={tok.span.as_tuple()} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d}")
