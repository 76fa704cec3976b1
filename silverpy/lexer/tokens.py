"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from silverpy.text import Span


class TokenKind(IntEnum):
    # -------------------------
    # Content tokens
    # -------------------------
    COMMENT = 1  # "# comment"
    IDENTIFIER = 2
    INTEGER_LITERAL = 3
    STRING_LITERAL = 4

    # -------------------------
    # Structural tokens
    # -------------------------
    NEWLINE = 10
    INDENT = 11
    DEDENT = 12

    # -------------------------
    # Punctuation
    # -------------------------
    LPAREN = 20  # (
    RPAREN = 21  # )
    LBRACKET = 22  # [
    RBRACKET = 23  # ]
    LBRACE = 24  # {
    RBRACE = 25  # }
    COLON = 26  # :
    SEMI = 27  # ;
    DOT = 28  # .
    COMMA = 29  # ,

    # -------------------------
    # Single-character operators
    # -------------------------
    PLUS = 40  # +
    MINUS = 41  # -
    STAR = 42  # *
    SLASH = 43  # /
    PERCENT = 44  # %
    CARET = 45  # ^
    AMPER = 46  # &
    PIPE = 47  # |
    TILDE = 48  # ~
    EQUALS = 49  # =
    LESS = 50  # <
    GREATER = 51  # >
    NOT = 52  # !
    AT = 53  # @

    # -------------------------
    # Two-character operators
    # -------------------------
    RARROW = 60  # ->
    EQUALS_EQUALS = 61  # ==
    NOT_EQUALS = 62  # !=
    LESS_EQUALS = 63  # <=
    GREATER_EQUALS = 64  # >=
    LSHIFT = 65  # <<
    RSHIFT = 66  # >>
    STAR_STAR = 67  # **

    # -------------------------
    # Assignment operators
    # -------------------------
    PLUS_EQUALS = 80  # +=
    MINUS_EQUALS = 81  # -=
    STAR_EQUALS = 82  # *=
    SLASH_EQUALS = 83  # /=
    PERCENT_EQUALS = 84  # %=
    AMPER_EQUALS = 85  # &=
    PIPE_EQUALS = 86  # |=
    CARET_EQUALS = 87  # ^=
    LSHIFT_EQUALS = 88  # <<=
    RSHIFT_EQUALS = 89  # >>=
    STAR_STAR_EQUALS = 90  # **=

    UNKNOWN = 100

    @property
    def is_structural(self) -> bool:
        return self in (TokenKind.NEWLINE, TokenKind.INDENT, TokenKind.DEDENT)

    @property
    def is_operator(self) -> bool:
        return TokenKind.PLUS <= self <= TokenKind.STAR_STAR_EQUALS

    @property
    def carries_text(self) -> bool:
        return self in (
            TokenKind.IDENTIFIER,
            TokenKind.INTEGER_LITERAL,
            TokenKind.STRING_LITERAL,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` holds the payload of identifiers and literals and is None for every
    other kind.
    """

    kind: TokenKind
    span: Span
    text: str | None = None

    def __str__(self) -> str:
        payload = f"({self.text!r})" if self.text is not None else ""
        return f"{self.kind.name}{payload} {self.span.as_tuple()}"
