"""Pluggable lexer rules consulted before the built-in dispatch."""

from dataclasses import dataclass
from typing import Final, Protocol

from silverpy.lexer.cursor import Cursor
from silverpy.lexer.tokens import TokenKind


@dataclass(frozen=True, slots=True)
class RuleMatch:
    kind: TokenKind
    text: str | None = None


class LexerRule(Protocol):
    """A custom scanner for one token shape.

    Called with the character the lexer just consumed. A rule may consume more
    characters from the cursor; if it returns None the lexer rewinds the
    cursor, so declining never has side effects. Newlines are never offered to
    a rule, and a matching rule must not consume one.
    """

    def __call__(self, cursor: Cursor, char: str) -> RuleMatch | None: ...


@dataclass(frozen=True, slots=True)
class StringLiteralRule:
    """Single-line quoted strings.

    Escapes are kept verbatim in the token text; an unterminated string is
    declined.
    """

    quotes: frozenset[str] = frozenset({'"', "'"})

    def __call__(self, cursor: Cursor, char: str) -> RuleMatch | None:
        if char not in self.quotes:
            return None

        chars: list[str] = []
        while (ch := cursor.bump()) is not None:
            if ch == char:
                return RuleMatch(TokenKind.STRING_LITERAL, "".join(chars))
            if ch == "\n":
                return None
            chars.append(ch)
            if ch == "\\":
                escaped = cursor.bump()
                if escaped is None or escaped == "\n":
                    return None
                chars.append(escaped)
        return None


DEFAULT_RULES: Final[tuple[LexerRule, ...]] = ()
