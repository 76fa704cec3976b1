"""Operator and punctuation table."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from silverpy.lexer.tokens import TokenKind

OPERATORS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        # Punctuation (always single-character)
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "[": TokenKind.LBRACKET,
        "]": TokenKind.RBRACKET,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        ":": TokenKind.COLON,
        ";": TokenKind.SEMI,
        ".": TokenKind.DOT,
        ",": TokenKind.COMMA,
        "~": TokenKind.TILDE,
        "@": TokenKind.AT,
        # Operators that may start a longer spelling
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
        "/": TokenKind.SLASH,
        "%": TokenKind.PERCENT,
        "^": TokenKind.CARET,
        "&": TokenKind.AMPER,
        "|": TokenKind.PIPE,
        "=": TokenKind.EQUALS,
        "<": TokenKind.LESS,
        ">": TokenKind.GREATER,
        "!": TokenKind.NOT,
        "->": TokenKind.RARROW,
        "==": TokenKind.EQUALS_EQUALS,
        "!=": TokenKind.NOT_EQUALS,
        "<=": TokenKind.LESS_EQUALS,
        ">=": TokenKind.GREATER_EQUALS,
        "<<": TokenKind.LSHIFT,
        ">>": TokenKind.RSHIFT,
        "**": TokenKind.STAR_STAR,
        "+=": TokenKind.PLUS_EQUALS,
        "-=": TokenKind.MINUS_EQUALS,
        "*=": TokenKind.STAR_EQUALS,
        "/=": TokenKind.SLASH_EQUALS,
        "%=": TokenKind.PERCENT_EQUALS,
        "&=": TokenKind.AMPER_EQUALS,
        "|=": TokenKind.PIPE_EQUALS,
        "^=": TokenKind.CARET_EQUALS,
        "<<=": TokenKind.LSHIFT_EQUALS,
        ">>=": TokenKind.RSHIFT_EQUALS,
        "**=": TokenKind.STAR_STAR_EQUALS,
    }
)

MAX_OPERATOR_LEN: Final[int] = max(len(spelling) for spelling in OPERATORS)


def longest_operator(text: str, start: int = 0) -> tuple[TokenKind, int] | None:
    """Return the longest operator spelled at `text[start:]` and its length."""
    for length in range(MAX_OPERATOR_LEN, 0, -1):
        spelling = text[start : start + length]
        if len(spelling) < length:
            continue
        kind = OPERATORS.get(spelling)
        if kind is not None:
            return kind, length
    return None


def is_operator_start(char: str) -> bool:
    return char in OPERATORS
