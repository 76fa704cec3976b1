"""Lexer."""

from silverpy.lexer.cursor import Cursor, CursorCheckpoint
from silverpy.lexer.errors import InconsistentIndentationError, LexError
from silverpy.lexer.indentation import IndentationTracker
from silverpy.lexer.lexer import LexResult, Lexer, dump_tokens, token_text, tokenize
from silverpy.lexer.operators import OPERATORS, longest_operator
from silverpy.lexer.options import LexerOptions
from silverpy.lexer.rules import DEFAULT_RULES, LexerRule, RuleMatch, StringLiteralRule
from silverpy.lexer.tokens import Token, TokenKind

__all__ = [
    "DEFAULT_RULES",
    "OPERATORS",
    "Cursor",
    "CursorCheckpoint",
    "InconsistentIndentationError",
    "IndentationTracker",
    "LexError",
    "LexResult",
    "Lexer",
    "LexerOptions",
    "LexerRule",
    "RuleMatch",
    "StringLiteralRule",
    "Token",
    "TokenKind",
    "dump_tokens",
    "longest_operator",
    "token_text",
    "tokenize",
]
