"""Lexer configuration."""

from dataclasses import dataclass, replace

from silverpy.lexer.rules import DEFAULT_RULES, LexerRule, StringLiteralRule


@dataclass(frozen=True, slots=True)
class LexerOptions:
    """Per-pass lexer configuration.

    `rules` run in order before the built-in dispatch. `base_offset` is added
    to every emitted span so a unit can be placed in a larger coordinate space.
    """

    rules: tuple[LexerRule, ...] = DEFAULT_RULES
    base_offset: int = 0

    def __post_init__(self) -> None:
        if self.base_offset < 0:
            raise ValueError("base_offset cannot be negative")

    def with_strings(self) -> "LexerOptions":
        return replace(self, rules=(*self.rules, StringLiteralRule()))

    def at_offset(self, base_offset: int) -> "LexerOptions":
        return replace(self, base_offset=base_offset)
