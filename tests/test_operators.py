from collections.abc import Mapping

import pytest

from silverpy.lexer import OPERATORS, TokenKind, longest_operator, tokenize

K = TokenKind


def test_longest_operator_prefers_longest_spelling() -> None:
    assert longest_operator("**=") == (K.STAR_STAR_EQUALS, 3)
    assert longest_operator("**") == (K.STAR_STAR, 2)
    assert longest_operator("*") == (K.STAR, 1)
    assert longest_operator("<<=x") == (K.LSHIFT_EQUALS, 3)
    assert longest_operator("<<x") == (K.LSHIFT, 2)
    assert longest_operator("<x") == (K.LESS, 1)


def test_longest_operator_from_offset() -> None:
    assert longest_operator("a->b", 1) == (K.RARROW, 2)
    assert longest_operator("a-", 1) == (K.MINUS, 1)


def test_single_character_punctuation_never_combines() -> None:
    assert longest_operator("~=") == (K.TILDE, 1)
    assert longest_operator("@=") == (K.AT, 1)
    assert longest_operator("((") == (K.LPAREN, 1)
    assert longest_operator(":=") == (K.COLON, 1)


def test_longest_operator_rejects_non_operators() -> None:
    assert longest_operator("abc") is None
    assert longest_operator("") is None
    assert longest_operator("+", 1) is None


def test_table_is_read_only() -> None:
    assert isinstance(OPERATORS, Mapping)
    with pytest.raises(TypeError):
        OPERATORS["?"] = K.UNKNOWN  # type: ignore[index]


def test_every_compound_extends_a_shorter_entry() -> None:
    for spelling in OPERATORS:
        for length in range(1, len(spelling)):
            assert spelling[:length] in OPERATORS, spelling


@pytest.mark.parametrize(("spelling", "kind"), sorted(OPERATORS.items()))
def test_full_spelling_lexes_as_one_token(spelling: str, kind: TokenKind) -> None:
    result = tokenize(spelling)

    assert result.kinds == [kind, K.NEWLINE]
    assert result.tokens[0].span.len == len(spelling)
