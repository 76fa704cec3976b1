import pytest

from silverpy.text import Span, slice_span


def test_span_len_and_tuple() -> None:
    span = Span.new(4, 9)

    assert span.len == 5
    assert span.as_tuple() == (4, 9)
    assert not span.is_empty()
    assert Span.at(4, 5) == span


def test_empty_span() -> None:
    span = Span.empty(12)

    assert span.is_empty()
    assert span.len == 0
    assert not span.contains(12)


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (3, 2), (0, -1)])
def test_span_invariants(start: int, end: int) -> None:
    with pytest.raises(ValueError):
        Span(start, end)


def test_contains_is_half_open() -> None:
    span = Span(2, 4)

    assert span.contains(2)
    assert span.contains(3)
    assert not span.contains(4)
    assert span.contains_span(Span(2, 4))
    assert not span.contains_span(Span(1, 3))


def test_cover_and_shift() -> None:
    assert Span(2, 4).cover(Span(6, 7)) == Span(2, 7)
    assert Span(2, 4).shift(10) == Span(12, 14)


def test_slice_span() -> None:
    assert slice_span("let i = true", Span(8, 12)) == "true"
