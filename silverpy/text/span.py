from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """
    Half-open range [start, end) of character offsets in a source unit.

    Invariant:
    - 0 <= start <= end

    Offsets are Python string indices (characters, not bytes).
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("Span positions cannot be negative")
        if self.start > self.end:
            raise ValueError("Span invariant violated: start > end")

    @staticmethod
    def new(start: int, end: int) -> "Span":
        return Span(start, end)

    @staticmethod
    def at(offset: int, length: int) -> "Span":
        """Create a Span at offset with given length."""
        return Span(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> "Span":
        """Create a zero-length Span at the given offset."""
        return Span(offset, offset)

    @property
    def len(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        """Get the span as a tuple of (start, end) integers."""
        return (self.start, self.end)

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def contains_span(self, other: "Span") -> bool:
        """Check if the span fully contains another span."""
        return self.start <= other.start and other.end <= self.end

    def cover(self, other: "Span") -> "Span":
        """Get the minimal span that covers both this span and another span."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def shift(self, delta: int) -> "Span":
        """Shift the span right by the given delta."""
        return Span(self.start + delta, self.end + delta)

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end})"


def slice_span(source: str, span: Span) -> str:
    """Get the substring of the source text covered by the given Span.

    Coord system matches python string indices so we can just do this.
    """
    return source[span.start : span.end]
