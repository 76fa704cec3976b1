"""Source text coordinates."""

from silverpy.text.span import Span, slice_span

__all__ = [
    "Span",
    "slice_span",
]
