"""Loaded source files."""

from __future__ import annotations

from dataclasses import dataclass

from silverpy.lexer import LexerOptions, LexResult, tokenize
from silverpy.source_map.errors import SourceMapError
from silverpy.source_map.module_path import ModulePath
from silverpy.text import Span, slice_span


@dataclass(frozen=True, slots=True)
class SourceCode:
    """File contents placed at an absolute start offset in the source map."""

    start: int
    content: str

    @property
    def end(self) -> int:
        return self.start + len(self.content)

    def contains(self, pos: int) -> bool:
        return self.start <= pos < self.end

    def text_at(self, span: Span) -> str:
        """Slice the contents by an absolute span."""
        if not (self.start <= span.start and span.end <= self.end):
            raise SourceMapError(
                f"Span {span.as_tuple()} is not within the bounds of this file ({self.start}, {self.end})"
            )
        return slice_span(self.content, span.shift(-self.start))


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A loaded module. Directories carry no source code."""

    module_path: ModulePath
    source_code: SourceCode | None = None

    @property
    def is_directory(self) -> bool:
        return self.source_code is None

    @property
    def offset(self) -> int | None:
        if self.source_code is None:
            return None
        return self.source_code.start

    def contains(self, pos: int) -> bool:
        return self.source_code is not None and self.source_code.contains(pos)

    def lex(self, options: LexerOptions | None = None) -> LexResult:
        """Lex the file with spans placed at its absolute offset."""
        if self.source_code is None:
            raise SourceMapError(f"Module {self.module_path} is a directory and has no source")
        options = options if options is not None else LexerOptions()
        return tokenize(self.source_code.content, options.at_offset(self.source_code.start))
