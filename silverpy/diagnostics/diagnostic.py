"""Diagnostics core types."""

from dataclasses import dataclass

from silverpy.diagnostics.codes import DiagnosticSpec, Severity
from silverpy.text import Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and its drivers."""

    code: str
    message: str
    span: Span
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, span: Span, *, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            span=span,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        return f"{self.severity.upper()} {self.code} span={self.span.as_tuple()} message={self.message}"
