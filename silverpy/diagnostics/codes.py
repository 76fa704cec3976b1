"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INCONSISTENT_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INCONSISTENT_INDENTATION",
    message="Dedent does not match any outer indentation level.",
    hint="Indent the line to the same width as one of the enclosing blocks.",
    severity="error",
    category="lexer",
)

LEXER_UNKNOWN_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNKNOWN_CHARACTER",
    message="Unrecognized character.",
    severity="warning",
    category="lexer",
)
