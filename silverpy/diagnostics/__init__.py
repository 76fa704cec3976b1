"""Diagnostics."""

from silverpy.diagnostics.codes import (
    LEXER_INCONSISTENT_INDENTATION,
    LEXER_UNKNOWN_CHARACTER,
    DiagnosticSpec,
    Severity,
)
from silverpy.diagnostics.diagnostic import Diagnostic
from silverpy.diagnostics.report import has_errors

__all__ = [
    "LEXER_INCONSISTENT_INDENTATION",
    "LEXER_UNKNOWN_CHARACTER",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
