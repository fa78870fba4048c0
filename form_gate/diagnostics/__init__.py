"""Diagnostic reports for headless payload checks."""

from form_gate.diagnostics.collector import DiagnosticsCollector
from form_gate.diagnostics.models import (
    CheckStatus,
    DiagnosticError,
    DiagnosticWarning,
    FieldDiagnostic,
    FormDiagnostic,
)

__all__ = [
    "DiagnosticsCollector",
    "CheckStatus",
    "DiagnosticError",
    "DiagnosticWarning",
    "FieldDiagnostic",
    "FormDiagnostic",
]
