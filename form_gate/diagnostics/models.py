"""Data models for headless form check reports."""

from enum import Enum

from pydantic import BaseModel, Field

from form_gate.errors import FailureKind


class CheckStatus(str, Enum):
    """Outcome of checking one payload."""

    VALID = "valid"  # Every field and rule passed
    INVALID = "invalid"  # At least one field or rule failed


class DiagnosticError(BaseModel):
    """A problem that would block submission."""

    code: str  # Error code like "FIELD_INVALID"
    message: str
    kind: FailureKind
    field_id: str | None = None


class DiagnosticWarning(BaseModel):
    """A non-blocking observation about the payload."""

    code: str  # Warning code like "UNKNOWN_FIELD"
    message: str
    field_id: str | None = None


class FieldDiagnostic(BaseModel):
    """Final state of one field after the check."""

    field_id: str
    value: str | None = None  # None when the field was never set
    touched: bool
    valid: bool
    error_text: str | None = None


class FormDiagnostic(BaseModel):
    """Report for one checked payload."""

    form_id: str
    form_version: str
    index: int | None = None
    status: CheckStatus
    fields: list[FieldDiagnostic] = Field(default_factory=list)
    errors: list[DiagnosticError] = Field(default_factory=list)
    warnings: list[DiagnosticWarning] = Field(default_factory=list)
    payload: dict[str, str] = Field(default_factory=dict)
