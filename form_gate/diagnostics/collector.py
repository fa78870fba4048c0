"""Collector turning a validated form into a diagnostic report."""

from form_gate.diagnostics.models import (
    CheckStatus,
    DiagnosticError,
    DiagnosticWarning,
    FieldDiagnostic,
    FormDiagnostic,
)
from form_gate.errors import FailureKind
from form_gate.fields.unset import UNSET
from form_gate.form.aggregate import FormAggregate
from form_gate.form.rules import RuleViolation


class DiagnosticsCollector:
    """Collects errors and warnings for one payload check."""

    def __init__(
        self,
        form_id: str,
        form_version: str,
        index: int | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            form_id: The form definition ID.
            form_version: The form definition version.
            index: Optional position of the payload in its batch.
        """
        self.form_id = form_id
        self.form_version = form_version
        self.index = index

        self._errors: list[DiagnosticError] = []
        self._warnings: list[DiagnosticWarning] = []
        self._fields: list[FieldDiagnostic] = []
        self._payload: dict[str, str] = {}

    def add_error(
        self,
        code: str,
        message: str,
        kind: FailureKind,
        field_id: str | None = None,
    ) -> None:
        self._errors.append(
            DiagnosticError(code=code, message=message, kind=kind, field_id=field_id)
        )

    def add_warning(
        self,
        code: str,
        message: str,
        field_id: str | None = None,
    ) -> None:
        self._warnings.append(DiagnosticWarning(code=code, message=message, field_id=field_id))

    def collect_from_rules(self, violations: list[RuleViolation]) -> None:
        """Record cross-field rule failures."""
        for violation in violations:
            self.add_error(
                code="CROSS_FIELD_MISMATCH",
                message=violation.message,
                kind=FailureKind.CROSS_FIELD,
                field_id=violation.field_id,
            )

    def collect_from_form(self, form: FormAggregate) -> None:
        """Record the final state of every field.

        Invalid fields get a FIELD_INVALID error unless a rule already
        reported them.
        """
        reported = {e.field_id for e in self._errors if e.field_id is not None}

        for field in form:
            self._fields.append(
                FieldDiagnostic(
                    field_id=field.field_id,
                    value=None if field.value is UNSET else field.value,
                    touched=field.touched,
                    valid=field.valid,
                    error_text=None if field.valid else field.error_text,
                )
            )
            if not field.valid and field.field_id not in reported:
                self.add_error(
                    code="FIELD_INVALID",
                    message=field.error_text,
                    kind=FailureKind.VALIDATION,
                    field_id=field.field_id,
                )

        self._payload = form.payload()

    def finalize(self) -> FormDiagnostic:
        """Return the complete report."""
        return FormDiagnostic(
            form_id=self.form_id,
            form_version=self.form_version,
            index=self.index,
            status=CheckStatus.INVALID if self._errors else CheckStatus.VALID,
            fields=self._fields,
            errors=self._errors,
            warnings=self._warnings,
            payload=self._payload,
        )
