"""Headless checks of payloads against a form definition.

Runs each payload through a fresh FormAggregate exactly as a user typing
the values would, then validates everything as a submission attempt
would. No collaborator is ever called.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from form_gate.catalog.validators import ValidatorRegistry, create_validator_registry
from form_gate.definitions.models import FormDefinition
from form_gate.diagnostics import DiagnosticsCollector, FormDiagnostic
from form_gate.fields.descriptor import FieldVariant
from form_gate.fields.state import FieldState
from form_gate.form.aggregate import FormAggregate
from form_gate.form.rules import evaluate_rules

logger = logging.getLogger(__name__)


class PayloadChecker:
    """Checks payloads (field id -> raw string) against one form definition."""

    def __init__(
        self,
        definition: FormDefinition,
        validators: ValidatorRegistry | None = None,
    ) -> None:
        self.definition = definition
        self.validators = validators if validators is not None else create_validator_registry()

    def _locate(self, form: FormAggregate, key: str) -> FieldState | None:
        """Find the field a payload key belongs to.

        Radio groups are submitted under their selected option's value, so
        such keys select that option.
        """
        if key in form:
            return form[key]
        for field in form:
            if field.descriptor.variant is FieldVariant.RADIO_GROUP:
                if key in field.descriptor.option_values:
                    field.select(key)
                    return field
        return None

    def check(self, payload: Mapping[str, Any], index: int | None = None) -> FormDiagnostic:
        """Check a single payload.

        Args:
            payload: Raw values keyed by field id (or radio option value).
            index: Optional position in a batch, copied to the report.

        Returns:
            FormDiagnostic describing every field and all failures.
        """
        form = self.definition.create_form(self.validators)
        collector = DiagnosticsCollector(
            form_id=self.definition.form_id,
            form_version=self.definition.version,
            index=index,
        )

        for key, raw in payload.items():
            field = self._locate(form, key)
            if field is None:
                collector.add_warning(
                    code="UNKNOWN_FIELD",
                    message=f"Payload key {key} is not a field of {self.definition.form_id}",
                    field_id=key,
                )
                continue
            if raw is None:
                continue
            if not isinstance(raw, str):
                collector.add_warning(
                    code="NON_STRING_VALUE",
                    message=f"Value for {key} is {type(raw).__name__}; checked as text",
                    field_id=field.field_id,
                )
                raw = str(raw)
            field.set_value(raw)

        form.validate_all()
        collector.collect_from_rules(evaluate_rules(form, form.rules))
        collector.collect_from_form(form)

        diagnostic = collector.finalize()
        logger.debug(
            "Checked payload %s for %s: %s",
            index,
            self.definition.form_id,
            diagnostic.status.value,
        )
        return diagnostic

    def check_batch(self, payloads: Iterable[Mapping[str, Any]]) -> list[FormDiagnostic]:
        """Check a batch of payloads."""
        return [self.check(payload, index=i) for i, payload in enumerate(payloads)]
