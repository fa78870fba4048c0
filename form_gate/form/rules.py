"""Cross-field rules evaluated when a submission is attempted.

Single fields never know about each other. Relationships such as
"confirmation must equal the primary value" are kept in an ordered rule
table and checked against all field values at once.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from form_gate.fields.unset import FieldValue

if TYPE_CHECKING:
    from form_gate.form.aggregate import FormAggregate


class CrossFieldRule(BaseModel):
    """A check over all field values, reported on one dependent field."""

    field_id: str
    check: Callable[[Mapping[str, FieldValue]], bool]
    message: str

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class RuleViolation(BaseModel):
    """A cross-field rule that failed."""

    field_id: str
    message: str


def matches(field_id: str, other_id: str, message: str) -> CrossFieldRule:
    """Build a rule requiring `field_id` to hold the same value as `other_id`."""

    def _same(values: Mapping[str, FieldValue]) -> bool:
        return values.get(field_id) == values.get(other_id)

    return CrossFieldRule(field_id=field_id, check=_same, message=message)


def evaluate_rules(
    form: "FormAggregate",
    rules: Iterable[CrossFieldRule],
) -> list[RuleViolation]:
    """Evaluate rules in order and invalidate the dependent fields that fail.

    A rule whose dependent field is already invalid is skipped so the
    field keeps its own error text.

    Args:
        form: The form whose fields are checked.
        rules: Ordered rule table.

    Returns:
        The violations found, in rule order.
    """
    values = form.values()
    violations: list[RuleViolation] = []

    for rule in rules:
        field = form[rule.field_id]
        if not field.valid:
            continue
        if not rule.check(values):
            field.set_valid(False, rule.message)
            violations.append(RuleViolation(field_id=rule.field_id, message=rule.message))

    return violations
