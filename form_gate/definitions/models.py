"""Pydantic models for form definitions stored on disk."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from form_gate.catalog.validators import ValidatorRegistry
from form_gate.fields.descriptor import (
    DEFAULT_ERROR_TEXT,
    FieldDescriptor,
    FieldOption,
    FieldVariant,
)
from form_gate.fields.unset import UNSET, FieldValue
from form_gate.fields.whitespace import WhitespacePolicy
from form_gate.form.aggregate import FormAggregate
from form_gate.form.rules import CrossFieldRule, matches


class OptionSpec(BaseModel):
    """Option of a select or radio field."""

    name: str
    value: str


class FieldSpec(BaseModel):
    """Field definition; `validation` names a registered validator."""

    field_id: str
    label: str = ""
    placeholder: str = ""
    default_value: str | None = None  # None means UNSET
    required: bool = True
    validation: str = "always"
    validation_args: dict[str, Any] = Field(default_factory=dict)
    whitespace: WhitespacePolicy = WhitespacePolicy.ALLOWED
    default_error_text: str = DEFAULT_ERROR_TEXT
    variant: FieldVariant = FieldVariant.TEXT
    options: list[OptionSpec] = Field(default_factory=list)
    controlled: bool = False
    explanation: str | None = None
    disabled: bool = False
    show_placeholder_option: bool = False
    default_label: str | None = None
    initially_touched: bool | None = None
    server_normalized: bool = False
    local_only: bool = False

    def to_descriptor(self, validators: ValidatorRegistry) -> FieldDescriptor:
        """Build the immutable descriptor, resolving the validator by name."""
        default: FieldValue = UNSET if self.default_value is None else self.default_value
        data = self.model_dump(
            exclude={"validation", "validation_args", "options", "default_value"}
        )
        return FieldDescriptor(
            **data,
            default_value=default,
            validation=validators.build(self.validation, self.validation_args),
            options=tuple(FieldOption(name=o.name, value=o.value) for o in self.options),
        )


class RuleSpec(BaseModel):
    """Cross-field rule: `field_id` must hold the same value as `other`."""

    kind: Literal["matches"]
    field_id: str
    other: str
    message: str | None = None


class FormDefinition(BaseModel):
    """Complete form definition."""

    type: Literal["form_definition"]
    form_id: str
    version: str
    name: str | None = None
    description: str | None = None
    fields: list[FieldSpec]
    rules: list[RuleSpec] = Field(default_factory=list)

    def get_field(self, field_id: str) -> FieldSpec | None:
        """Get a field by its ID."""
        for field in self.fields:
            if field.field_id == field_id:
                return field
        return None

    def build_descriptors(self, validators: ValidatorRegistry) -> list[FieldDescriptor]:
        return [field.to_descriptor(validators) for field in self.fields]

    def build_rules(self) -> list[CrossFieldRule]:
        """Build the rule table; messages default to the dependent field's error text."""
        rules: list[CrossFieldRule] = []
        for rule in self.rules:
            message = rule.message
            if message is None:
                field = self.get_field(rule.field_id)
                message = field.default_error_text if field else DEFAULT_ERROR_TEXT
            rules.append(matches(rule.field_id, rule.other, message))
        return rules

    def create_form(
        self,
        validators: ValidatorRegistry,
        values: dict[str, FieldValue] | None = None,
    ) -> FormAggregate:
        """Instantiate a fresh FormAggregate for this definition."""
        return FormAggregate(
            self.build_descriptors(validators),
            values=values,
            rules=self.build_rules(),
        )
