"""Immutable field descriptors.

A descriptor is the static configuration of one input: its identity,
default value, validation predicate, whitespace policy and UI hints.
Descriptors are built once per form definition and never mutated; use
`derive()` to produce a variant (e.g. an editable copy of a signup field).
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from form_gate.fields.unset import UNSET, FieldValue
from form_gate.fields.whitespace import WhitespacePolicy

DEFAULT_ERROR_TEXT = "This field is invalid"


def always_valid(value: str) -> bool:
    """Validation predicate that accepts every value."""
    return True


class FieldVariant(str, Enum):
    """Kind of input a field is rendered as."""

    TEXT = "text"
    SINGLE_SELECT = "single_select"
    RADIO_GROUP = "radio_group"


class FieldOption(BaseModel):
    """One choice of a select or radio field."""

    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class FieldDescriptor(BaseModel):
    """Configuration for a single form field."""

    field_id: str
    label: str = ""
    placeholder: str = ""
    default_value: FieldValue = UNSET
    required: bool = True
    validation: Callable[[str], bool] = always_valid
    whitespace: WhitespacePolicy = WhitespacePolicy.ALLOWED
    default_error_text: str = DEFAULT_ERROR_TEXT
    variant: FieldVariant = FieldVariant.TEXT
    options: tuple[FieldOption, ...] = ()
    controlled: bool = False

    # UI hints, opaque to the engine
    explanation: str | None = None
    disabled: bool = False
    show_placeholder_option: bool = False
    default_label: str | None = None

    initially_touched: bool | None = Field(
        default=None,
        description="Overrides the touched flag a fresh field starts with",
    )
    server_normalized: bool = Field(
        default=False,
        description="Server rewrites this value; hide its error display after a save",
    )
    local_only: bool = Field(
        default=False,
        description="Validated before submitting but never sent in the payload",
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def check_identity_and_options(self) -> "FieldDescriptor":
        """Ensure the id is non-empty and choice fields have unique options."""
        if not self.field_id:
            raise ValueError("field_id must be a non-empty string")

        if self.variant in (FieldVariant.SINGLE_SELECT, FieldVariant.RADIO_GROUP):
            if not self.options:
                raise ValueError(
                    f"Field {self.field_id}: {self.variant.value} requires at least one option"
                )
            values = [option.value for option in self.options]
            if len(values) != len(set(values)):
                raise ValueError(f"Field {self.field_id}: option values must be unique")

        return self

    @property
    def option_values(self) -> tuple[str, ...]:
        """Values of all options, in display order."""
        return tuple(option.value for option in self.options)

    @property
    def has_options(self) -> bool:
        """Whether this field is a choice between named options."""
        return self.variant is not FieldVariant.TEXT

    def get_option(self, value: str) -> FieldOption | None:
        """Get an option by its value."""
        for option in self.options:
            if option.value == value:
                return option
        return None

    def derive(self, **changes: Any) -> "FieldDescriptor":
        """Return a validated copy with some attributes replaced."""
        return type(self)(**{**dict(self), **changes})
