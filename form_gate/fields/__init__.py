"""Field-level building blocks: sentinel, whitespace policy, descriptor, state."""

from form_gate.fields.descriptor import (
    DEFAULT_ERROR_TEXT,
    FieldDescriptor,
    FieldOption,
    FieldVariant,
    always_valid,
)
from form_gate.fields.state import FieldState, FieldStatus, check_value
from form_gate.fields.unset import UNSET, FieldValue, Unset, has_content, is_set
from form_gate.fields.whitespace import (
    WhitespacePolicy,
    apply_whitespace_policy,
    contains_whitespace,
    violates_whitespace_policy,
)

__all__ = [
    # Sentinel
    "UNSET",
    "Unset",
    "FieldValue",
    "is_set",
    "has_content",
    # Whitespace
    "WhitespacePolicy",
    "apply_whitespace_policy",
    "contains_whitespace",
    "violates_whitespace_policy",
    # Descriptor
    "DEFAULT_ERROR_TEXT",
    "FieldDescriptor",
    "FieldOption",
    "FieldVariant",
    "always_valid",
    # State
    "FieldState",
    "FieldStatus",
    "check_value",
]
