"""Live, mutable state of a single field.

A FieldState is created from a descriptor when a form mounts and is owned
by exactly one FormAggregate. The rendering layer reads it and calls its
mutators; nothing here knows about other fields.
"""

from enum import Enum

from form_gate.fields.descriptor import FieldDescriptor, FieldVariant
from form_gate.fields.unset import UNSET, FieldValue, has_content
from form_gate.fields.whitespace import apply_whitespace_policy, violates_whitespace_policy


class FieldStatus(str, Enum):
    """Position of a field in its state machine."""

    PRISTINE = "pristine"
    DIRTY_VALID = "dirty_valid"
    DIRTY_INVALID = "dirty_invalid"


def check_value(
    descriptor: FieldDescriptor, value: FieldValue, selected: str | None = None
) -> bool:
    """Decide whether a normalized value is valid for a descriptor.

    Rules, in order:
    1. An optional field is valid while it is empty or still at its default.
    2. A required field that was never given a value is invalid.
    3. A BANNED whitespace policy rejects any whitespace, whatever the predicate says.
    4. Select values must be one of the options; radio content needs a selection.
    5. Otherwise the descriptor's own predicate decides.

    Args:
        descriptor: The field's descriptor.
        value: The normalized value (or UNSET).
        selected: The chosen option of a radio group, if any.

    Returns:
        True if the value is valid.
    """
    if not descriptor.required:
        if not has_content(value) or value == descriptor.default_value:
            return True

    if value is UNSET:
        return False

    if violates_whitespace_policy(descriptor.whitespace, value):
        return False

    if descriptor.variant is FieldVariant.SINGLE_SELECT:
        if value not in descriptor.option_values:
            return False
    elif descriptor.variant is FieldVariant.RADIO_GROUP:
        if has_content(value) and selected not in descriptor.option_values:
            return False

    return bool(descriptor.validation(value))


class FieldState:
    """Mutable per-field state: value, touched flag, validity and error text.

    Validity starts optimistic (True) so no error shows before interaction.
    It is recomputed on every edit and by `revalidate()`, which the
    submission flow always calls before reading it.
    """

    def __init__(
        self,
        descriptor: FieldDescriptor,
        value: FieldValue | None = None,
    ) -> None:
        """Initialize field state from a descriptor.

        Args:
            descriptor: The field's descriptor.
            value: Optional pre-populated value (controlled fields editing
                existing data). Defaults to the descriptor's default value.
        """
        self.descriptor = descriptor
        initial = descriptor.default_value if value is None else value
        self.value: FieldValue = self._normalize(initial)
        self.valid = True
        self.error_text = descriptor.default_error_text
        self.selected: str | None = None
        self._revealed = False

        if descriptor.initially_touched is not None:
            self.touched = descriptor.initially_touched
        elif descriptor.controlled:
            self.touched = has_content(self.value)
        else:
            self.touched = False

        if descriptor.variant is FieldVariant.RADIO_GROUP and descriptor.options:
            self.selected = descriptor.options[0].value

        # Pre-populated data is checked right away so bad records show errors
        if self.touched:
            self.revalidate()

    def __repr__(self) -> str:
        return (
            f"FieldState({self.field_id!r}, value={self.value!r}, "
            f"touched={self.touched}, valid={self.valid})"
        )

    @property
    def field_id(self) -> str:
        return self.descriptor.field_id

    @property
    def status(self) -> FieldStatus:
        """Current state machine position."""
        if not self.touched and self.valid:
            return FieldStatus.PRISTINE
        return FieldStatus.DIRTY_VALID if self.valid else FieldStatus.DIRTY_INVALID

    @property
    def error_visible(self) -> bool:
        """Whether the UI should currently show this field's error text."""
        return not self.valid and (self.touched or self._revealed)

    @property
    def is_set(self) -> bool:
        """Whether the field holds a value (possibly the empty string)."""
        return self.value is not UNSET

    @property
    def choices(self) -> dict[str, bool]:
        """Radio sub-fields: one boolean per option, at most one True."""
        return {value: value == self.selected for value in self.descriptor.option_values}

    @property
    def payload_key(self) -> str:
        """Key this field's value is submitted under.

        Radio groups submit under the selected option's value.
        """
        if self.descriptor.variant is FieldVariant.RADIO_GROUP and self.selected:
            return self.selected
        return self.field_id

    def _normalize(self, raw: FieldValue) -> FieldValue:
        if raw is UNSET:
            return UNSET
        return apply_whitespace_policy(self.descriptor.whitespace, raw)

    def set_value(self, raw: str) -> bool:
        """Apply user input: normalize, store, mark touched and revalidate.

        Args:
            raw: The raw input string.

        Returns:
            The new validity.
        """
        self.value = self._normalize(raw)
        self.touched = True
        return self.revalidate()

    def clear(self) -> None:
        """Return the field to UNSET without marking it touched."""
        self.value = UNSET
        self.valid = True
        self.error_text = self.descriptor.default_error_text
        self._revealed = False

    def select(self, option_value: str) -> bool:
        """Choose one option of a radio group and revalidate.

        Raises:
            ValueError: If the field is not a radio group or the option is unknown.
        """
        if self.descriptor.variant is not FieldVariant.RADIO_GROUP:
            raise ValueError(f"Field {self.field_id} is not a radio group")
        if option_value not in self.descriptor.option_values:
            raise ValueError(f"Field {self.field_id} has no option {option_value!r}")
        self.selected = option_value
        self.touched = True
        return self.revalidate()

    def set_valid(self, valid: bool, message: str | None = None) -> None:
        """Force validity from outside (cross-field or server errors).

        Leaves the value untouched. Forcing False also reveals the error.
        Forcing True restores the default error text.
        """
        self.valid = valid
        if valid:
            self.error_text = self.descriptor.default_error_text
        else:
            self._revealed = True
            if message is not None:
                self.error_text = message

    def set_touched(self, touched: bool) -> None:
        """Override the touched flag.

        Clearing it also hides an error the UI was showing.
        """
        self.touched = touched
        if not touched:
            self._revealed = False

    def revalidate(self, reveal: bool = False) -> bool:
        """Recompute validity against the current value.

        Args:
            reveal: Show the error even if the field was never touched
                (used when a submission is attempted).

        Returns:
            The new validity.
        """
        self.valid = check_value(self.descriptor, self.value, self.selected)
        self.error_text = self.descriptor.default_error_text
        if reveal:
            self._revealed = True
        return self.valid
