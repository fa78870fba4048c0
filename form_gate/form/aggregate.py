"""Form aggregate: the set of field states behind one form screen.

The aggregate owns every FieldState, the form-wide error banner and the
submission lock guaranteeing at most one submission in flight.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping

from form_gate.errors import AlreadySubmittingError, FieldNotFoundError
from form_gate.fields.descriptor import FieldDescriptor
from form_gate.fields.state import FieldState
from form_gate.fields.unset import UNSET, FieldValue
from form_gate.form.rules import CrossFieldRule

logger = logging.getLogger(__name__)


class SubmissionLock:
    """Release handle returned by `FormAggregate.begin_submission()`.

    Carries the generation token it was issued under. Releasing is
    idempotent, and a handle from a superseded generation never touches
    the form.
    """

    def __init__(self, form: "FormAggregate", generation: int) -> None:
        self._form = form
        self.generation = generation
        self.released = False

    def __enter__(self) -> "SubmissionLock":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    @property
    def is_current(self) -> bool:
        """Whether this lock still belongs to the form's live generation."""
        return self._form.generation == self.generation

    def release(self) -> None:
        """Mark the form submittable again, if this lock is still current."""
        if self.released:
            return
        self.released = True
        if self.is_current:
            self._form.submitting = False
        else:
            logger.debug("Ignoring release of stale lock (generation %d)", self.generation)


class FormAggregate:
    """Ordered mapping of field id to FieldState plus form-wide state."""

    def __init__(
        self,
        descriptors: Iterable[FieldDescriptor],
        values: Mapping[str, FieldValue] | None = None,
        rules: Iterable[CrossFieldRule] = (),
    ) -> None:
        """Create one FieldState per descriptor.

        Args:
            descriptors: Field descriptors in display order.
            values: Optional pre-populated values for controlled fields.
            rules: Cross-field rules checked when a submission is attempted.

        Raises:
            ValueError: If two descriptors share an id, or a rule names an
                unknown field.
        """
        values = values or {}
        self._fields: dict[str, FieldState] = {}
        for descriptor in descriptors:
            if descriptor.field_id in self._fields:
                raise ValueError(f"Duplicate field id: {descriptor.field_id}")
            self._fields[descriptor.field_id] = FieldState(
                descriptor, values.get(descriptor.field_id)
            )

        self.rules: tuple[CrossFieldRule, ...] = tuple(rules)
        for rule in self.rules:
            if rule.field_id not in self._fields:
                raise ValueError(f"Rule refers to unknown field: {rule.field_id}")

        self.submitting = False
        self.form_error: str | None = None
        self.generation = 0

    def __getitem__(self, field_id: str) -> FieldState:
        try:
            return self._fields[field_id]
        except KeyError:
            raise FieldNotFoundError(field_id) from None

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._fields

    def __iter__(self) -> Iterator[FieldState]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def field_ids(self) -> list[str]:
        """Field ids in display order."""
        return list(self._fields)

    @property
    def all_valid(self) -> bool:
        """Whether every field is currently valid (may be stale)."""
        return all(field.valid for field in self._fields.values())

    @property
    def invalid_fields(self) -> list[str]:
        """Ids of fields currently flagged invalid."""
        return [field.field_id for field in self._fields.values() if not field.valid]

    def values(self) -> dict[str, FieldValue]:
        """Current values by field id, UNSET included."""
        return {field.field_id: field.value for field in self._fields.values()}

    def payload(self) -> dict[str, str]:
        """Values to submit, keyed by each field's payload key.

        Fields that were never given a value, and local-only fields such as
        acknowledgments, are left out.
        """
        return {
            field.payload_key: field.value
            for field in self._fields.values()
            if field.value is not UNSET and not field.descriptor.local_only
        }

    def validate_all(self) -> bool:
        """Revalidate every field, revealing errors, and report overall validity."""
        results = [field.revalidate(reveal=True) for field in self._fields.values()]
        return all(results)

    def begin_submission(self) -> SubmissionLock:
        """Take the submission lock.

        Returns:
            A lock the caller must release on every exit path.

        Raises:
            AlreadySubmittingError: If a submission is already in flight.
        """
        if self.submitting:
            raise AlreadySubmittingError()
        self.submitting = True
        return SubmissionLock(self, self.generation)

    def reset(self) -> None:
        """Return form-wide state to neutral and supersede outstanding locks."""
        self.generation += 1
        self.submitting = False
        self.form_error = None
