"""form-gate: field validation and form submission engine.

Describe fields once, keep live per-field state, and gate submission:

    from form_gate import FieldDescriptor, FormAggregate, SubmissionController

    form = FormAggregate([FieldDescriptor(field_id="email", validation=validate_email)])
    form["email"].set_value(" someone@example.com ")
    controller = SubmissionController(form, api.update_user, notifier=toasts)
    outcome = await controller.submit(user_id, record=current_user)
"""

__version__ = "0.1.0"

# Imports must come after __version__; the CLI reads it during import
from form_gate.callable import CallableResult, execute
from form_gate.config import SubmissionSettings
from form_gate.errors import (
    AlreadySubmittingError,
    FailureKind,
    FieldNotFoundError,
    FormGateError,
    TransportError,
)
from form_gate.fields import (
    UNSET,
    FieldDescriptor,
    FieldOption,
    FieldState,
    FieldStatus,
    FieldVariant,
    WhitespacePolicy,
    apply_whitespace_policy,
)
from form_gate.form import CrossFieldRule, FormAggregate, SubmissionLock, matches
from form_gate.submission import (
    SubmissionController,
    SubmissionOutcome,
    SubmissionPhase,
)

__all__ = [
    "__version__",
    # Fields
    "UNSET",
    "FieldDescriptor",
    "FieldOption",
    "FieldState",
    "FieldStatus",
    "FieldVariant",
    "WhitespacePolicy",
    "apply_whitespace_policy",
    # Form
    "FormAggregate",
    "SubmissionLock",
    "CrossFieldRule",
    "matches",
    # Submission
    "SubmissionController",
    "SubmissionOutcome",
    "SubmissionPhase",
    "SubmissionSettings",
    # Errors
    "FormGateError",
    "AlreadySubmittingError",
    "FieldNotFoundError",
    "TransportError",
    "FailureKind",
    # Callable
    "CallableResult",
    "execute",
]
