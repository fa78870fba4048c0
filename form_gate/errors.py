"""Exception types and the failure taxonomy for form-gate."""

from enum import Enum


class FailureKind(str, Enum):
    """Kinds of failure a form submission can end in."""

    VALIDATION = "validation"  # Field-level, never reaches the network
    CROSS_FIELD = "cross_field"  # Detected at submit time on a dependent field
    TRANSPORT = "transport"  # Submit call did not complete
    SERVER_REJECTION = "server_rejection"  # Submit call returned a structured error
    AUTHORIZATION_REVOKED = "authorization_revoked"  # Credential no longer valid
    AUTHORIZATION_MISMATCH = "authorization_mismatch"  # Record no longer owned by actor


class FormGateError(Exception):
    """Base class for form-gate errors."""

    pass


class AlreadySubmittingError(FormGateError):
    """Raised when a submission is attempted while another is in flight."""

    code = "ALREADY_SUBMITTING"

    def __init__(self, message: str = "A submission is already in flight") -> None:
        super().__init__(message)


class FieldNotFoundError(FormGateError, KeyError):
    """Raised when a form has no field with the requested id."""

    def __init__(self, field_id: str) -> None:
        self.field_id = field_id
        super().__init__(f"No field with id: {field_id}")

    def __str__(self) -> str:
        return self.args[0]


class TransportError(FormGateError):
    """Raised by submit collaborators when a call fails to complete.

    Collaborators may raise any exception; this type exists so they can
    attach the numeric error code reported by the remote side.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        self.code = code
        super().__init__(message)


class UnknownValidatorError(FormGateError):
    """Raised when a form definition references an unregistered validator."""

    pass


class DefinitionNotFoundError(FormGateError):
    """Raised when a form definition is not found in the registry."""

    pass


class DefinitionValidationError(FormGateError):
    """Raised when a form definition fails schema validation."""

    pass
