"""Tagged outcomes of a submission attempt."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from form_gate.errors import FailureKind
from form_gate.form.rules import RuleViolation


class SubmissionPhase(str, Enum):
    """States of the submission controller."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FIELD_ERROR = "field_error"
    FORM_ERROR = "form_error"
    UNAUTHORIZED = "unauthorized"


class SubmitSucceeded(BaseModel):
    """The collaborator accepted the payload."""

    kind: Literal["succeeded"] = "succeeded"
    phase: SubmissionPhase = SubmissionPhase.SUCCESS
    payload: dict[str, str]
    record: dict[str, Any]


class ValidationFailed(BaseModel):
    """Local validation stopped the submission before any network call."""

    kind: Literal["validation_failed"] = "validation_failed"
    phase: SubmissionPhase = SubmissionPhase.FORM_ERROR
    failure: FailureKind
    message: str
    invalid_fields: list[str] = Field(default_factory=list)
    violations: list[RuleViolation] = Field(default_factory=list)


class SubmitRejected(BaseModel):
    """The call failed to complete, or the server returned an error."""

    kind: Literal["rejected"] = "rejected"
    phase: SubmissionPhase = SubmissionPhase.FORM_ERROR
    failure: FailureKind
    message: str
    code: int | None = None
    field_id: str | None = None


class Unauthorized(BaseModel):
    """The acting identity may not submit; the user was sent elsewhere."""

    kind: Literal["unauthorized"] = "unauthorized"
    phase: SubmissionPhase = SubmissionPhase.UNAUTHORIZED
    failure: FailureKind
    message: str
    redirect: str


class Discarded(BaseModel):
    """A resolution arrived for a superseded or closed submission."""

    kind: Literal["discarded"] = "discarded"
    phase: SubmissionPhase = SubmissionPhase.IDLE
    reason: str


SubmissionOutcome = Annotated[
    Union[SubmitSucceeded, ValidationFailed, SubmitRejected, Unauthorized, Discarded],
    Field(discriminator="kind"),
]
