"""Submission flow: collaborators, response classification and the controller."""

from form_gate.submission.boundary import (
    ErrorResponse,
    RevokedCredential,
    ServerResponse,
    SuccessResponse,
    TransportFailure,
    classify_exception,
    interpret_response,
)
from form_gate.submission.collaborators import Navigator, Notifier, SubmitCollaborator
from form_gate.submission.controller import SubmissionController
from form_gate.submission.navigation import build_redirect, decode_toast, encode_toast
from form_gate.submission.outcomes import (
    Discarded,
    SubmissionOutcome,
    SubmissionPhase,
    SubmitRejected,
    SubmitSucceeded,
    Unauthorized,
    ValidationFailed,
)

__all__ = [
    # Controller
    "SubmissionController",
    "SubmissionPhase",
    # Outcomes
    "SubmissionOutcome",
    "SubmitSucceeded",
    "ValidationFailed",
    "SubmitRejected",
    "Unauthorized",
    "Discarded",
    # Boundary
    "ServerResponse",
    "SuccessResponse",
    "ErrorResponse",
    "RevokedCredential",
    "TransportFailure",
    "interpret_response",
    "classify_exception",
    # Collaborators
    "SubmitCollaborator",
    "Notifier",
    "Navigator",
    # Navigation
    "encode_toast",
    "decode_toast",
    "build_redirect",
]
