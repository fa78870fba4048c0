"""Classification of whatever the submit collaborator hands back.

The remote contract is untyped: credential revocation, for instance,
arrives as an ordinary error whose code or message happens to match a
known signature. All such sniffing happens here, and the result is a
tagged response the rest of the engine can branch on.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from form_gate.config import SubmissionSettings


class SuccessResponse(BaseModel):
    """A completed call that returned the persisted record."""

    record: dict[str, Any]


class ErrorResponse(BaseModel):
    """A completed call that returned a structured error."""

    message: str
    code: int | None = None
    field_id: str | None = None


class RevokedCredential(BaseModel):
    """The caller's credential is no longer valid."""

    message: str
    code: int | None = None


class TransportFailure(BaseModel):
    """The call did not complete."""

    message: str
    code: int | None = None


ServerResponse = SuccessResponse | ErrorResponse | RevokedCredential | TransportFailure


def _coerce_code(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def is_revoked(code: int | None, message: str, settings: SubmissionSettings) -> bool:
    """Match a code or message against the known revocation signatures."""
    if code is not None and code in settings.revoked_codes:
        return True
    return any(marker in message for marker in settings.revoked_markers)


def interpret_response(raw: Any, settings: SubmissionSettings) -> ServerResponse:
    """Classify a value returned by the submit collaborator.

    Any mapping containing an `error` or `code` key is a failure, whatever
    the transport said.

    Args:
        raw: The collaborator's return value.
        settings: Signatures and fallback messages.

    Returns:
        A tagged response.
    """
    if not isinstance(raw, Mapping):
        return TransportFailure(message=f"Unexpected response type: {type(raw).__name__}")

    if "error" not in raw and "code" not in raw:
        return SuccessResponse(record=dict(raw))

    error = raw.get("error")
    # JSON-RPC style: {"error": {"code": ..., "message": ...}}
    if isinstance(error, Mapping):
        code = _coerce_code(error.get("code", raw.get("code")))
        message = error.get("message") or raw.get("message")
    else:
        code = _coerce_code(raw.get("code"))
        message = raw.get("message") or error
    message = str(message or settings.transport_error_message)

    if is_revoked(code, message, settings):
        return RevokedCredential(message=message, code=code)

    field_id = raw.get("field")
    return ErrorResponse(
        message=message,
        code=code,
        field_id=field_id if isinstance(field_id, str) else None,
    )


def classify_exception(
    exc: BaseException,
    settings: SubmissionSettings,
) -> RevokedCredential | TransportFailure:
    """Classify an exception raised by the submit collaborator."""
    code = _coerce_code(getattr(exc, "code", None))
    message = str(exc) or type(exc).__name__

    if is_revoked(code, message, settings):
        return RevokedCredential(message=message, code=code)
    return TransportFailure(message=message, code=code)
