"""Submission controller.

Drives one form through IDLE -> VALIDATING -> SUBMITTING -> outcome -> IDLE:

1. Validate every field and the cross-field rules; stop locally on failure.
2. Take the form's submission lock and hand the payload to the collaborator.
3. Map the result onto the form: success, server error, transport error,
   or an authorization failure that sends the user elsewhere.

Only one submission may be in flight per form. A resolution that arrives
after the form was reset or the controller closed has no effect.
"""

import inspect
import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from form_gate.config import SubmissionSettings
from form_gate.errors import AlreadySubmittingError, FailureKind
from form_gate.form.aggregate import FormAggregate, SubmissionLock
from form_gate.form.rules import evaluate_rules
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
from form_gate.submission.navigation import build_redirect, encode_toast
from form_gate.submission.outcomes import (
    Discarded,
    SubmissionOutcome,
    SubmissionPhase,
    SubmitRejected,
    SubmitSucceeded,
    Unauthorized,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


class SubmissionController:
    """Orchestrates validation, submission and result handling for one form."""

    def __init__(
        self,
        form: FormAggregate,
        submit: SubmitCollaborator,
        *,
        notifier: Notifier | None = None,
        navigator: Navigator | None = None,
        settings: SubmissionSettings | None = None,
        authorize: Callable[[], bool] | None = None,
        scroll_to_top: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            form: The form being submitted.
            submit: Collaborator persisting the payload.
            notifier: Optional toast collaborator.
            navigator: Optional navigation collaborator.
            settings: Messages and signatures (default: SubmissionSettings()).
            authorize: Business check run after a completed call; returning
                False means the record no longer belongs to the acting identity.
            scroll_to_top: Optional hook bringing the error banner into view.
        """
        self.form = form
        self._submit = submit
        self.notifier = notifier
        self.navigator = navigator
        self.settings = settings if settings is not None else SubmissionSettings()
        self.authorize = authorize
        self.scroll_to_top = scroll_to_top

        self.phase = SubmissionPhase.IDLE
        self.closed = False
        self.last_outcome: SubmissionOutcome | None = None

    def close(self) -> None:
        """Detach from the owning screen; later resolutions become no-ops."""
        self.closed = True
        self.form.reset()
        self.phase = SubmissionPhase.IDLE

    async def submit(
        self,
        identity: Any,
        record: MutableMapping[str, Any] | None = None,
    ) -> SubmissionOutcome:
        """Run one submission attempt.

        Args:
            identity: Passed through to the submit collaborator.
            record: The caller's current record; updated in place on success.

        Returns:
            The tagged outcome of the attempt.

        Raises:
            AlreadySubmittingError: If a submission is already in flight.
                No validation or network call happens in that case.
        """
        if self.closed:
            return self._finish(Discarded(reason="controller closed"))

        if self.form.submitting:
            logger.warning("Rejected submission: another one is in flight")
            raise AlreadySubmittingError()

        self.form.form_error = None
        self._enter(SubmissionPhase.VALIDATING)
        failed = self._validate()
        if failed is not None:
            return self._finish(failed)

        lock = self.form.begin_submission()
        try:
            self._enter(SubmissionPhase.SUBMITTING)
            payload = self.form.payload()
            response = await self._call(identity, payload)

            if self.closed or not lock.is_current:
                return self._discard(lock)

            outcome = self._resolve(response, payload, record, lock)
        finally:
            lock.release()

        return self._finish(outcome)

    def _discard(self, lock: SubmissionLock) -> Discarded:
        """Drop a late resolution without touching form or controller state.

        Only returns the controller to IDLE when no newer submission holds
        the form; last_outcome always keeps describing the live attempt.
        """
        logger.info(
            "Discarding result of superseded submission (generation %d)", lock.generation
        )
        if not self.form.submitting:
            self.phase = SubmissionPhase.IDLE
        return Discarded(reason="superseded")

    def _enter(self, phase: SubmissionPhase) -> None:
        logger.debug("Submission phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _finish(self, outcome: SubmissionOutcome) -> SubmissionOutcome:
        self.last_outcome = outcome
        if outcome.phase is not SubmissionPhase.IDLE:
            self._enter(outcome.phase)
        self._enter(SubmissionPhase.IDLE)
        return outcome

    def _validate(self) -> ValidationFailed | None:
        fields_valid = self.form.validate_all()
        violations = evaluate_rules(self.form, self.form.rules)
        if fields_valid and not violations:
            return None

        message = self.settings.invalid_fields_message
        self.form.form_error = message
        self._scroll()
        return ValidationFailed(
            failure=FailureKind.VALIDATION if not fields_valid else FailureKind.CROSS_FIELD,
            message=message,
            invalid_fields=self.form.invalid_fields,
            violations=violations,
        )

    async def _call(self, identity: Any, payload: Mapping[str, str]) -> ServerResponse:
        try:
            raw = self._submit(identity, dict(payload))
            if inspect.isawaitable(raw):
                raw = await raw
        except Exception as exc:
            logger.warning("Submit collaborator raised: %s", exc, exc_info=True)
            return classify_exception(exc, self.settings)
        return interpret_response(raw, self.settings)

    def _resolve(
        self,
        response: ServerResponse,
        payload: dict[str, str],
        record: MutableMapping[str, Any] | None,
        lock: SubmissionLock,
    ) -> SubmissionOutcome:
        if isinstance(response, RevokedCredential):
            return self._relogin(response)

        if isinstance(response, TransportFailure):
            message = self.settings.transport_error_message
            self.form.form_error = message
            self._scroll()
            return SubmitRejected(
                failure=FailureKind.TRANSPORT,
                message=message,
                code=response.code,
            )

        # Completed call: the acting identity must still own the record
        if self.authorize is not None and not self.authorize():
            return self._deny()

        self._scroll()

        if isinstance(response, ErrorResponse):
            return self._reject(response)
        return self._accept(response, payload, record, lock)

    def _relogin(self, response: RevokedCredential) -> Unauthorized:
        logger.info("Credential revoked (code=%s); redirecting to login", response.code)
        encoded = encode_toast(self.settings.relogin_message)
        if self.navigator is not None:
            self.navigator.navigate_to(self.settings.login_path, encoded)
        self.form.reset()
        return Unauthorized(
            failure=FailureKind.AUTHORIZATION_REVOKED,
            message=self.settings.relogin_message,
            redirect=build_redirect(self.settings.login_path, encoded),
        )

    def _deny(self) -> Unauthorized:
        logger.warning("Acting identity no longer owns the record; leaving form")
        self._notify(self.settings.unauthorized_message)
        if self.navigator is not None:
            self.navigator.navigate_to(self.settings.unauthorized_path)
        self.form.reset()
        return Unauthorized(
            failure=FailureKind.AUTHORIZATION_MISMATCH,
            message=self.settings.unauthorized_message,
            redirect=self.settings.unauthorized_path,
        )

    def _reject(self, response: ErrorResponse) -> SubmitRejected:
        logger.warning("Server rejected submission: %s", response.message)
        self.form.form_error = response.message

        phase = SubmissionPhase.FORM_ERROR
        if response.field_id is not None and response.field_id in self.form:
            self.form[response.field_id].set_valid(False, response.message)
            phase = SubmissionPhase.FIELD_ERROR

        return SubmitRejected(
            phase=phase,
            failure=FailureKind.SERVER_REJECTION,
            message=response.message,
            code=response.code,
            field_id=response.field_id,
        )

    def _accept(
        self,
        response: SuccessResponse,
        payload: dict[str, str],
        record: MutableMapping[str, Any] | None,
        lock: SubmissionLock,
    ) -> SubmitSucceeded:
        # Server-echoed values win over the optimistic payload
        merged = {**payload, **response.record}
        if record is not None:
            record.update(merged)

        self.form.form_error = None
        for field in self.form:
            if field.descriptor.server_normalized:
                field.set_touched(False)

        lock.release()
        self._notify(self.settings.success_message)
        return SubmitSucceeded(payload=payload, record=merged)

    def _notify(self, message: str) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify(message)
        except Exception:
            logger.warning("Notifier failed for message %r", message, exc_info=True)

    def _scroll(self) -> None:
        if self.scroll_to_top is not None:
            self.scroll_to_top()
