"""Protocols for the collaborators a submission talks to.

The engine never performs I/O itself. Persisting data, showing toasts
and changing screens are delegated to objects implementing these
protocols.
"""

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SubmitCollaborator(Protocol):
    """Persists a submitted payload.

    The result is either a success record (the persisted values, possibly
    normalized by the server) or an error mapping carrying `code` and
    `message`. Any result with an `error` or `code` key counts as a failure.
    Transport failures are raised.
    """

    def __call__(
        self,
        identity: Any,
        payload: Mapping[str, str],
    ) -> Awaitable[Mapping[str, Any]] | Mapping[str, Any]:
        ...


@runtime_checkable
class Notifier(Protocol):
    """Fire-and-forget user notification (toast)."""

    def notify(self, message: str) -> None:
        ...


@runtime_checkable
class Navigator(Protocol):
    """Moves the user to another screen."""

    def navigate_to(self, path: str, query_message: str | None = None) -> None:
        """Navigate to a path.

        Args:
            path: Target route.
            query_message: Optional toast message, already URL-safe encoded.
        """
        ...
