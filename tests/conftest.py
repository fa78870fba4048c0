"""Pytest configuration and shared fixtures."""

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def schemas_dir(project_root: Path) -> Path:
    """Return the schemas directory."""
    return project_root / "schemas"


@pytest.fixture
def form_registry_path(project_root: Path) -> Path:
    """Return the form registry path."""
    return project_root / "form-registry"


@pytest.fixture
def form_schema_path(schemas_dir: Path) -> Path:
    """Return the form definition schema path."""
    return schemas_dir / "form_definition.schema.json"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real ~/.config/form-gate."""
    home = tmp_path / "form-gate-home"
    monkeypatch.setenv("FORM_GATE_HOME", str(home))
    monkeypatch.delenv("FORM_GATE_REGISTRY", raising=False)
    return home


class FakeSubmit:
    """Submit collaborator that records calls.

    Returns `response`, or raises `error`. When `gated` is true the first
    call waits until `release()` is called.
    """

    def __init__(
        self,
        response: Mapping[str, Any] | None = None,
        error: BaseException | None = None,
        gated: bool = False,
    ) -> None:
        self.response = response if response is not None else {}
        self.error = error
        self.gated = gated
        self.calls: list[tuple[Any, dict[str, str]]] = []
        self._gate: asyncio.Event | None = None

    def release(self) -> None:
        assert self._gate is not None, "no gated call in flight"
        self._gate.set()

    async def __call__(self, identity: Any, payload: Mapping[str, str]) -> Mapping[str, Any]:
        self.calls.append((identity, dict(payload)))
        if self.gated and len(self.calls) == 1:
            self._gate = asyncio.Event()
            await self._gate.wait()
        if self.error is not None:
            raise self.error
        return self.response


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class RecordingNavigator:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def navigate_to(self, path: str, query_message: str | None = None) -> None:
        self.calls.append((path, query_message))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def submit_factory() -> type[FakeSubmit]:
    """Return the FakeSubmit class for building collaborators per test."""
    return FakeSubmit
