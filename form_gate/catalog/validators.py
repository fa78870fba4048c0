"""Stock validation predicates and the registry that names them.

Form definitions stored on disk refer to validators by name; the
registry maps each name to a factory taking the definition's arguments.
"""

import re
from collections.abc import Callable
from typing import Any

from form_gate.errors import UnknownValidatorError
from form_gate.fields.descriptor import always_valid

Validator = Callable[[str], bool]

GRAFFITI_MAX_BYTES = 32

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_GITHUB_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")


def validate_email(value: str) -> bool:
    """Loose email check: something@domain.tld without whitespace."""
    return bool(_EMAIL_RE.match(value))


def validate_graffiti(value: str) -> bool:
    """Graffiti tags are 1 to 32 bytes once UTF-8 encoded."""
    return 0 < len(value.encode("utf-8")) <= GRAFFITI_MAX_BYTES


def validate_github(value: str) -> bool:
    """GitHub usernames: up to 39 alphanumerics or single inner hyphens."""
    return bool(_GITHUB_RE.match(value))


def exact_length(length: int) -> Validator:
    def _check(value: str) -> bool:
        return len(value) == length

    return _check


def max_length(length: int) -> Validator:
    def _check(value: str) -> bool:
        return len(value) <= length

    return _check


def equals(expected: str) -> Validator:
    """Accept only one exact value, e.g. a ticked acknowledgment."""

    def _check(value: str) -> bool:
        return value == expected

    return _check


def pattern(regex: str) -> Validator:
    """Full-match a regular expression."""
    compiled = re.compile(regex)

    def _check(value: str) -> bool:
        return compiled.fullmatch(value) is not None

    return _check


class ValidatorRegistry:
    """Maps validator names to factories."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[..., Validator]] = {}

    def register(self, name: str, factory: Callable[..., Validator]) -> None:
        """Register a factory; parameterless validators use `lambda: fn`."""
        self._factories[name] = factory

    def has(self, name: str) -> bool:
        return name in self._factories

    @property
    def names(self) -> list[str]:
        return sorted(self._factories)

    def build(self, name: str, args: dict[str, Any] | None = None) -> Validator:
        """Build a validator by name.

        Raises:
            UnknownValidatorError: If no factory is registered under the name,
                or the arguments do not fit the factory.
        """
        if name not in self._factories:
            raise UnknownValidatorError(f"No validator registered as: {name}")
        try:
            return self._factories[name](**(args or {}))
        except TypeError as e:
            raise UnknownValidatorError(f"Bad arguments for validator {name}: {e}") from e


def create_validator_registry() -> ValidatorRegistry:
    """Create a registry holding every stock validator."""
    registry = ValidatorRegistry()
    registry.register("always", lambda: always_valid)
    registry.register("email", lambda: validate_email)
    registry.register("graffiti", lambda: validate_graffiti)
    registry.register("github", lambda: validate_github)
    registry.register("exact_length", exact_length)
    registry.register("max_length", max_length)
    registry.register("pattern", pattern)
    registry.register("equals", equals)
    return registry
