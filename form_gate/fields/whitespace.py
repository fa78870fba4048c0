"""Whitespace policies applied to raw input before validation and storage."""

from enum import Enum


class WhitespacePolicy(str, Enum):
    """How surrounding and embedded whitespace affects a field.

    BANNED leaves the string untouched but makes any whitespace invalid.
    TRIMMED strips leading and trailing whitespace only.
    ALLOWED applies no transform and no constraint.
    """

    BANNED = "banned"
    TRIMMED = "trimmed"
    ALLOWED = "allowed"


def apply_whitespace_policy(policy: WhitespacePolicy, raw: str) -> str:
    """Normalize a raw string according to a whitespace policy.

    Args:
        policy: The policy to apply.
        raw: The raw input string.

    Returns:
        The normalized string. Never raises.
    """
    if policy is WhitespacePolicy.TRIMMED:
        return raw.strip()
    return raw


def contains_whitespace(value: str) -> bool:
    """Return True if value contains any whitespace character."""
    return any(ch.isspace() for ch in value)


def violates_whitespace_policy(policy: WhitespacePolicy, value: str) -> bool:
    """Return True if a normalized value breaks the policy's structural rule."""
    return policy is WhitespacePolicy.BANNED and contains_whitespace(value)
