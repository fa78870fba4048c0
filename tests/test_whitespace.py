"""Tests for whitespace policies."""

import pytest

from form_gate.fields import (
    WhitespacePolicy,
    apply_whitespace_policy,
    contains_whitespace,
    violates_whitespace_policy,
)


class TestApplyWhitespacePolicy:
    """Tests for apply_whitespace_policy."""

    def test_trimmed_strips_surrounding_whitespace(self) -> None:
        """Test TRIMMED strips leading and trailing whitespace."""
        assert apply_whitespace_policy(WhitespacePolicy.TRIMMED, " x ") == "x"
        assert apply_whitespace_policy(WhitespacePolicy.TRIMMED, "\t x \n") == "x"

    def test_trimmed_preserves_internal_whitespace(self) -> None:
        """Test TRIMMED keeps whitespace between words."""
        assert apply_whitespace_policy(WhitespacePolicy.TRIMMED, "  iron  fish ") == "iron  fish"

    def test_banned_does_not_transform(self) -> None:
        """Test BANNED leaves the string as typed."""
        assert apply_whitespace_policy(WhitespacePolicy.BANNED, " a b ") == " a b "

    def test_allowed_does_not_transform(self) -> None:
        """Test ALLOWED leaves the string as typed."""
        assert apply_whitespace_policy(WhitespacePolicy.ALLOWED, " a b ") == " a b "

    def test_empty_string(self) -> None:
        """Test every policy accepts the empty string."""
        for policy in WhitespacePolicy:
            assert apply_whitespace_policy(policy, "") == ""


class TestContainsWhitespace:
    """Tests for whitespace detection."""

    @pytest.mark.parametrize("value", ["a b", "a\tb", "a\nb", "a\u00a0b", " "])
    def test_detects_whitespace(self, value: str) -> None:
        """Test spaces, tabs, newlines and non-breaking spaces are found."""
        assert contains_whitespace(value) is True

    def test_no_whitespace(self) -> None:
        """Test plain text has no whitespace."""
        assert contains_whitespace("ironfish") is False
        assert contains_whitespace("") is False

    def test_only_banned_policy_is_violated(self) -> None:
        """Test only BANNED turns whitespace into a violation."""
        assert violates_whitespace_policy(WhitespacePolicy.BANNED, "a b") is True
        assert violates_whitespace_policy(WhitespacePolicy.TRIMMED, "a b") is False
        assert violates_whitespace_policy(WhitespacePolicy.ALLOWED, "a b") is False
        assert violates_whitespace_policy(WhitespacePolicy.BANNED, "ab") is False
