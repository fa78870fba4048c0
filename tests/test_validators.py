"""Tests for stock validators and the validator registry."""

import pytest

from form_gate.catalog import (
    create_validator_registry,
    equals,
    exact_length,
    max_length,
    pattern,
    validate_email,
    validate_github,
    validate_graffiti,
)
from form_gate.errors import UnknownValidatorError


class TestStockValidators:
    """Tests for the named predicates."""

    @pytest.mark.parametrize("value", ["a@b.co", "fish.tank@iron.example.com"])
    def test_email_valid(self, value: str) -> None:
        assert validate_email(value) is True

    @pytest.mark.parametrize("value", ["", "plain", "a@b", "a b@c.de", "@b.co"])
    def test_email_invalid(self, value: str) -> None:
        assert validate_email(value) is False

    def test_graffiti_byte_length(self) -> None:
        """Test graffiti is limited by encoded bytes, not characters."""
        assert validate_graffiti("x" * 32) is True
        assert validate_graffiti("x" * 33) is False
        assert validate_graffiti("é" * 16) is True
        assert validate_graffiti("é" * 17) is False
        assert validate_graffiti("") is False

    @pytest.mark.parametrize("value", ["octocat", "a", "foo-bar", "x" * 39])
    def test_github_valid(self, value: str) -> None:
        assert validate_github(value) is True

    @pytest.mark.parametrize("value", ["-foo", "foo-", "foo--bar", "x" * 40, "foo_bar"])
    def test_github_invalid(self, value: str) -> None:
        assert validate_github(value) is False

    def test_length_factories(self) -> None:
        assert exact_length(3)("abc") is True
        assert exact_length(3)("ab") is False
        assert max_length(3)("") is True
        assert max_length(3)("abcd") is False

    def test_pattern_is_full_match(self) -> None:
        """Test patterns must match the whole value."""
        check = pattern(r"[0-9]+")

        assert check("123") is True
        assert check("123a") is False

    def test_equals(self) -> None:
        assert equals("true")("true") is True
        assert equals("true")("True") is False
        assert equals("true")("") is False


class TestValidatorRegistry:
    """Tests for ValidatorRegistry."""

    def test_stock_names(self) -> None:
        registry = create_validator_registry()

        assert registry.names == [
            "always",
            "email",
            "equals",
            "exact_length",
            "github",
            "graffiti",
            "max_length",
            "pattern",
        ]

    def test_build_without_args(self) -> None:
        assert create_validator_registry().build("email")("a@b.co") is True

    def test_build_with_args(self) -> None:
        check = create_validator_registry().build("exact_length", {"length": 64})

        assert check("A" * 64) is True
        assert check("A" * 63) is False

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownValidatorError, match="No validator registered"):
            create_validator_registry().build("phone")

    def test_bad_arguments(self) -> None:
        """Test wrong arguments are reported as a validator error."""
        with pytest.raises(UnknownValidatorError, match="Bad arguments"):
            create_validator_registry().build("email", {"strict": True})

    def test_register_custom(self) -> None:
        registry = create_validator_registry()
        registry.register("even_length", lambda: lambda value: len(value) % 2 == 0)

        assert registry.has("even_length")
        assert registry.build("even_length")("ab") is True
