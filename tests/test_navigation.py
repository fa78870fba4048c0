"""Tests for toast encoding and redirect building."""

from urllib.parse import parse_qs, urlparse

import pytest

from form_gate.submission import build_redirect, decode_toast, encode_toast


class TestToast:
    """Tests for encode_toast and decode_toast."""

    def test_encoded_is_url_safe(self) -> None:
        """Test the encoding has no characters needing escapes."""
        encoded = encode_toast("Please log in again.")

        assert encoded == "UGxlYXNlIGxvZyBpbiBhZ2Fpbi4="
        assert decode_toast(encoded) == "Please log in again."

    def test_unicode(self) -> None:
        """Test non-ASCII text survives."""
        assert decode_toast(encode_toast("Grüße ✓")) == "Grüße ✓"

    def test_missing_padding(self) -> None:
        """Test padding stripped by a router is tolerated."""
        encoded = encode_toast("hi").rstrip("=")
        assert decode_toast(encoded) == "hi"

    def test_garbage(self) -> None:
        """Test undecodable input raises ValueError."""
        with pytest.raises(ValueError):
            decode_toast("////")


class TestBuildRedirect:
    """Tests for build_redirect."""

    def test_without_message(self) -> None:
        """Test a bare path is returned as-is."""
        assert build_redirect("/") == "/"

    def test_with_message(self) -> None:
        """Test the toast parameter carries the encoded message."""
        redirect = build_redirect("/login", encode_toast("Please log in again."))
        parsed = urlparse(redirect)

        assert parsed.path == "/login"
        toast = parse_qs(parsed.query)["toast"][0]
        assert decode_toast(toast) == "Please log in again."
