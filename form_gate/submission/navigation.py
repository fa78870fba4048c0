"""Encoding of toast messages carried through navigation query strings."""

import base64
from urllib.parse import urlencode

TOAST_PARAM = "toast"


def encode_toast(message: str) -> str:
    """Encode a message as an opaque, URL-safe string."""
    return base64.urlsafe_b64encode(message.encode("utf-8")).decode("ascii")


def decode_toast(encoded: str) -> str:
    """Decode a message produced by `encode_toast()`.

    Raises:
        ValueError: If the input is not valid encoded text.
    """
    padded = encoded + "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")


def build_redirect(path: str, encoded_message: str | None = None) -> str:
    """Build a route with the toast query parameter attached."""
    if encoded_message is None:
        return path
    return f"{path}?{urlencode({TOAST_PARAM: encoded_message})}"
