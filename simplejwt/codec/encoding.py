"""Padding-less base64url and lenient base64 helpers."""

import base64
import binascii
import re

from simplejwt.core.errors import ParsingError

_B64URL_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """Decode a padding-less base64url segment.

    Padding characters and the standard-alphabet ``+`` and ``/`` are rejected,
    as is any length that cannot come from the encoder.
    """
    if not _B64URL_ALPHABET.fullmatch(segment) or len(segment) % 4 == 1:
        raise ParsingError(f"Invalid base64url segment of length {len(segment)}")
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise ParsingError("Invalid base64url segment") from exc


def b64_encode(data: bytes) -> str:
    """Encode bytes as standard padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def b64_decode_lenient(text: str) -> bytes:
    """Decode standard or url-safe base64, with or without padding.

    Whitespace (as found in wrapped key dumps) is ignored.
    Raises ``binascii.Error`` on anything else.
    """
    compact = "".join(text.split()).rstrip("=")
    normalized = compact.replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)
