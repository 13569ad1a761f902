"""Tests for base64url and lenient base64 helpers."""

import binascii

import pytest

from simplejwt.codec.encoding import (
    b64_decode_lenient,
    b64_encode,
    b64url_decode,
    b64url_encode,
)
from simplejwt.core.errors import ParsingError

HS256_HEADER_SEGMENT = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"


class TestB64UrlEncode:
    """Tests for padding-less base64url encoding."""

    def test_uses_url_alphabet_without_padding(self) -> None:
        assert b64url_encode(b"\xfb\xff") == "-_8"

    def test_empty_input(self) -> None:
        assert b64url_encode(b"") == ""

    def test_known_header(self) -> None:
        encoded = b64url_encode(b'{"alg":"HS256","typ":"JWT"}')
        assert encoded == HS256_HEADER_SEGMENT


class TestB64UrlDecode:
    """Tests for strict base64url decoding."""

    def test_decodes_unpadded(self) -> None:
        assert b64url_decode("-_8") == b"\xfb\xff"

    def test_decodes_known_header(self) -> None:
        assert b64url_decode(HS256_HEADER_SEGMENT) == b'{"alg":"HS256","typ":"JWT"}'

    @pytest.mark.parametrize("segment", ["abc=", "a+b/", "a", "ab cd", "é"])
    def test_rejects_invalid_segments(self, segment: str) -> None:
        with pytest.raises(ParsingError):
            b64url_decode(segment)


class TestLenientBase64:
    """Tests for key-text base64 decoding."""

    def test_standard_alphabet_with_padding(self) -> None:
        assert b64_decode_lenient("+/8=") == b"\xfb\xff"

    def test_url_alphabet_without_padding(self) -> None:
        assert b64_decode_lenient("-_8") == b"\xfb\xff"

    def test_ignores_whitespace(self) -> None:
        assert b64_decode_lenient("AA\nE=") == b"\x00\x01"

    def test_rejects_garbage(self) -> None:
        with pytest.raises(binascii.Error):
            b64_decode_lenient("not base64!")

    def test_encode_is_padded(self) -> None:
        assert b64_encode(b"\x00\x01") == "AAE="
