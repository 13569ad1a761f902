"""Entry points for building, parsing, and generating keys."""

from simplejwt.codec.json_codec import JSONCodec
from simplejwt.core.settings import JWTSettings
from simplejwt.crypto.algorithms import Algorithm
from simplejwt.crypto.keys import (
    KeyMaterial,
    KeySize,
    generate_key_pair,
    generate_secret_key,
)
from simplejwt.token.builder import TokenBuilder
from simplejwt.token.parser import TokenParser

__all__ = [
    "Algorithm",
    "KeySize",
    "builder",
    "generate_key_pair",
    "generate_secret_key",
    "parser",
]


def builder(
    *, codec: JSONCodec | None = None, settings: JWTSettings | None = None
) -> TokenBuilder:
    """Start a new token."""
    return TokenBuilder(codec=codec, settings=settings)


def parser(
    key: KeyMaterial | None,
    *,
    codec: JSONCodec | None = None,
    settings: JWTSettings | None = None,
) -> TokenParser:
    """Parser verifying against ``key`` (secret or public key)."""
    return TokenParser(key, codec=codec, settings=settings)
