"""Fluent builder producing compact signed tokens."""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Self

from pydantic import JsonValue

from simplejwt.codec.encoding import b64url_encode
from simplejwt.codec.json_codec import DEFAULT_CODEC, JSONCodec
from simplejwt.core.errors import ErrorCode, MissingFieldError
from simplejwt.core.settings import JWTSettings
from simplejwt.crypto.algorithms import Algorithm, parse_algorithm
from simplejwt.crypto.keys import KeyMaterial, encode_key_material
from simplejwt.crypto.roles import resolve_key_role
from simplejwt.crypto.signing import SigningContext, create_signer
from simplejwt.token.claims import (
    AUDIENCE,
    EXPIRATION,
    ISSUED_AT,
    ISSUER,
    NOT_BEFORE_AT,
    SUBJECT,
    to_epoch_seconds,
    validate_claim_value,
)
from simplejwt.token.types import Header

logger = logging.getLogger(__name__)


class TokenBuilder:
    """Accumulates claims and signs them into ``header.payload.signature``.

    Every setter overwrites any earlier value under the same claim name.
    ``build`` can be called repeatedly; each call signs afresh.
    """

    def __init__(
        self,
        *,
        codec: JSONCodec | None = None,
        settings: JWTSettings | None = None,
    ) -> None:
        self._codec = codec or DEFAULT_CODEC
        self._settings = settings or JWTSettings()
        self._algorithm: Algorithm | None = None
        self._key: str | None = None
        self._claims: dict[str, JsonValue] = {}

    def algorithm(self, algorithm: Algorithm | str) -> Self:
        self._algorithm = (
            algorithm if isinstance(algorithm, Algorithm) else parse_algorithm(algorithm)
        )
        return self

    def secret_key(self, key: KeyMaterial) -> Self:
        """Set the signing key: an HMAC secret, or any private key."""
        self._key = encode_key_material(key)
        return self

    def private_key(self, key: KeyMaterial) -> Self:
        """Set an RSA or EC private key (PEM, base64 DER, bytes, or key object)."""
        return self.secret_key(key)

    def issuer(self, issuer: str) -> Self:
        return self.claim(ISSUER, issuer)

    def subject(self, subject: str) -> Self:
        return self.claim(SUBJECT, subject)

    def audience(self, audience: str) -> Self:
        return self.claim(AUDIENCE, audience)

    def issued_at(self, moment: datetime) -> Self:
        return self.claim(ISSUED_AT, to_epoch_seconds(moment))

    def expiration(self, moment: datetime) -> Self:
        return self.claim(EXPIRATION, to_epoch_seconds(moment))

    def not_before_at(self, moment: datetime) -> Self:
        return self.claim(NOT_BEFORE_AT, to_epoch_seconds(moment))

    def claim(self, name: str, value: Any) -> Self:
        """Set an arbitrary claim; the value must be JSON-representable."""
        self._claims[name] = validate_claim_value(name, value)
        return self

    def claims(self, claims: Mapping[str, Any]) -> Self:
        for name, value in claims.items():
            self.claim(name, value)
        return self

    def build(self) -> str:
        """Validate required inputs, then serialize and sign."""
        if self._key is None:
            raise MissingFieldError("key", code=ErrorCode.SECRET_KEY_REQUIRED)
        if self._algorithm is None:
            raise MissingFieldError("algorithm", code=ErrorCode.ALGORITHM_REQUIRED)
        algorithm = self._algorithm

        header = Header(alg=algorithm)
        header_segment = b64url_encode(self._codec.encode(header).encode("utf-8"))
        payload_segment = b64url_encode(self._codec.encode(self._claims).encode("utf-8"))
        signing_input = f"{header_segment}.{payload_segment}"

        context = SigningContext(
            algorithm=algorithm,
            key=self._key,
            role=resolve_key_role(algorithm, for_signing=True),
        )
        signer = create_signer(context, pss_salt_length=self._settings.pss_salt_length)
        signature = signer.sign(signing_input.encode("ascii"))

        logger.debug("Built %s token with %d claims", algorithm, len(self._claims))
        return f"{signing_input}.{b64url_encode(signature)}"
