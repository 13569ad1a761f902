"""Token parsing, signature verification, and temporal validation."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from pydantic import JsonValue

from simplejwt.codec.encoding import b64url_decode
from simplejwt.codec.json_codec import DEFAULT_CODEC, JSONCodec
from simplejwt.core.errors import (
    ErrorCode,
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingFieldError,
    NotBeforeTokenError,
    ParsingError,
    SignatureError,
)
from simplejwt.core.settings import JWTSettings
from simplejwt.crypto.algorithms import parse_algorithm
from simplejwt.crypto.keys import KeyMaterial, encode_key_material
from simplejwt.crypto.roles import resolve_key_role
from simplejwt.crypto.signing import SigningContext, create_signer
from simplejwt.token.types import Header, ParsedToken, Payload, RawHeader

logger = logging.getLogger(__name__)

SEGMENT_COUNT = 3


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenParser:
    """Verifies tokens against one verification key.

    The key is an HMAC secret for HS* tokens or the public key for RS*,
    ES* and PS* tokens. ``header`` and ``payload`` each run the full
    validation independently.
    """

    def __init__(
        self,
        key: KeyMaterial | None,
        *,
        codec: JSONCodec | None = None,
        settings: JWTSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if key is None:
            raise MissingFieldError("key", code=ErrorCode.SIGNED_KEY_REQUIRED)
        self._key = encode_key_material(key)
        self._codec = codec or DEFAULT_CODEC
        self._settings = settings or JWTSettings()
        self._clock = clock or _utcnow

    def header(self, token: str) -> Header:
        return self._validate(token).header

    def payload(self, token: str) -> Payload:
        return self._validate(token).payload

    def parse(self, token: str) -> ParsedToken:
        """Header and payload from one validation run."""
        return self._validate(token)

    def _validate(self, token: str) -> ParsedToken:
        segments = token.split(".")
        if len(segments) != SEGMENT_COUNT:
            logger.info("Rejected token with %d segments", len(segments))
            raise MalformedTokenError(
                f"Expected {SEGMENT_COUNT} segments, got {len(segments)}"
            )
        header_segment, payload_segment, signature_segment = segments

        raw_header = self._codec.decode(_decode_text(header_segment), RawHeader)
        header = Header(alg=parse_algorithm(raw_header.alg), typ=raw_header.typ)

        self._verify_signature(header, header_segment, payload_segment, signature_segment)

        claims = self._codec.decode(_decode_text(payload_segment), dict[str, JsonValue])
        payload = Payload(claims)
        self._check_times(payload)
        return ParsedToken(header=header, payload=payload)

    def _verify_signature(
        self,
        header: Header,
        header_segment: str,
        payload_segment: str,
        signature_segment: str,
    ) -> None:
        context = SigningContext(
            algorithm=header.alg,
            key=self._key,
            role=resolve_key_role(header.alg, for_signing=False),
        )
        try:
            signing_input = f"{header_segment}.{payload_segment}".encode("ascii")
            signature = b64url_decode(signature_segment)
            signer = create_signer(context, pss_salt_length=self._settings.pss_salt_length)
            valid = signer.verify(signing_input, signature)
        except (UnicodeEncodeError, ParsingError, SignatureError) as exc:
            logger.warning("Signature check for %s token failed: %s", header.alg, exc)
            raise InvalidSignatureError(str(exc)) from exc
        if not valid:
            logger.info("Rejected %s token with mismatching signature", header.alg)
            raise InvalidSignatureError

    def _check_times(self, payload: Payload) -> None:
        now = self._clock()
        leeway = timedelta(seconds=self._settings.leeway_seconds)

        expiration = payload.expiration()
        if expiration is not None and expiration + leeway < now:
            logger.info("Rejected token expired at %s", expiration.isoformat())
            raise ExpiredTokenError

        not_before = payload.not_before_at()
        if not_before is not None and not_before - leeway > now:
            logger.info("Rejected token not valid before %s", not_before.isoformat())
            raise NotBeforeTokenError


def _decode_text(segment: str) -> str:
    try:
        return b64url_decode(segment).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParsingError("Segment is not UTF-8 text") from exc
