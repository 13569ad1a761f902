"""Reserved claim names, claim value validation, and epoch conversion."""

import math
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any

from pydantic import ConfigDict, JsonValue, TypeAdapter, ValidationError

from simplejwt.core.errors import ClaimTypeError, InvalidClaimError

ISSUER = "issuer"
SUBJECT = "subject"
AUDIENCE = "audience"
ISSUED_AT = "issuedAt"
EXPIRATION = "expiration"
NOT_BEFORE_AT = "notBeforeAt"

TIME_CLAIMS = frozenset({ISSUED_AT, EXPIRATION, NOT_BEFORE_AT})

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)

# NaN and Infinity have no JSON representation.
_CLAIM_VALUE: TypeAdapter[JsonValue] = TypeAdapter(
    JsonValue, config=ConfigDict(allow_inf_nan=False)
)


def validate_claim_value(name: str, value: Any) -> JsonValue:
    """Check that ``value`` is a string, number, boolean, null, list or mapping.

    Nested lists and mappings are checked recursively.
    """
    try:
        return _CLAIM_VALUE.validate_python(value)
    except ValidationError as exc:
        raise InvalidClaimError(
            f"Claim {name!r} has unsupported value type {type(value).__name__}"
        ) from exc


def to_epoch_seconds(moment: datetime) -> int:
    """Whole seconds since the epoch, floored, for an aware datetime."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise InvalidClaimError("Time claims require a timezone-aware datetime")
    return (moment - EPOCH) // _ONE_SECOND


def from_epoch_seconds(name: str, value: Any, tz: tzinfo = UTC) -> datetime:
    """Convert stored epoch seconds back to an aware datetime in ``tz``.

    Fractional seconds are kept; non-finite values are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ClaimTypeError(
            f"{name} must be a numeric epoch, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise ClaimTypeError(f"{name} must be a finite epoch, got {value!r}")
    try:
        return (EPOCH + timedelta(seconds=value)).astimezone(tz)
    except OverflowError as exc:
        raise ClaimTypeError(f"{name} is outside the representable range") from exc
