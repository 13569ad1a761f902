"""Header and payload types produced by the builder and returned by the parser."""

from collections.abc import Iterator, Mapping
from datetime import UTC, datetime, tzinfo
from typing import Any, NamedTuple, TypeVar, get_origin, overload

from pydantic import BaseModel, ConfigDict, JsonValue, TypeAdapter, ValidationError

from simplejwt.core.errors import ClaimTypeError
from simplejwt.crypto.algorithms import Algorithm
from simplejwt.token.claims import (
    AUDIENCE,
    EXPIRATION,
    ISSUED_AT,
    ISSUER,
    NOT_BEFORE_AT,
    SUBJECT,
    from_epoch_seconds,
)

TOKEN_TYPE = "JWT"

T = TypeVar("T")


class Header(BaseModel):
    """JOSE header: exactly ``alg`` and ``typ``."""

    model_config = ConfigDict(frozen=True)

    alg: Algorithm
    typ: str = TOKEN_TYPE


class RawHeader(BaseModel):
    """Header as read off the wire, before the algorithm is resolved."""

    alg: str
    typ: str = TOKEN_TYPE


class Payload(Mapping[str, JsonValue]):
    """Read-only view of a verified claim set with typed accessors."""

    def __init__(self, claims: Mapping[str, JsonValue]) -> None:
        self._claims = dict(claims)

    def __getitem__(self, name: str) -> JsonValue:
        return self._claims[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def __repr__(self) -> str:
        return f"Payload({self._claims!r})"

    @property
    def claims(self) -> dict[str, JsonValue]:
        """Copy of the raw claim mapping."""
        return dict(self._claims)

    @property
    def issuer(self) -> str | None:
        return self.get_claim(ISSUER, str)

    @property
    def subject(self) -> str | None:
        return self.get_claim(SUBJECT, str)

    @property
    def audience(self) -> str | None:
        return self.get_claim(AUDIENCE, str)

    def issued_at(self, tz: tzinfo = UTC) -> datetime | None:
        return self._time_claim(ISSUED_AT, tz)

    def expiration(self, tz: tzinfo = UTC) -> datetime | None:
        return self._time_claim(EXPIRATION, tz)

    def not_before_at(self, tz: tzinfo = UTC) -> datetime | None:
        return self._time_claim(NOT_BEFORE_AT, tz)

    def _time_claim(self, name: str, tz: tzinfo) -> datetime | None:
        value = self._claims.get(name)
        if value is None:
            return None
        return from_epoch_seconds(name, value, tz)

    @overload
    def get_claim(self, name: str, expected_type: type[T]) -> T | None: ...

    @overload
    def get_claim(self, name: str, expected_type: Any) -> Any: ...

    def get_claim(self, name: str, expected_type: Any) -> Any:
        """Return a claim projected to ``expected_type``, or None if absent.

        Plain classes are matched with ``isinstance`` (``bool`` never passes
        as ``int``); pydantic models and generic aliases such as
        ``list[int]`` are validated strictly. A mismatch raises
        ClaimTypeError instead of coercing.
        """
        value = self._claims.get(name)
        if value is None:
            return None
        if (
            get_origin(expected_type) is None
            and isinstance(expected_type, type)
            and not issubclass(expected_type, BaseModel)
        ):
            if _matches(value, expected_type):
                return value
            raise ClaimTypeError(
                f"{name} is not of type {expected_type.__name__}, "
                f"got {type(value).__name__}"
            )
        try:
            return TypeAdapter(expected_type).validate_python(value, strict=True)
        except ValidationError as exc:
            raise ClaimTypeError(f"{name} does not match {expected_type!r}") from exc


def _matches(value: object, expected_type: type) -> bool:
    if isinstance(value, bool) and expected_type is not bool:
        return expected_type is object
    return isinstance(value, expected_type)


class ParsedToken(NamedTuple):
    """Header and payload from a single validation run."""

    header: Header
    payload: Payload
