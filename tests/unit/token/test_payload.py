"""Tests for the Payload claim view."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import BaseModel

from simplejwt.core.errors import ClaimTypeError, ErrorCode
from simplejwt.token.types import Header, Payload


class Address(BaseModel):
    city: str
    zip: str


@pytest.fixture
def payload() -> Payload:
    return Payload(
        {
            "issuer": "auth.example",
            "subject": "user-1",
            "audience": "web",
            "issuedAt": 1700000000,
            "expiration": 4102412340,
            "age": 30,
            "ratio": 0.5,
            "isAdmin": True,
            "roles": ["admin", "ops"],
            "scores": [1, 2, 3],
            "address": {"city": "Seoul", "zip": "04524"},
        }
    )


class TestPayloadMapping:
    """Tests for the mapping behaviour."""

    def test_compares_equal_to_dict(self, payload: Payload) -> None:
        assert dict(payload) == payload.claims
        assert payload["age"] == 30
        assert len(payload) == 11

    def test_claims_is_a_copy(self, payload: Payload) -> None:
        payload.claims["age"] = 99
        assert payload["age"] == 30

    def test_registered_accessors(self, payload: Payload) -> None:
        assert payload.issuer == "auth.example"
        assert payload.subject == "user-1"
        assert payload.audience == "web"

    def test_absent_accessors_are_none(self) -> None:
        empty = Payload({})
        assert empty.issuer is None
        assert empty.expiration() is None
        assert empty.not_before_at() is None


class TestTimeAccessors:
    """Tests for issued_at / expiration / not_before_at."""

    def test_utc_by_default(self, payload: Payload) -> None:
        assert payload.issued_at() == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)

    def test_requested_zone(self, payload: Payload) -> None:
        seoul = timezone(timedelta(hours=9))
        expiration = payload.expiration(seoul)
        assert expiration is not None
        assert (expiration.year, expiration.hour, expiration.minute) == (2099, 23, 59)

    def test_non_numeric_time_claim(self) -> None:
        with pytest.raises(ClaimTypeError):
            Payload({"expiration": "tomorrow"}).expiration()


class TestGetClaim:
    """Tests for typed claim projection."""

    def test_absent_claim_is_none(self, payload: Payload) -> None:
        assert payload.get_claim("missing", str) is None

    def test_plain_types(self, payload: Payload) -> None:
        assert payload.get_claim("age", int) == 30
        assert payload.get_claim("isAdmin", bool) is True
        assert payload.get_claim("ratio", float) == 0.5
        assert payload.get_claim("roles", list) == ["admin", "ops"]

    def test_string_is_not_int(self, payload: Payload) -> None:
        with pytest.raises(ClaimTypeError) as exc_info:
            payload.get_claim("subject", int)
        assert exc_info.value.code is ErrorCode.CLASS_CAST_ERROR

    def test_bool_is_not_int(self, payload: Payload) -> None:
        with pytest.raises(ClaimTypeError):
            payload.get_claim("isAdmin", int)

    def test_int_is_not_float(self, payload: Payload) -> None:
        with pytest.raises(ClaimTypeError):
            payload.get_claim("age", float)

    def test_generic_alias(self, payload: Payload) -> None:
        assert payload.get_claim("scores", list[int]) == [1, 2, 3]
        with pytest.raises(ClaimTypeError):
            payload.get_claim("roles", list[int])

    def test_model_projection(self, payload: Payload) -> None:
        address = payload.get_claim("address", Address)
        assert address == Address(city="Seoul", zip="04524")

    def test_model_mismatch(self, payload: Payload) -> None:
        with pytest.raises(ClaimTypeError):
            payload.get_claim("roles", Address)

    def test_claim_type_error_is_type_error(self, payload: Payload) -> None:
        with pytest.raises(TypeError):
            payload.get_claim("age", str)


class TestHeader:
    """Tests for the Header model."""

    def test_defaults_to_jwt_type(self) -> None:
        assert Header(alg="HS256").model_dump(mode="json") == {
            "alg": "HS256",
            "typ": "JWT",
        }
