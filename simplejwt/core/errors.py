"""Exception hierarchy for token building, parsing, and signing."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable failure kinds carried by every JWTError."""

    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    NOT_BEFORE_TOKEN = "not_before_token"
    MALFORMED_TOKEN = "malformed_token"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_CLAIMS = "invalid_claims"
    PARSING_ERROR = "parsing_error"
    SECRET_KEY_REQUIRED = "secret_key_required"
    ALGORITHM_REQUIRED = "algorithm_required"
    KEY_SIZE_REQUIRED = "key_size_required"
    SIGNED_KEY_REQUIRED = "signed_key_required"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    KEY_GENERATION_ERROR = "key_generation_error"
    SIGNATURE_ERROR = "signature_error"
    CLASS_CAST_ERROR = "class_cast_error"

    @property
    def message(self) -> str:
        """Default message for this code."""
        return _MESSAGES[self]


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_TOKEN: "The token is invalid.",
    ErrorCode.EXPIRED_TOKEN: "The token has expired.",
    ErrorCode.NOT_BEFORE_TOKEN: "The token cannot be used before the specified time.",
    ErrorCode.MALFORMED_TOKEN: "The token is malformed.",
    ErrorCode.INVALID_SIGNATURE: "The token signature is invalid.",
    ErrorCode.INVALID_CLAIMS: "The token claims are invalid.",
    ErrorCode.PARSING_ERROR: "Error occurred during token parsing.",
    ErrorCode.SECRET_KEY_REQUIRED: "The SecretKey is required.",
    ErrorCode.ALGORITHM_REQUIRED: "The Algorithm is required.",
    ErrorCode.KEY_SIZE_REQUIRED: "The Key Size is required.",
    ErrorCode.SIGNED_KEY_REQUIRED: "The Signed Key is required.",
    ErrorCode.UNSUPPORTED_ALGORITHM: "The algorithm is not supported.",
    ErrorCode.KEY_GENERATION_ERROR: "Error occurred during key generation.",
    ErrorCode.SIGNATURE_ERROR: "Error occurred during signature generation.",
    ErrorCode.CLASS_CAST_ERROR: "Error occurred during class cast.",
}


class JWTError(Exception):
    """Base class for every failure raised by simplejwt."""

    default_code: ErrorCode = ErrorCode.INVALID_TOKEN

    def __init__(self, message: str | None = None, *, code: ErrorCode | None = None) -> None:
        self.code = code or self.default_code
        super().__init__(message or self.code.message)


class MissingFieldError(JWTError, ValueError):
    """A required builder/parser/generator input was not supplied."""

    default_code = ErrorCode.SECRET_KEY_REQUIRED

    def __init__(
        self, field: str, message: str | None = None, *, code: ErrorCode | None = None
    ) -> None:
        self.field = field
        super().__init__(message, code=code)


class UnsupportedAlgorithmError(JWTError):
    """Algorithm name or family outside the fixed table."""

    default_code = ErrorCode.UNSUPPORTED_ALGORITHM


class SignatureError(JWTError):
    """A native cryptographic operation failed for a reason other than a mismatch."""

    default_code = ErrorCode.SIGNATURE_ERROR


class KeyGenerationError(JWTError):
    default_code = ErrorCode.KEY_GENERATION_ERROR


class InvalidClaimError(JWTError, ValueError):
    """A claim value cannot be represented in a token payload."""

    default_code = ErrorCode.INVALID_CLAIMS


class ClaimTypeError(JWTError, TypeError):
    """A claim was requested at a type that does not match its stored value."""

    default_code = ErrorCode.CLASS_CAST_ERROR


class InvalidTokenError(JWTError):
    default_code = ErrorCode.INVALID_TOKEN


class MalformedTokenError(InvalidTokenError):
    default_code = ErrorCode.MALFORMED_TOKEN


class ParsingError(InvalidTokenError):
    default_code = ErrorCode.PARSING_ERROR


class InvalidSignatureError(InvalidTokenError):
    default_code = ErrorCode.INVALID_SIGNATURE


class ExpiredTokenError(InvalidTokenError):
    default_code = ErrorCode.EXPIRED_TOKEN


class NotBeforeTokenError(InvalidTokenError):
    default_code = ErrorCode.NOT_BEFORE_TOKEN
