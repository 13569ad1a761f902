"""Catalog of the twelve supported JWS algorithms."""

from enum import StrEnum
from typing import NamedTuple

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from simplejwt.core.errors import UnsupportedAlgorithmError


class Algorithm(StrEnum):
    """JWS ``alg`` header values."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"


class KeyFamily(StrEnum):
    """Structural category of key material, named after JWK ``kty``."""

    SYMMETRIC = "oct"
    RSA = "RSA"
    EC = "EC"


class SignatureScheme(StrEnum):
    """Signing strategy selected by an algorithm."""

    HMAC = "HMAC"
    RSA_PKCS1 = "RSASSA-PKCS1-v1_5"
    ECDSA = "ECDSA"
    RSA_PSS = "RSASSA-PSS"


class AlgorithmSpec(NamedTuple):
    """Static properties of one algorithm."""

    family: KeyFamily
    scheme: SignatureScheme
    digest: str
    primitive: str
    curve: str | None = None


_CATALOG: dict[Algorithm, AlgorithmSpec] = {
    Algorithm.HS256: AlgorithmSpec(
        KeyFamily.SYMMETRIC, SignatureScheme.HMAC, "SHA256", "HMAC-SHA256"
    ),
    Algorithm.HS384: AlgorithmSpec(
        KeyFamily.SYMMETRIC, SignatureScheme.HMAC, "SHA384", "HMAC-SHA384"
    ),
    Algorithm.HS512: AlgorithmSpec(
        KeyFamily.SYMMETRIC, SignatureScheme.HMAC, "SHA512", "HMAC-SHA512"
    ),
    Algorithm.RS256: AlgorithmSpec(
        KeyFamily.RSA, SignatureScheme.RSA_PKCS1, "SHA256", "SHA256withRSA"
    ),
    Algorithm.RS384: AlgorithmSpec(
        KeyFamily.RSA, SignatureScheme.RSA_PKCS1, "SHA384", "SHA384withRSA"
    ),
    Algorithm.RS512: AlgorithmSpec(
        KeyFamily.RSA, SignatureScheme.RSA_PKCS1, "SHA512", "SHA512withRSA"
    ),
    Algorithm.ES256: AlgorithmSpec(
        KeyFamily.EC, SignatureScheme.ECDSA, "SHA256", "SHA256withECDSA", "secp256r1"
    ),
    Algorithm.ES384: AlgorithmSpec(
        KeyFamily.EC, SignatureScheme.ECDSA, "SHA384", "SHA384withECDSA", "secp384r1"
    ),
    Algorithm.ES512: AlgorithmSpec(
        KeyFamily.EC, SignatureScheme.ECDSA, "SHA512", "SHA512withECDSA", "secp521r1"
    ),
    Algorithm.PS256: AlgorithmSpec(
        KeyFamily.RSA, SignatureScheme.RSA_PSS, "SHA256", "SHA256withRSA/PSS"
    ),
    Algorithm.PS384: AlgorithmSpec(
        KeyFamily.RSA, SignatureScheme.RSA_PSS, "SHA384", "SHA384withRSA/PSS"
    ),
    Algorithm.PS512: AlgorithmSpec(
        KeyFamily.RSA, SignatureScheme.RSA_PSS, "SHA512", "SHA512withRSA/PSS"
    ),
}

_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "SHA256": hashes.SHA256,
    "SHA384": hashes.SHA384,
    "SHA512": hashes.SHA512,
}

_CURVES: dict[str, type[ec.EllipticCurve]] = {
    "secp256r1": ec.SECP256R1,
    "secp384r1": ec.SECP384R1,
    "secp521r1": ec.SECP521R1,
}


def parse_algorithm(name: str) -> Algorithm:
    """Resolve an ``alg`` header value to an Algorithm."""
    try:
        return Algorithm(name)
    except ValueError as exc:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name!r}") from exc


def spec_of(algorithm: Algorithm) -> AlgorithmSpec:
    try:
        return _CATALOG[algorithm]
    except KeyError as exc:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm!r}") from exc


def family_of(algorithm: Algorithm) -> KeyFamily:
    return spec_of(algorithm).family


def scheme_of(algorithm: Algorithm) -> SignatureScheme:
    return spec_of(algorithm).scheme


def native_primitive_name(algorithm: Algorithm) -> str:
    """Name of the signing primitive, e.g. ``SHA256withRSA``."""
    return spec_of(algorithm).primitive


def hash_algorithm(algorithm: Algorithm) -> hashes.HashAlgorithm:
    """Fresh hash instance for the algorithm's digest."""
    return _HASHES[spec_of(algorithm).digest]()


def curve_of(algorithm: Algorithm) -> ec.EllipticCurve:
    """Elliptic curve mandated for an ES* algorithm."""
    curve = spec_of(algorithm).curve
    if curve is None:
        raise UnsupportedAlgorithmError(f"{algorithm} does not use an elliptic curve")
    return _CURVES[curve]()
