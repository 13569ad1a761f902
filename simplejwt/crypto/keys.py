"""Key generation and key material loading for every algorithm family."""

import binascii
import logging
import secrets
from enum import IntEnum

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.types import (
    PrivateKeyTypes,
    PublicKeyTypes,
)
from pydantic import BaseModel, ConfigDict

from simplejwt.codec.encoding import b64_decode_lenient, b64_encode
from simplejwt.core.errors import (
    ErrorCode,
    KeyGenerationError,
    MissingFieldError,
    SignatureError,
    UnsupportedAlgorithmError,
)
from simplejwt.crypto.algorithms import (
    Algorithm,
    KeyFamily,
    curve_of,
    family_of,
    hash_algorithm,
)

logger = logging.getLogger(__name__)

RSA_PUBLIC_EXPONENT = 65537
PEM_PREFIX = "-----BEGIN"

KeyMaterial = str | bytes | PrivateKeyTypes | PublicKeyTypes


class KeySize(IntEnum):
    """RSA modulus sizes in bits."""

    HIGH = 4096
    MIDDLE = 3072
    LOW = 2048


class KeyPairData(BaseModel):
    """An asymmetric keypair in PEM form."""

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm
    private_key_pem: str
    public_key_pem: str


def generate_secret_key(algorithm: Algorithm | None) -> str:
    """Generate a random HMAC secret sized to the digest, as base64 text."""
    if algorithm is None:
        raise MissingFieldError("algorithm", code=ErrorCode.ALGORITHM_REQUIRED)
    if family_of(algorithm) is not KeyFamily.SYMMETRIC:
        raise UnsupportedAlgorithmError(f"{algorithm} does not use a shared secret")
    size = hash_algorithm(algorithm).digest_size
    logger.debug("Generating %d-byte secret for %s", size, algorithm)
    return b64_encode(secrets.token_bytes(size))


def generate_key_pair(
    algorithm: Algorithm | None, key_size: KeySize | None
) -> KeyPairData:
    """Generate a keypair for an RSA, RSA-PSS or ECDSA algorithm.

    ``key_size`` sizes RSA moduli; EC keys always use the curve the
    algorithm mandates.
    """
    if algorithm is None:
        raise MissingFieldError("algorithm", code=ErrorCode.ALGORITHM_REQUIRED)
    if key_size is None:
        raise MissingFieldError("key_size", code=ErrorCode.KEY_SIZE_REQUIRED)

    family = family_of(algorithm)
    private_key: rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey
    try:
        if family is KeyFamily.RSA:
            private_key = rsa.generate_private_key(
                public_exponent=RSA_PUBLIC_EXPONENT,
                key_size=int(key_size),
            )
        elif family is KeyFamily.EC:
            private_key = ec.generate_private_key(curve_of(algorithm))
        else:
            raise UnsupportedAlgorithmError(f"{algorithm} does not use a key pair")
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyGenerationError(f"Could not generate {algorithm} key pair") from exc

    logger.debug("Generated %s key pair for %s", family, algorithm)
    return KeyPairData(
        algorithm=algorithm,
        private_key_pem=private_key_to_pem(private_key),
        public_key_pem=public_key_to_pem(private_key.public_key()),
    )


def private_key_to_pem(private_key: PrivateKeyTypes) -> str:
    """Serialize a private key as unencrypted PKCS#8 PEM."""
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


def public_key_to_pem(public_key: PublicKeyTypes) -> str:
    """Serialize a public key as SubjectPublicKeyInfo PEM."""
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


def encode_key_material(key: KeyMaterial) -> str:
    """Normalize any accepted key input to its encoded-text form.

    Text passes through unchanged, PEM bytes are decoded, other bytes are
    base64 encoded, and RSA or EC key objects are serialized to PEM. Anything
    else raises SignatureError.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, bytes):
        if key.lstrip().startswith(PEM_PREFIX.encode()):
            return key.decode("ascii")
        return b64_encode(key)
    if isinstance(key, rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey):
        return private_key_to_pem(key)
    if isinstance(key, rsa.RSAPublicKey | ec.EllipticCurvePublicKey):
        return public_key_to_pem(key)
    raise SignatureError(f"Unsupported key material: {type(key).__name__}")


def decode_secret(text: str) -> bytes:
    """Decode base64 secret text into raw HMAC key bytes.

    PEM text is refused so a public key can never double as an HMAC secret.
    """
    if text.lstrip().startswith(PEM_PREFIX):
        raise SignatureError("PEM key material cannot be used as an HMAC secret")
    try:
        secret = b64_decode_lenient(text)
    except (binascii.Error, ValueError) as exc:
        raise SignatureError("Secret key is not valid base64") from exc
    if not secret:
        raise SignatureError("Secret key is empty")
    return secret


def load_private_key(text: str) -> PrivateKeyTypes:
    """Load a PKCS#8 private key from PEM or base64 DER text."""
    try:
        if text.lstrip().startswith(PEM_PREFIX):
            return serialization.load_pem_private_key(text.encode(), password=None)
        return serialization.load_der_private_key(b64_decode_lenient(text), password=None)
    except (binascii.Error, ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SignatureError("Private key could not be loaded") from exc


def load_public_key(text: str) -> PublicKeyTypes:
    """Load a SubjectPublicKeyInfo public key from PEM or base64 DER text."""
    try:
        if text.lstrip().startswith(PEM_PREFIX):
            return serialization.load_pem_public_key(text.encode())
        return serialization.load_der_public_key(b64_decode_lenient(text))
    except (binascii.Error, ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SignatureError("Public key could not be loaded") from exc
