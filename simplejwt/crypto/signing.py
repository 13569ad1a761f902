"""Signing and verification strategies, one per signature scheme."""

import logging
from abc import ABC, abstractmethod
from typing import assert_never

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)
from pydantic import BaseModel, ConfigDict

from simplejwt.core.errors import SignatureError
from simplejwt.crypto.algorithms import (
    Algorithm,
    SignatureScheme,
    curve_of,
    hash_algorithm,
    scheme_of,
)
from simplejwt.crypto.keys import decode_secret, load_private_key, load_public_key
from simplejwt.crypto.roles import KeyRole

logger = logging.getLogger(__name__)

_NATIVE_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


class SigningContext(BaseModel):
    """Inputs for one sign or verify call. Never reused across tokens."""

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm
    key: str
    role: KeyRole


class Signer(ABC):
    """Produces and checks raw signature bytes over a message."""

    def __init__(self, algorithm: Algorithm) -> None:
        self.algorithm = algorithm

    @abstractmethod
    def sign(self, message: bytes) -> bytes:
        """Return the signature of ``message``."""

    @abstractmethod
    def verify(self, message: bytes, signature: bytes) -> bool:
        """Return False on a genuine mismatch; raise SignatureError on setup failures."""


class HmacSigner(Signer):
    """HS256/384/512 with a shared secret."""

    def __init__(self, algorithm: Algorithm, secret: str) -> None:
        super().__init__(algorithm)
        self._secret = decode_secret(secret)

    def _mac(self, message: bytes) -> hmac.HMAC:
        try:
            mac = hmac.HMAC(self._secret, hash_algorithm(self.algorithm))
        except _NATIVE_ERRORS as exc:
            raise SignatureError(f"HMAC setup failed for {self.algorithm}") from exc
        mac.update(message)
        return mac

    def sign(self, message: bytes) -> bytes:
        return self._mac(message).finalize()

    def verify(self, message: bytes, signature: bytes) -> bool:
        # HMAC.verify compares in constant time.
        try:
            self._mac(message).verify(signature)
        except InvalidSignature:
            return False
        return True


class AsymmetricSigner(Signer):
    """Shared key handling for RSA and EC strategies.

    A PRIVATE role loads a PKCS#8 private key and can both sign and verify;
    a PUBLIC role loads a SubjectPublicKeyInfo key and can only verify.
    """

    key_kind = "RSA"
    private_types: tuple[type, ...] = ()
    public_types: tuple[type, ...] = ()

    def __init__(self, algorithm: Algorithm, key: str, role: KeyRole) -> None:
        super().__init__(algorithm)
        if role is KeyRole.PRIVATE:
            private_key = load_private_key(key)
            if not isinstance(private_key, self.private_types):
                raise SignatureError(
                    f"{algorithm} requires a {self.key_kind} private key, "
                    f"got {type(private_key).__name__}"
                )
            self._private_key = private_key
            self._public_key = private_key.public_key()
        elif role is KeyRole.PUBLIC:
            public_key = load_public_key(key)
            if not isinstance(public_key, self.public_types):
                raise SignatureError(
                    f"{algorithm} requires a {self.key_kind} public key, "
                    f"got {type(public_key).__name__}"
                )
            self._private_key = None
            self._public_key = public_key
        else:
            raise SignatureError(f"{algorithm} cannot use a {role} key")

    def sign(self, message: bytes) -> bytes:
        if self._private_key is None:
            raise SignatureError(f"{self.algorithm} signing requires a private key")
        try:
            return self._sign(message)
        except _NATIVE_ERRORS as exc:
            raise SignatureError(f"{self.algorithm} signing failed") from exc

    def verify(self, message: bytes, signature: bytes) -> bool:
        try:
            self._verify(message, signature)
        except InvalidSignature:
            return False
        except _NATIVE_ERRORS as exc:
            raise SignatureError(f"{self.algorithm} verification failed") from exc
        return True

    @abstractmethod
    def _sign(self, message: bytes) -> bytes: ...

    @abstractmethod
    def _verify(self, message: bytes, signature: bytes) -> None: ...


class RsaPkcs1Signer(AsymmetricSigner):
    """RS256/384/512: deterministic RSASSA-PKCS1-v1_5."""

    private_types = (rsa.RSAPrivateKey,)
    public_types = (rsa.RSAPublicKey,)

    def _sign(self, message: bytes) -> bytes:
        return self._private_key.sign(
            message, padding.PKCS1v15(), hash_algorithm(self.algorithm)
        )

    def _verify(self, message: bytes, signature: bytes) -> None:
        self._public_key.verify(
            signature, message, padding.PKCS1v15(), hash_algorithm(self.algorithm)
        )


class RsaPssSigner(AsymmetricSigner):
    """PS256/384/512: randomized RSASSA-PSS with MGF1 over the message hash.

    Two signatures of the same message differ; only ``verify`` is stable.
    """

    private_types = (rsa.RSAPrivateKey,)
    public_types = (rsa.RSAPublicKey,)

    def __init__(
        self,
        algorithm: Algorithm,
        key: str,
        role: KeyRole,
        salt_length: int | None = None,
    ) -> None:
        super().__init__(algorithm, key, role)
        self.salt_length = (
            hash_algorithm(algorithm).digest_size if salt_length is None else salt_length
        )

    def _padding(self) -> padding.PSS:
        return padding.PSS(
            mgf=padding.MGF1(hash_algorithm(self.algorithm)),
            salt_length=self.salt_length,
        )

    def _sign(self, message: bytes) -> bytes:
        return self._private_key.sign(
            message, self._padding(), hash_algorithm(self.algorithm)
        )

    def _verify(self, message: bytes, signature: bytes) -> None:
        self._public_key.verify(
            signature, message, self._padding(), hash_algorithm(self.algorithm)
        )


class EcdsaSigner(AsymmetricSigner):
    """ES256/384/512 producing fixed-width ``r || s`` signatures."""

    key_kind = "EC"
    private_types = (ec.EllipticCurvePrivateKey,)
    public_types = (ec.EllipticCurvePublicKey,)

    def __init__(self, algorithm: Algorithm, key: str, role: KeyRole) -> None:
        super().__init__(algorithm, key, role)
        expected = curve_of(algorithm)
        if self._public_key.curve.name != expected.name:
            raise SignatureError(
                f"{algorithm} requires curve {expected.name}, "
                f"got {self._public_key.curve.name}"
            )
        self._coordinate_size = (expected.key_size + 7) // 8

    def _sign(self, message: bytes) -> bytes:
        der = self._private_key.sign(message, ec.ECDSA(hash_algorithm(self.algorithm)))
        r, s = decode_dss_signature(der)
        size = self._coordinate_size
        return r.to_bytes(size, "big") + s.to_bytes(size, "big")

    def _verify(self, message: bytes, signature: bytes) -> None:
        size = self._coordinate_size
        if len(signature) != 2 * size:
            raise InvalidSignature
        r = int.from_bytes(signature[:size], "big")
        s = int.from_bytes(signature[size:], "big")
        self._public_key.verify(
            encode_dss_signature(r, s),
            message,
            ec.ECDSA(hash_algorithm(self.algorithm)),
        )


def create_signer(context: SigningContext, *, pss_salt_length: int | None = None) -> Signer:
    """Build a fresh strategy for ``context``.

    ``pss_salt_length`` only applies to PS* algorithms; None selects the
    digest length.
    """
    algorithm, key, role = context.algorithm, context.key, context.role
    logger.debug("Creating %s signer for %s key", algorithm, role)
    match scheme_of(algorithm):
        case SignatureScheme.HMAC:
            if role is not KeyRole.SECRET:
                raise SignatureError(f"{algorithm} cannot use a {role} key")
            return HmacSigner(algorithm, key)
        case SignatureScheme.RSA_PKCS1:
            return RsaPkcs1Signer(algorithm, key, role)
        case SignatureScheme.ECDSA:
            return EcdsaSigner(algorithm, key, role)
        case SignatureScheme.RSA_PSS:
            return RsaPssSigner(algorithm, key, role, salt_length=pss_salt_length)
        case unreachable:
            assert_never(unreachable)
