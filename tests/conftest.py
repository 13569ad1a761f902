"""Shared test fixtures for simplejwt."""

import pytest

from simplejwt.crypto.algorithms import Algorithm, KeyFamily, family_of
from simplejwt.crypto.keys import (
    KeyPairData,
    KeySize,
    generate_key_pair,
    generate_secret_key,
)

_ENV_VARS = (
    "SIMPLEJWT_PSS_SALT_LENGTH",
    "SIMPLEJWT_LEEWAY_SECONDS",
    "SIMPLEJWT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class KeyRing:
    """Lazily generated keys, one keypair per family/curve."""

    def __init__(self) -> None:
        self._pairs: dict[str, KeyPairData] = {}
        self._secrets: dict[Algorithm, str] = {}

    def pair(self, algorithm: Algorithm) -> KeyPairData:
        family = family_of(algorithm)
        slot = "RSA" if family is KeyFamily.RSA else algorithm.value
        if slot not in self._pairs:
            self._pairs[slot] = generate_key_pair(algorithm, KeySize.LOW)
        return self._pairs[slot]

    def secret(self, algorithm: Algorithm) -> str:
        if algorithm not in self._secrets:
            self._secrets[algorithm] = generate_secret_key(algorithm)
        return self._secrets[algorithm]

    def signing_key(self, algorithm: Algorithm) -> str:
        if family_of(algorithm) is KeyFamily.SYMMETRIC:
            return self.secret(algorithm)
        return self.pair(algorithm).private_key_pem

    def verification_key(self, algorithm: Algorithm) -> str:
        if family_of(algorithm) is KeyFamily.SYMMETRIC:
            return self.secret(algorithm)
        return self.pair(algorithm).public_key_pem


@pytest.fixture(scope="session")
def keyring() -> KeyRing:
    """Session-wide key cache; RSA generation is slow."""
    return KeyRing()


@pytest.fixture(scope="session")
def rsa_keypair(keyring: KeyRing) -> KeyPairData:
    return keyring.pair(Algorithm.RS256)


@pytest.fixture(scope="session")
def other_rsa_keypair() -> KeyPairData:
    return generate_key_pair(Algorithm.RS256, KeySize.LOW)


@pytest.fixture
def hmac_secret() -> str:
    """32-byte HS256 secret in url-safe base64."""
    return "pxMLQ4yBbjjdjPKwoF7tQynFe1mzaBKSSt_ECwRGknE="
