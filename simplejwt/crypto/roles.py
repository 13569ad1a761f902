"""Key role resolution for signing and verification."""

from enum import StrEnum

from simplejwt.crypto.algorithms import Algorithm, KeyFamily, family_of


class KeyRole(StrEnum):
    """Which side of a key family an operation uses."""

    SECRET = "secret"
    PRIVATE = "private"
    PUBLIC = "public"


def resolve_key_role(algorithm: Algorithm, *, for_signing: bool) -> KeyRole:
    """Symmetric algorithms always use the shared secret.

    Asymmetric algorithms sign with the private key and verify with the
    public key.
    """
    if family_of(algorithm) is KeyFamily.SYMMETRIC:
        return KeyRole.SECRET
    return KeyRole.PRIVATE if for_signing else KeyRole.PUBLIC
