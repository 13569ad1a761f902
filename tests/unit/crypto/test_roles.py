"""Tests for key role resolution."""

import pytest

from simplejwt.crypto.algorithms import Algorithm, KeyFamily, family_of
from simplejwt.crypto.roles import KeyRole, resolve_key_role

ASYMMETRIC = [a for a in Algorithm if family_of(a) is not KeyFamily.SYMMETRIC]


class TestResolveKeyRole:
    """Tests for resolve_key_role."""

    @pytest.mark.parametrize("algorithm", [Algorithm.HS256, Algorithm.HS384, Algorithm.HS512])
    @pytest.mark.parametrize("for_signing", [True, False])
    def test_symmetric_always_secret(self, algorithm: Algorithm, for_signing: bool) -> None:
        assert resolve_key_role(algorithm, for_signing=for_signing) is KeyRole.SECRET

    @pytest.mark.parametrize("algorithm", ASYMMETRIC)
    def test_asymmetric_signs_with_private(self, algorithm: Algorithm) -> None:
        assert resolve_key_role(algorithm, for_signing=True) is KeyRole.PRIVATE

    @pytest.mark.parametrize("algorithm", ASYMMETRIC)
    def test_asymmetric_verifies_with_public(self, algorithm: Algorithm) -> None:
        assert resolve_key_role(algorithm, for_signing=False) is KeyRole.PUBLIC
