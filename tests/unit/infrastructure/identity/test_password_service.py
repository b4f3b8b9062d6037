"""Tests for the pwdlib-backed credential hasher."""

import pytest

from commerce_api.infrastructure.identity.services import PasswordServiceAdapter


class TestPasswordServiceAdapter:
    @pytest.fixture(scope="class")
    def service(self) -> PasswordServiceAdapter:
        return PasswordServiceAdapter()

    def test_hash_then_verify(self, service) -> None:
        hashed = service.hash("Sunshine9!")
        assert hashed != "Sunshine9!"
        assert service.verify("Sunshine9!", hashed)
        assert not service.verify("Sunshine9?", hashed)

    def test_hashes_are_salted(self, service) -> None:
        assert service.hash("Sunshine9!") != service.hash("Sunshine9!")

    def test_malformed_hash_never_verifies(self, service) -> None:
        assert not service.verify("Sunshine9!", "not-a-hash")

    def test_dummy_hash_is_a_real_hash(self, service) -> None:
        dummy = service.dummy_hash()
        assert dummy.startswith("$argon2")
        assert not service.verify("Sunshine9!", dummy)
