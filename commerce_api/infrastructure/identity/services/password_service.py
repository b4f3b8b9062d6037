"""Password hashing and verification service."""

from functools import lru_cache

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from commerce_api.config import get_settings

password_hash = PasswordHash.recommended()


@lru_cache
def _dummy_hash() -> str:
    # A real hash, so that verifying against it costs the same as a real check.
    return password_hash.hash("dummy_password_for_timing_attack_prevention")


def _peppered(plain_password: str) -> str:
    return plain_password + get_settings().PASSWORD_PEPPER


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper. Output is salted, so it differs per call."""
    return password_hash.hash(_peppered(plain_password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never verify."""
    try:
        return password_hash.verify(_peppered(plain_password), hashed_password)
    except UnknownHashError:
        return False


def get_dummy_hash() -> str:
    """Get a dummy hash for timing attack prevention."""
    return _dummy_hash()
