"""
Password value objects.

``RawPassword`` is the transient, format-checked plain text a client sent.
It lives only long enough to be checked and hashed and is never persisted.
``HashedPassword`` is the only stored form. It is opaque: two hashes of
the same password differ, so hashes are compared only through
``PasswordHasherProtocol.verify``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import ClassVar, Protocol

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.value_object import ValidatedValue

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 16

ALLOWED_PASSWORD_CHARACTERS = frozenset(string.ascii_letters + string.digits + string.punctuation)


class PasswordHasherProtocol(Protocol):
    """One-way, salted hash. ``verify(raw, hash(raw))`` is always True."""

    def hash(self, raw_password: str) -> str: ...

    def verify(self, raw_password: str, hashed_password: str) -> bool: ...


@dataclass(frozen=True, repr=False)
class RawPassword(ValidatedValue):
    """
    Plain text password, format stage only.

    Business Rules:
    - 8 to 16 characters
    - ASCII letters, digits and ASCII punctuation only
    - Surrounding whitespace is not trimmed: a space is a disallowed character

    The birth-date rule needs the owner's birth date and lives in
    ``BirthDateInPasswordPolicy``.
    """

    field_name: ClassVar[str] = "password"
    required_message: ClassVar[str] = "Password is required"

    value: str

    @classmethod
    def normalize(cls, raw: object) -> object:
        return raw

    @classmethod
    def violation(cls, value: str) -> ValidationError | None:
        # The raw value is never attached to the error.
        if not isinstance(value, str) or not value.strip():
            return cls.invalid(cls.required_message)
        if not MIN_PASSWORD_LENGTH <= len(value) <= MAX_PASSWORD_LENGTH:
            return cls.invalid(
                f"Password must be {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH} characters long"
            )
        if not set(value) <= ALLOWED_PASSWORD_CHARACTERS:
            return cls.invalid(
                "Password may contain only English letters, digits and special characters"
            )
        return None

    def hashed_with(self, hasher: PasswordHasherProtocol) -> HashedPassword:
        return HashedPassword(hasher.hash(self.value))

    def __repr__(self) -> str:
        return "RawPassword('********')"

    def __str__(self) -> str:
        return "********"


@dataclass(frozen=True, eq=False)
class HashedPassword:
    """Opaque stored password hash."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("Hashed password cannot be empty", field="password")

    def matches(self, raw_password: str, hasher: PasswordHasherProtocol) -> bool:
        return hasher.verify(raw_password, self.value)

    def __repr__(self) -> str:
        return "HashedPassword(<redacted>)"
