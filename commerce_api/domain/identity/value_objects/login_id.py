"""LoginId value object: the user's unique sign-in identifier."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.value_object import ValidatedValue

MIN_LOGIN_ID_LENGTH = 4
MAX_LOGIN_ID_LENGTH = 20

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class LoginId(ValidatedValue):
    """
    Login identifier.

    Business Rules:
    - 4 to 20 characters after trimming surrounding whitespace
    - ASCII letters and digits only; a leading digit is allowed
    - Uniqueness is enforced by the Identity Directory, not here
    """

    field_name: ClassVar[str] = "login_id"
    required_message: ClassVar[str] = "Login id is required"

    value: str

    @classmethod
    def violation(cls, value: str) -> ValidationError | None:
        if not isinstance(value, str) or not value:
            return cls.invalid(cls.required_message)
        if not MIN_LOGIN_ID_LENGTH <= len(value) <= MAX_LOGIN_ID_LENGTH:
            return cls.invalid(
                f"Login id must be {MIN_LOGIN_ID_LENGTH}-{MAX_LOGIN_ID_LENGTH} characters long",
                value,
            )
        if not _ALPHANUMERIC.fullmatch(value):
            return cls.invalid("Login id may contain only English letters and digits", value)
        return None
