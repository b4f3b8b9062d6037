"""Identity domain layer."""

from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.exceptions import (
    DuplicateEmailError,
    DuplicateLoginIdError,
    PasswordContainsBirthDateError,
    PasswordMismatchError,
    RegistrationDisabledError,
    SamePasswordReuseError,
    UnauthorizedError,
)

__all__ = [
    "DuplicateEmailError",
    "DuplicateLoginIdError",
    "PasswordContainsBirthDateError",
    "PasswordMismatchError",
    "RegistrationDisabledError",
    "SamePasswordReuseError",
    "UnauthorizedError",
    "User",
]
