"""Identity domain exceptions."""

from typing import ClassVar

from commerce_api.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    ValidationError,
)


class PasswordContainsBirthDateError(ValidationError):
    """Raised when a password contains the owner's birth date."""

    code: ClassVar[str] = "PASSWORD_CONTAINS_BIRTH_DATE"

    def __init__(self) -> None:
        super().__init__(
            "Password cannot contain the birth date (YYYYMMDD, YYMMDD or MMDD)",
            field="password",
        )


class DuplicateLoginIdError(BusinessRuleViolationError):
    """Raised when signing up with a login id that is already registered."""

    code: ClassVar[str] = "DUPLICATE_LOGIN_ID"

    def __init__(self, login_id: str) -> None:
        super().__init__("unique_login_id", f"Login id {login_id} is already registered")
        self.login_id = login_id


class DuplicateEmailError(BusinessRuleViolationError):
    """Raised when signing up with an email that is already registered."""

    code: ClassVar[str] = "DUPLICATE_EMAIL"

    def __init__(self, email: str) -> None:
        super().__init__("unique_email", f"Email {email} is already registered")
        self.email = email


class UnauthorizedError(DomainError):
    """
    Raised when credentials do not authenticate.

    The message is the same whether the account is missing or the password
    is wrong.
    """

    code: ClassVar[str] = "UNAUTHORIZED"

    def __init__(self) -> None:
        super().__init__("Invalid login id or password")


class PasswordMismatchError(DomainError):
    """Raised when the current password is wrong during a password change."""

    code: ClassVar[str] = "PASSWORD_MISMATCH"

    def __init__(self) -> None:
        super().__init__("Current password is incorrect")


class SamePasswordReuseError(BusinessRuleViolationError):
    """Raised when the new password is the password already in use."""

    code: ClassVar[str] = "SAME_PASSWORD_REUSE"

    def __init__(self) -> None:
        super().__init__(
            "password_reuse", "New password must differ from the current password"
        )


class RegistrationDisabledError(DomainError):
    """Raised when user registration is disabled via feature flag."""

    code: ClassVar[str] = "REGISTRATION_DISABLED"

    def __init__(self) -> None:
        super().__init__("User registration is currently disabled")
