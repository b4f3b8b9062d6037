"""Tests for domain error to HTTP status mapping."""

import pytest
from fastapi import status

from commerce_api.domain.common.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from commerce_api.domain.identity.exceptions import (
    DuplicateEmailError,
    DuplicateLoginIdError,
    PasswordContainsBirthDateError,
    PasswordMismatchError,
    RegistrationDisabledError,
    SamePasswordReuseError,
    UnauthorizedError,
)
from commerce_api.exceptions import error_body, status_code_for


class TestStatusCodeFor:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (ValidationError("bad", field="email"), status.HTTP_400_BAD_REQUEST),
            (PasswordContainsBirthDateError(), status.HTTP_400_BAD_REQUEST),
            (SamePasswordReuseError(), status.HTTP_400_BAD_REQUEST),
            (DuplicateLoginIdError("alice123"), status.HTTP_409_CONFLICT),
            (DuplicateEmailError("a@b.co"), status.HTTP_409_CONFLICT),
            (UnauthorizedError(), status.HTTP_401_UNAUTHORIZED),
            (PasswordMismatchError(), status.HTTP_401_UNAUTHORIZED),
            (RegistrationDisabledError(), status.HTTP_403_FORBIDDEN),
            (EntityNotFoundError("User", 7), status.HTTP_404_NOT_FOUND),
            (InvariantViolationError("User", "x"), status.HTTP_500_INTERNAL_SERVER_ERROR),
        ],
    )
    def test_mapping(self, error: DomainError, expected: int) -> None:
        assert status_code_for(error) == expected


class TestErrorBody:
    def test_validation_error_names_the_field_without_its_value(self) -> None:
        body = error_body(ValidationError("Email must contain '@'", field="email", value="ab"))
        assert body == {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Email must contain '@'",
                "field": "email",
            }
        }

    def test_non_field_error(self) -> None:
        body = error_body(UnauthorizedError())
        assert body["error"]["code"] == "UNAUTHORIZED"
        assert body["error"]["field"] is None
