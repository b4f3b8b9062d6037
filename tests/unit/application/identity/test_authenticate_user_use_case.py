"""Tests for AuthenticateUserUseCase and GetMyInfoUseCase."""

import pytest

from commerce_api.application.identity.dtos import AuthenticateQuery, GetMyInfoQuery, SignUpCommand
from commerce_api.application.identity.use_cases import (
    AuthenticateUserUseCase,
    GetMyInfoUseCase,
    SignUpUseCase,
)
from commerce_api.domain.identity.exceptions import UnauthorizedError


@pytest.fixture
def registered(directory, hasher) -> None:
    SignUpUseCase(directory, hasher, registrations_enabled=lambda: True).handle(
        SignUpCommand(
            login_id="alice123",
            password="Sunshine9!",
            name="홍길동",
            birth_date="2000-05-01",
            email="a@b.co",
            gender="FEMALE",
        )
    ).unwrap()


@pytest.mark.usefixtures("registered")
class TestAuthenticateUserUseCase:
    @pytest.fixture
    def use_case(self, directory, hasher) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(directory, hasher)

    def test_authenticates(self, use_case) -> None:
        user = use_case.handle(AuthenticateQuery("alice123", "Sunshine9!")).unwrap()
        assert user.login_id.value == "alice123"

    def test_wrong_password(self, use_case) -> None:
        error = use_case.authenticate("alice123", "Sunshine9?").unwrap_error()
        assert isinstance(error, UnauthorizedError)

    def test_unknown_login_id_gives_same_error_and_still_verifies(self, use_case, hasher) -> None:
        wrong_password = use_case.authenticate("alice123", "Sunshine9?").unwrap_error()
        verify_calls = hasher.verify_calls

        unknown = use_case.authenticate("nobody99", "Sunshine9!").unwrap_error()

        assert hasher.verify_calls == verify_calls + 1
        assert type(unknown) is type(wrong_password)
        assert unknown.message == wrong_password.message

    @pytest.mark.parametrize(("login_id", "password"), [(None, None), ("", "Sunshine9!")])
    def test_missing_credentials(self, use_case, login_id, password) -> None:
        assert use_case.authenticate(login_id, password).is_failure


@pytest.mark.usefixtures("registered")
class TestGetMyInfoUseCase:
    def test_returns_masked_info(self, directory, hasher) -> None:
        use_case = GetMyInfoUseCase(AuthenticateUserUseCase(directory, hasher))

        info = use_case.handle(GetMyInfoQuery("alice123", "Sunshine9!")).unwrap()

        assert info.name == "홍길동"
        assert info.masked_name == "홍길*"
        assert info.gender == "FEMALE"
        assert info.email == "a@b.co"

    def test_rejects_bad_credentials(self, directory, hasher) -> None:
        use_case = GetMyInfoUseCase(AuthenticateUserUseCase(directory, hasher))
        result = use_case.handle(GetMyInfoQuery("alice123", "nope"))
        assert isinstance(result.unwrap_error(), UnauthorizedError)
