"""Identity application layer."""

from commerce_api.application.identity.dtos import (
    AuthenticateQuery,
    ChangePasswordCommand,
    GetMyInfoQuery,
    SignUpCommand,
    UserInfo,
)
from commerce_api.application.identity.use_cases import (
    AuthenticateUserUseCase,
    ChangePasswordUseCase,
    GetMyInfoUseCase,
    SignUpUseCase,
)

__all__ = [
    "AuthenticateQuery",
    "AuthenticateUserUseCase",
    "ChangePasswordCommand",
    "ChangePasswordUseCase",
    "GetMyInfoQuery",
    "GetMyInfoUseCase",
    "SignUpCommand",
    "SignUpUseCase",
    "UserInfo",
]
