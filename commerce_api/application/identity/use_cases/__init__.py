from .authentication.authenticate_user_use_case import AuthenticateUserUseCase
from .change_password_use_case import ChangePasswordUseCase
from .get_my_info_use_case import GetMyInfoUseCase
from .sign_up_use_case import SignUpUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "ChangePasswordUseCase",
    "GetMyInfoUseCase",
    "SignUpUseCase",
]
