from .authenticate_user_use_case import AuthenticateUserUseCase

__all__ = ["AuthenticateUserUseCase"]
