from .password_service_adapter import PasswordServiceAdapter

__all__ = [
    "PasswordServiceAdapter",
]
