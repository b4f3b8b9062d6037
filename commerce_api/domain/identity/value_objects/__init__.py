"""Identity value objects, one per user field."""

from .birth_date import BirthDate
from .email import Email
from .gender import Gender
from .login_id import LoginId
from .name import Name
from .password import HashedPassword, PasswordHasherProtocol, RawPassword

__all__ = [
    "BirthDate",
    "Email",
    "Gender",
    "HashedPassword",
    "LoginId",
    "Name",
    "PasswordHasherProtocol",
    "RawPassword",
]
