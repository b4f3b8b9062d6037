"""Commands, queries and DTOs for identity use cases."""

from dataclasses import dataclass, field
from datetime import date, datetime

from commerce_api.application.common.command import Command
from commerce_api.application.common.query import Query
from commerce_api.domain.identity.entities.user import User


@dataclass(frozen=True)
class SignUpCommand(Command):
    login_id: str | None
    password: str | None = field(repr=False)
    name: str | None
    birth_date: date | str | None
    email: str | None
    gender: str | None = None


@dataclass(frozen=True)
class AuthenticateQuery(Query):
    login_id: str | None
    password: str | None = field(repr=False)


@dataclass(frozen=True)
class GetMyInfoQuery(Query):
    login_id: str | None
    password: str | None = field(repr=False)


@dataclass(frozen=True)
class ChangePasswordCommand(Command):
    login_id: str | None
    current_password: str | None = field(repr=False)
    new_password: str | None = field(repr=False)


@dataclass(frozen=True)
class UserInfo:
    """
    Outward view of a user.

    ``masked_name`` is derived from the canonical name, never from a
    previously masked value.
    """

    login_id: str
    name: str
    masked_name: str
    birth_date: date
    email: str
    gender: str | None
    created_at: datetime | None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            login_id=user.login_id.value,
            name=user.name.value,
            masked_name=user.masked_name,
            birth_date=user.birth_date.value,
            email=user.email.value,
            gender=user.gender.value if user.gender else None,
            created_at=user.created_at,
        )
