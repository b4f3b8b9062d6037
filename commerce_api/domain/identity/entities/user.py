"""User aggregate for identity management."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar, Self

from commerce_api.domain.common.aggregate_root import AggregateRoot
from commerce_api.domain.common.exceptions import DomainError, ValidationError
from commerce_api.domain.common.result import Failure, Result, Success, first_failure
from commerce_api.domain.common.value_objects.ids import UserId
from commerce_api.domain.identity.events import UserPasswordChanged, UserRegistered
from commerce_api.domain.identity.exceptions import (
    PasswordMismatchError,
    SamePasswordReuseError,
    UnauthorizedError,
)
from commerce_api.domain.identity.policies.birth_date_in_password import (
    birth_date_in_password_policy,
)
from commerce_api.domain.identity.value_objects import (
    BirthDate,
    Email,
    Gender,
    HashedPassword,
    LoginId,
    Name,
    PasswordHasherProtocol,
    RawPassword,
)


@dataclass(eq=False)
class User(AggregateRoot[UserId]):
    """
    User aggregate: the only way to create, authenticate or re-password a user.

    Business Rules:
    - Every field is validated at registration, in the order
      login id, name, email, birth date, gender, password format,
      then the birth-date-in-password rule
    - The password is hashed only after every check passed
    - After registration only ``hashed_password`` may change, and only
      through ``change_password``
    - Login id uniqueness is enforced by the Identity Directory
    """

    frozen_fields: ClassVar[frozenset[str]] = frozenset(
        {"id", "login_id", "name", "email", "birth_date", "gender", "created_at"}
    )

    id: UserId
    login_id: LoginId
    hashed_password: HashedPassword
    name: Name
    birth_date: BirthDate
    email: Email
    gender: Gender | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def masked_name(self) -> str:
        return self.name.masked

    @classmethod
    def register(
        cls,
        *,
        login_id: str | None,
        raw_password: str | None,
        name: str | None,
        birth_date: date | str | None,
        email: str | None,
        hasher: PasswordHasherProtocol,
        gender: Gender | str | None = None,
    ) -> Result[User, ValidationError]:
        """
        Validate raw sign-up input and build a new, unsaved user.

        Returns:
            Success(User) with an unassigned id, or Failure carrying the
            first ValidationError in field order. Field format errors win
            over the cross-field birth date rule.
        """
        login_id_result = LoginId.parse(login_id)
        name_result = Name.parse(name)
        email_result = Email.parse(email)
        birth_date_result = BirthDate.parse(birth_date)
        gender_result = Gender.parse_optional(gender)
        password_result = RawPassword.parse(raw_password)

        failure = first_failure(
            login_id_result,
            name_result,
            email_result,
            birth_date_result,
            gender_result,
            password_result,
        )
        if failure is not None:
            return failure

        valid_birth_date = birth_date_result.unwrap()
        policy_result = birth_date_in_password_policy.check(
            password_result.unwrap(), valid_birth_date
        )
        if isinstance(policy_result, Failure):
            return policy_result

        user = cls(
            id=UserId.unassigned(),
            login_id=login_id_result.unwrap(),
            hashed_password=policy_result.unwrap().hashed_with(hasher),
            name=name_result.unwrap(),
            birth_date=valid_birth_date,
            email=email_result.unwrap(),
            gender=gender_result.unwrap(),
        )
        user._record_event(UserRegistered(login_id=user.login_id.value))
        return Success(user)

    @classmethod
    def reconstitute(
        cls,
        *,
        id: UserId,  # noqa: A002
        login_id: LoginId,
        hashed_password: HashedPassword,
        name: Name,
        birth_date: BirthDate,
        email: Email,
        gender: Gender | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> User:
        """Rebuild a user from storage. No events are recorded."""
        return cls(
            id=id,
            login_id=login_id,
            hashed_password=hashed_password,
            name=name,
            birth_date=birth_date,
            email=email,
            gender=gender,
            created_at=created_at,
            updated_at=updated_at,
        )

    def authenticate(
        self, raw_password: str | None, hasher: PasswordHasherProtocol
    ) -> Result[Self, UnauthorizedError]:
        """
        Check ``raw_password`` against the stored hash.

        The failure is a plain UnauthorizedError with nothing that tells a
        wrong password apart from any other rejection.
        """
        if not isinstance(raw_password, str) or not self.hashed_password.matches(
            raw_password, hasher
        ):
            return Failure(UnauthorizedError())
        return Success(self)

    def change_password(
        self,
        current_raw_password: str | None,
        new_raw_password: str | None,
        hasher: PasswordHasherProtocol,
    ) -> Result[Self, DomainError]:
        """
        Replace the password hash.

        Order of checks: current password verifies, new password does not
        verify against the current hash, new password format, then the
        birth date rule against this account's own birth date.
        """
        if self.authenticate(current_raw_password, hasher).is_failure:
            return Failure(PasswordMismatchError())

        if isinstance(new_raw_password, str) and self.hashed_password.matches(
            new_raw_password, hasher
        ):
            return Failure(SamePasswordReuseError())

        password_result = RawPassword.parse(new_raw_password)
        if isinstance(password_result, Failure):
            return password_result

        policy_result = birth_date_in_password_policy.check(
            password_result.unwrap(), self.birth_date
        )
        if isinstance(policy_result, Failure):
            return policy_result

        self.hashed_password = policy_result.unwrap().hashed_with(hasher)
        self._record_event(UserPasswordChanged(login_id=self.login_id.value))
        return Success(self)
