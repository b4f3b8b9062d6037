"""Use case for user sign-up."""

from collections.abc import Callable

import structlog

from commerce_api.application.common.command import CommandHandler
from commerce_api.application.identity.dtos import SignUpCommand, UserInfo
from commerce_api.application.identity.protocols import (
    CredentialHasherProtocol,
    IdentityDirectoryProtocol,
)
from commerce_api.domain.common.exceptions import DomainError
from commerce_api.domain.common.result import Failure, Result, Success
from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.exceptions import (
    DuplicateEmailError,
    DuplicateLoginIdError,
    RegistrationDisabledError,
)
from commerce_api.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class SignUpUseCase(CommandHandler[SignUpCommand, Result[UserInfo, DomainError]]):
    """
    Register a new account.

    Sequence: feature flag, login id fast-path duplicate check (before any
    validation or hashing), ``User.register``, optional email uniqueness,
    ``save``. The directory's own uniqueness guarantee still covers the
    race between the fast-path check and the save.
    """

    def __init__(
        self,
        identity_directory: IdentityDirectoryProtocol,
        password_hasher: CredentialHasherProtocol,
        require_unique_email: bool = False,
        registrations_enabled: Callable[[], bool] = is_user_registrations_enabled,
    ) -> None:
        self.identity_directory = identity_directory
        self.password_hasher = password_hasher
        self.require_unique_email = require_unique_email
        self.registrations_enabled = registrations_enabled

    def handle(self, command: SignUpCommand) -> Result[UserInfo, DomainError]:
        if not self.registrations_enabled():
            return Failure(RegistrationDisabledError())

        if isinstance(command.login_id, str) and self.identity_directory.exists_by_login_id(
            command.login_id.strip()
        ):
            logger.info("sign_up_rejected", reason="duplicate_login_id", login_id=command.login_id)
            return Failure(DuplicateLoginIdError(command.login_id.strip()))

        registration = User.register(
            login_id=command.login_id,
            raw_password=command.password,
            name=command.name,
            birth_date=command.birth_date,
            email=command.email,
            gender=command.gender,
            hasher=self.password_hasher,
        )
        if isinstance(registration, Failure):
            return registration
        user = registration.unwrap()

        if self.require_unique_email and self.identity_directory.exists_by_email(user.email.value):
            return Failure(DuplicateEmailError(user.email.value))

        events = user.collect_events()
        try:
            saved = self.identity_directory.save(user)
        except DuplicateLoginIdError as e:
            logger.info("sign_up_rejected", reason="duplicate_login_id", login_id=e.login_id)
            return Failure(e)

        for event in events:
            logger.info("user_registered", user_id=saved.id.value, **event.to_dict())

        return Success(UserInfo.from_user(saved))
