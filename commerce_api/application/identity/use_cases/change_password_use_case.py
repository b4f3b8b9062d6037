"""Use case for changing a user's password."""

import structlog

from commerce_api.application.common.command import CommandHandler
from commerce_api.application.identity.dtos import ChangePasswordCommand, UserInfo
from commerce_api.application.identity.protocols import (
    CredentialHasherProtocol,
    IdentityDirectoryProtocol,
)
from commerce_api.domain.common.exceptions import DomainError
from commerce_api.domain.common.result import Failure, Result, Success
from commerce_api.domain.identity.exceptions import UnauthorizedError

logger = structlog.get_logger(__name__)


class ChangePasswordUseCase(CommandHandler[ChangePasswordCommand, Result[UserInfo, DomainError]]):
    """
    Replace a user's password.

    The aggregate does the checking (current password, reuse, format,
    birth date rule); this use case only loads and saves.
    """

    def __init__(
        self,
        identity_directory: IdentityDirectoryProtocol,
        password_hasher: CredentialHasherProtocol,
    ) -> None:
        self.identity_directory = identity_directory
        self.password_hasher = password_hasher

    def handle(self, command: ChangePasswordCommand) -> Result[UserInfo, DomainError]:
        user = (
            self.identity_directory.find_by_login_id(command.login_id.strip())
            if command.login_id
            else None
        )
        if user is None:
            self.password_hasher.verify(
                command.current_password or "", self.password_hasher.dummy_hash()
            )
            return Failure(UnauthorizedError())

        result = user.change_password(
            command.current_password, command.new_password, self.password_hasher
        )
        if isinstance(result, Failure):
            logger.info(
                "password_change_rejected",
                login_id=command.login_id,
                reason=result.unwrap_error().code,
            )
            return result

        events = user.collect_events()
        saved = self.identity_directory.save(user)
        for event in events:
            logger.info("user_password_changed", user_id=saved.id.value, **event.to_dict())

        return Success(UserInfo.from_user(saved))
