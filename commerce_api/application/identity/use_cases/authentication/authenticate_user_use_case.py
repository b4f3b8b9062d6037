"""Use case for authenticating a user with login id and password."""

import structlog

from commerce_api.application.common.query import QueryHandler
from commerce_api.application.identity.dtos import AuthenticateQuery
from commerce_api.application.identity.protocols import (
    CredentialHasherProtocol,
    IdentityDirectoryProtocol,
)
from commerce_api.domain.common.result import Failure, Result
from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.exceptions import UnauthorizedError

logger = structlog.get_logger(__name__)


class AuthenticateUserUseCase(QueryHandler[AuthenticateQuery, Result[User, UnauthorizedError]]):
    """Use case for authenticating a user with login id and password."""

    def __init__(
        self,
        identity_directory: IdentityDirectoryProtocol,
        password_hasher: CredentialHasherProtocol,
    ) -> None:
        self.identity_directory = identity_directory
        self.password_hasher = password_hasher

    def handle(self, query: AuthenticateQuery) -> Result[User, UnauthorizedError]:
        return self.authenticate(query.login_id, query.password)

    def authenticate(self, login_id: str, password: str) -> Result[User, UnauthorizedError]:
        """
        Authenticate a user with login id and password.

        An unknown login id and a wrong password produce the same
        UnauthorizedError, and both cost one ``verify`` call.
        """
        user = self.identity_directory.find_by_login_id(login_id.strip()) if login_id else None

        if user is None:
            # Keep timing consistent with the wrong-password path
            self.password_hasher.verify(password or "", self.password_hasher.dummy_hash())
            logger.info("authentication_failed", login_id=login_id)
            return Failure(UnauthorizedError())

        result = user.authenticate(password, self.password_hasher)
        if result.is_failure:
            logger.info("authentication_failed", login_id=login_id)
        return result
