"""Use case for reading the signed-in user's own profile."""

from commerce_api.application.common.query import QueryHandler
from commerce_api.application.identity.dtos import GetMyInfoQuery, UserInfo
from commerce_api.application.identity.use_cases.authentication.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from commerce_api.domain.common.result import Result
from commerce_api.domain.identity.exceptions import UnauthorizedError


class GetMyInfoUseCase(QueryHandler[GetMyInfoQuery, Result[UserInfo, UnauthorizedError]]):
    def __init__(self, authenticate_user_use_case: AuthenticateUserUseCase) -> None:
        self.authenticate_user_use_case = authenticate_user_use_case

    def handle(self, query: GetMyInfoQuery) -> Result[UserInfo, UnauthorizedError]:
        return self.authenticate_user_use_case.authenticate(query.login_id, query.password).map(
            UserInfo.from_user
        )
