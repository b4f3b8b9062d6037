"""FastAPI dependencies for identity and authentication."""

from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, Request

from commerce_api.application.identity.use_cases import AuthenticateUserUseCase
from commerce_api.config import Settings, get_settings
from commerce_api.core import container
from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.exceptions import UnauthorizedError
from commerce_api.infrastructure.common.di import inject_use_case


@dataclass(frozen=True)
class HeaderCredentials:
    login_id: str
    password: str = field(repr=False)


def get_header_credentials(
    request: Request, settings: Annotated[Settings, Depends(get_settings)]
) -> HeaderCredentials:
    """
    Read the login id and raw password from the configured request headers.

    Raises:
        UnauthorizedError: If either header is missing or empty
    """
    login_id = request.headers.get(settings.LOGIN_ID_HEADER)
    password = request.headers.get(settings.LOGIN_PASSWORD_HEADER)
    if not login_id or not password:
        raise UnauthorizedError
    return HeaderCredentials(login_id=login_id, password=password)


async def get_current_user(
    credentials: Annotated[HeaderCredentials, Depends(get_header_credentials)],
    use_case: Annotated[
        AuthenticateUserUseCase, Depends(inject_use_case(container.authenticate_user_use_case))
    ],
) -> User:
    """
    Get the user the request's header credentials belong to.

    Raises:
        UnauthorizedError: If the credentials do not authenticate
    """
    return use_case.authenticate(credentials.login_id, credentials.password).unwrap_or_raise()
