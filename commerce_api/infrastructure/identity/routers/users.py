from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from commerce_api.application.identity.dtos import (
    ChangePasswordCommand,
    GetMyInfoQuery,
    SignUpCommand,
)
from commerce_api.application.identity.use_cases import (
    ChangePasswordUseCase,
    GetMyInfoUseCase,
    SignUpUseCase,
)
from commerce_api.core import container
from commerce_api.domain.identity.entities.user import User
from commerce_api.infrastructure.common.di import inject_use_case
from commerce_api.infrastructure.identity.dependencies import (
    HeaderCredentials,
    get_current_user,
    get_header_credentials,
)
from commerce_api.infrastructure.identity.schemas import (
    ChangePasswordRequest,
    ErrorResponse,
    SignUpRequest,
    UserInfoResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        **_ERROR_RESPONSES,
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def sign_up(
    request: SignUpRequest,
    use_case: Annotated[SignUpUseCase, Depends(inject_use_case(container.sign_up_use_case))],
) -> UserInfoResponse:
    """
    Register a new user account.

    Every field is validated; the first failing field is reported.
    No session or token is issued.
    """
    command = SignUpCommand(
        login_id=request.login_id,
        password=request.password,
        name=request.name,
        birth_date=request.birth_date,
        email=request.email,
        gender=request.gender,
    )
    info = use_case.handle(command).unwrap_or_raise()
    return UserInfoResponse.from_info(info)


@router.get("/me", responses=_ERROR_RESPONSES)
async def get_me(
    credentials: Annotated[HeaderCredentials, Depends(get_header_credentials)],
    use_case: Annotated[GetMyInfoUseCase, Depends(inject_use_case(container.get_my_info_use_case))],
) -> UserInfoResponse:
    """Get the profile of the user named by the credential headers, with the name masked."""
    query = GetMyInfoQuery(login_id=credentials.login_id, password=credentials.password)
    info = use_case.handle(query).unwrap_or_raise()
    return UserInfoResponse.from_info(info)


@router.patch(
    "/me/password",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
async def change_password(
    request: ChangePasswordRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        ChangePasswordUseCase, Depends(inject_use_case(container.change_password_use_case))
    ],
) -> Response:
    """
    Change the current user's password.

    The credential headers must authenticate, and ``current_password``
    in the body must match as well.
    """
    command = ChangePasswordCommand(
        login_id=current_user.login_id.value,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    use_case.handle(command).unwrap_or_raise()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
