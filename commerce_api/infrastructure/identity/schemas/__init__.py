"""Identity context schemas."""

from commerce_api.infrastructure.identity.schemas.user_schemas import (
    ChangePasswordRequest,
    ErrorDetail,
    ErrorResponse,
    SignUpRequest,
    UserInfoResponse,
)

__all__ = [
    "ChangePasswordRequest",
    "ErrorDetail",
    "ErrorResponse",
    "SignUpRequest",
    "UserInfoResponse",
]
