from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from commerce_api.application.identity.dtos import UserInfo


class SignUpRequest(BaseModel):
    """
    Schema for user sign-up.

    Every field is optional here: missing and malformed values are both
    reported by the domain validators, as a 400 with the offending field.
    """

    login_id: str | None = Field(None, description="Login id (ASCII letters and digits)")
    password: str | None = Field(None, description="Raw password")
    name: str | None = Field(None, description="Display name")
    birth_date: str | None = Field(None, description="Birth date as YYYY-MM-DD or YYYYMMDD")
    email: str | None = Field(None, description="Email address")
    gender: str | None = Field(None, description="MALE or FEMALE")


class ChangePasswordRequest(BaseModel):
    """Schema for changing the current user's password."""

    current_password: str | None = Field(None, description="Current password")
    new_password: str | None = Field(None, description="New password")


class UserInfoResponse(BaseModel):
    """Schema for returning user details."""

    model_config = ConfigDict(from_attributes=True)

    login_id: str
    name: str
    masked_name: str = Field(..., description="Name with its last character replaced by '*'")
    birth_date: date
    email: str
    gender: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_info(cls, info: UserInfo) -> "UserInfoResponse":
        return cls.model_validate(info)


class ErrorDetail(BaseModel):
    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Body of every domain error response."""

    error: ErrorDetail
