"""Common infrastructure schemas."""

from commerce_api.infrastructure.common.schemas.settings_schemas import (
    AppSettingsResponse,
    CredentialHeaders,
)

__all__ = [
    "AppSettingsResponse",
    "CredentialHeaders",
]
