from pydantic import BaseModel, Field

from commerce_api.feature_flags import FeatureFlags


class CredentialHeaders(BaseModel):
    login_id: str = Field(..., description="Header carrying the login id")
    password: str = Field(..., description="Header carrying the raw password")


class AppSettingsResponse(BaseModel):
    """Public settings a client needs before signing up or calling /users/me."""

    project_name: str
    version: str
    credential_headers: CredentialHeaders
    feature_flags: FeatureFlags = Field(..., description="All feature flags")
