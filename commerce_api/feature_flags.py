"""Sign-up feature flags, backed by Settings."""

from typing import Literal

from pydantic import BaseModel, Field

from commerce_api.config import get_settings

FeatureFlagKey = Literal["user_registrations", "unique_emails"]

# Flag key -> Settings attribute it reads
_FLAG_SETTINGS: dict[FeatureFlagKey, str] = {
    "user_registrations": "ALLOW_USER_REGISTRATIONS",
    "unique_emails": "REQUIRE_UNIQUE_EMAIL",
}


class FeatureFlags(BaseModel):
    """All feature flags, as exposed on the public settings endpoint."""

    user_registrations: bool = Field(..., description="Whether sign-up is open")
    unique_emails: bool = Field(
        ..., description="Whether sign-up rejects an email that is already registered"
    )


def get_feature_flag(key: FeatureFlagKey) -> bool:
    return bool(getattr(get_settings(), _FLAG_SETTINGS[key]))


def get_feature_flags() -> FeatureFlags:
    """Read every flag from the current settings. Nothing is cached here."""
    return FeatureFlags(**{key: get_feature_flag(key) for key in _FLAG_SETTINGS})


def is_user_registrations_enabled() -> bool:
    return get_feature_flag("user_registrations")


def is_unique_email_required() -> bool:
    return get_feature_flag("unique_emails")
