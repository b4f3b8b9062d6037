"""Tests for settings, feature flags and log redaction."""

import pytest
from pydantic import ValidationError as SettingsValidationError

from commerce_api.config import Settings, get_settings, redact_sensitive_fields
from commerce_api.feature_flags import get_feature_flags, is_unique_email_required


class TestSettings:
    def test_credential_header_names_are_stripped(self) -> None:
        settings = Settings(LOGIN_ID_HEADER="  X-Login ")
        assert settings.LOGIN_ID_HEADER == "X-Login"

    def test_empty_credential_header_name_is_rejected(self) -> None:
        with pytest.raises(SettingsValidationError):
            Settings(LOGIN_PASSWORD_HEADER="   ")

    def test_is_sqlite(self) -> None:
        assert Settings(DATABASE_URL="sqlite:///:memory:").is_sqlite
        assert not Settings(DATABASE_URL="postgresql://db/commerce").is_sqlite


class TestFeatureFlags:
    def test_flags_follow_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(get_settings(), "REQUIRE_UNIQUE_EMAIL", True)
        assert is_unique_email_required()
        assert get_feature_flags().unique_emails is True


class TestRedactSensitiveFields:
    def test_password_keys_are_redacted(self) -> None:
        event = {"event": "x", "login_id": "alice123", "password": "Sunshine9!"}
        result = redact_sensitive_fields(None, "info", event)
        assert result["password"] == "[REDACTED]"
        assert result["login_id"] == "alice123"
