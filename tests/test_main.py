"""Tests for main API endpoints."""

import pytest
from fastapi.testclient import TestClient

from commerce_api.config import get_settings


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_settings_endpoint(client: TestClient) -> None:
    response = client.get("/api/v1/settings")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "0.1.0"
    assert data["credential_headers"] == {
        "login_id": "X-Loopers-LoginId",
        "password": "X-Loopers-LoginPw",
    }
    assert data["feature_flags"] == {"user_registrations": True, "unique_emails": False}


def test_settings_endpoint_reflects_flags(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(get_settings(), "ALLOW_USER_REGISTRATIONS", False)
    response = client.get("/api/v1/settings")
    assert response.json()["feature_flags"]["user_registrations"] is False
