"""Tests for Gender enumeration."""

import pytest

from commerce_api.domain.identity.value_objects import Gender


class TestGender:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("MALE", Gender.MALE), ("female", Gender.FEMALE), (" Male ", Gender.MALE)],
    )
    def test_parse_is_case_insensitive(self, raw: str, expected: Gender) -> None:
        assert Gender.parse(raw).unwrap() is expected

    @pytest.mark.parametrize("raw", ["M", "other", "UNKNOWN"])
    def test_parse_rejects_unknown_values(self, raw: str) -> None:
        error = Gender.parse(raw).unwrap_error()
        assert error.field == "gender"

    def test_parse_optional_accepts_absence(self) -> None:
        assert Gender.parse_optional(None).unwrap() is None

    def test_parse_optional_still_rejects_bad_values(self) -> None:
        assert Gender.parse_optional("").is_failure
        assert Gender.parse_optional("x").is_failure
