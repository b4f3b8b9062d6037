"""Tests for RawPassword and HashedPassword value objects."""

import string

import pytest

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.identity.value_objects import HashedPassword, RawPassword


class TestRawPassword:
    @pytest.mark.parametrize(
        "raw", ["Sunshine9!", "abcdefgh", "A" * 16, "p@ss{w}rd~", string.punctuation[:16]]
    )
    def test_parse_accepts_valid_passwords(self, raw: str) -> None:
        assert RawPassword.parse(raw).unwrap().value == raw

    @pytest.mark.parametrize("raw", ["Short1!", "A" * 17])
    def test_parse_rejects_bad_length(self, raw: str) -> None:
        error = RawPassword.parse(raw).unwrap_error()
        assert error.field == "password"
        assert "8-16" in error.message

    @pytest.mark.parametrize("raw", ["Sunshine 9!", "비밀번호123456", "Sunshine9!\t", "pässwörd12"])
    def test_parse_rejects_disallowed_characters(self, raw: str) -> None:
        error = RawPassword.parse(raw).unwrap_error()
        assert "special characters" in error.message

    def test_surrounding_whitespace_is_not_trimmed(self) -> None:
        assert RawPassword.parse(" Sunshine9!").is_failure

    @pytest.mark.parametrize("raw", [None, "", "        "])
    def test_parse_reports_missing_value_as_required(self, raw: str | None) -> None:
        assert RawPassword.parse(raw).unwrap_error().message == "Password is required"

    def test_error_never_carries_the_raw_value(self) -> None:
        error = RawPassword.parse("bad pass word").unwrap_error()
        assert error.value is None
        assert "bad pass word" not in str(error)

    def test_repr_and_str_are_redacted(self) -> None:
        password = RawPassword("Sunshine9!")
        assert "Sunshine9!" not in repr(password)
        assert "Sunshine9!" not in str(password)

    def test_hashed_with_uses_hasher(self, hasher) -> None:
        hashed = RawPassword("Sunshine9!").hashed_with(hasher)
        assert hasher.hash_calls == 1
        assert hashed.matches("Sunshine9!", hasher)
        assert not hashed.matches("Sunshine9?", hasher)


class TestHashedPassword:
    def test_rejects_empty_hash(self) -> None:
        with pytest.raises(ValidationError):
            HashedPassword("")

    def test_repr_is_redacted(self) -> None:
        assert "secret" not in repr(HashedPassword("hashed::secret"))
