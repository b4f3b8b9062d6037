"""Tests for Success / Failure results."""

import pytest

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.result import Failure, Success, first_failure


class TestResult:
    def test_success(self) -> None:
        result = Success(2)
        assert result.is_success
        assert not result.is_failure
        assert result.unwrap() == 2
        assert result.map(lambda value: value * 10).unwrap() == 20
        assert result.unwrap_or_raise() == 2

    def test_failure(self) -> None:
        error = ValidationError("bad", field="login_id")
        result = Failure(error)
        assert result.is_failure
        assert result.unwrap_error() is error
        assert result.map(lambda value: value * 10) is result
        assert result.value_or(7) == 7

    def test_failure_unwrap_or_raise_raises_carried_error(self) -> None:
        error = ValidationError("bad", field="email")
        with pytest.raises(ValidationError) as exc_info:
            Failure(error).unwrap_or_raise()
        assert exc_info.value is error

    def test_flat_map_chains(self) -> None:
        def halve(value: int) -> Success[int] | Failure[str]:
            return Success(value // 2) if value % 2 == 0 else Failure("odd")

        assert Success(8).flat_map(halve).flat_map(halve).unwrap() == 2
        assert Success(6).flat_map(halve).flat_map(halve).unwrap_error() == "odd"

    def test_first_failure_in_order(self) -> None:
        first = Failure("first")
        assert first_failure(Success(1), first, Failure("second")) is first
        assert first_failure(Success(1), Success(2)) is None
