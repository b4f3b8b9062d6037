"""Tests for BirthDate value object."""

from datetime import date, datetime, timedelta

import pytest

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.identity.value_objects import BirthDate


class TestBirthDate:
    @pytest.mark.parametrize("raw", ["1990-01-15", "19900115", date(1990, 1, 15)])
    def test_parse_accepts_supported_forms(self, raw: str | date) -> None:
        assert BirthDate.parse(raw).unwrap().value == date(1990, 1, 15)

    def test_parse_reduces_datetime_to_date(self) -> None:
        assert BirthDate.parse(datetime(1990, 1, 15, 8, 30)).unwrap().value == date(1990, 1, 15)

    def test_leap_day(self) -> None:
        assert BirthDate.parse("2000-02-29").is_success
        error = BirthDate.parse("1999-02-29").unwrap_error()
        assert error.field == "birth_date"
        assert "calendar date" in error.message

    @pytest.mark.parametrize("raw", ["1990-13-01", "1990-04-31", "19900230"])
    def test_parse_rejects_out_of_range_parts_without_rollover(self, raw: str) -> None:
        assert BirthDate.parse(raw).is_failure

    @pytest.mark.parametrize("raw", ["1990/01/15", "15-01-1990", "1990-1-5", "yesterday"])
    def test_parse_rejects_unsupported_formats(self, raw: str) -> None:
        assert "YYYY-MM-DD" in BirthDate.parse(raw).unwrap_error().message

    def test_today_is_accepted(self) -> None:
        assert BirthDate.parse(date.today()).is_success

    def test_future_date_is_rejected(self) -> None:
        tomorrow = date.today() + timedelta(days=1)
        error = BirthDate.parse(tomorrow.isoformat()).unwrap_error()
        assert "future" in error.message

    def test_parse_reports_missing_value_as_required(self) -> None:
        assert BirthDate.parse(None).unwrap_error().message == "Birth date is required"

    def test_of_raises_for_invalid_calendar_date(self) -> None:
        with pytest.raises(ValidationError):
            BirthDate.of(1999, 2, 29)

    def test_encodings(self) -> None:
        assert BirthDate.of(1990, 1, 15).encodings() == ("19900115", "900115", "0115")

    def test_encodings_pad_early_years(self) -> None:
        assert BirthDate.of(905, 3, 7).encodings() == ("09050307", "050307", "0307")

    def test_str_is_iso(self) -> None:
        assert str(BirthDate.of(2000, 5, 1)) == "2000-05-01"
