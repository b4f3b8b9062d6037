"""BirthDate value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.value_object import ValidatedValue

# Fixed-width forms only; the calendar check happens in date().
_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_COMPACT_DATE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")


@dataclass(frozen=True)
class BirthDate(ValidatedValue):
    """
    Birth date.

    Business Rules:
    - A real calendar date (1999-02-29 is rejected, 2000-02-29 is accepted)
    - Not after today in the local calendar
    - String input must be ``YYYY-MM-DD`` or ``YYYYMMDD``; out-of-range days
      fail instead of rolling over into the next month
    """

    field_name: ClassVar[str] = "birth_date"
    required_message: ClassVar[str] = "Birth date is required"

    value: date

    @classmethod
    def normalize(cls, raw: object) -> object:
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, str):
            return _parse_calendar_date(raw.strip())
        return raw

    @classmethod
    def violation(cls, value: object) -> ValidationError | None:
        if isinstance(value, ValidationError):
            return value
        if not isinstance(value, date) or isinstance(value, datetime):
            return cls.invalid(cls.required_message)
        if value > date.today():
            return cls.invalid("Birth date cannot be in the future", value.isoformat())
        return None

    @classmethod
    def of(cls, year: int, month: int, day: int) -> BirthDate:
        try:
            value = date(year, month, day)
        except ValueError as err:
            raise cls.invalid(
                "Birth date is not a valid calendar date", f"{year:04d}-{month:02d}-{day:02d}"
            ) from err
        return cls(value)

    def encodings(self) -> tuple[str, str, str]:
        """Numeric forms checked against passwords: YYYYMMDD, YYMMDD, MMDD."""
        full = f"{self.value.year:04d}{self.value.month:02d}{self.value.day:02d}"
        return full, full[2:], full[4:]

    def __str__(self) -> str:
        return self.value.isoformat()

    def to_primitive(self) -> str:
        return self.value.isoformat()


def _parse_calendar_date(text: str) -> date | ValidationError:
    match = _ISO_DATE.fullmatch(text) or _COMPACT_DATE.fullmatch(text)
    if match is None:
        return BirthDate.invalid("Birth date must be formatted as YYYY-MM-DD", text)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return BirthDate.invalid("Birth date is not a valid calendar date", text)
