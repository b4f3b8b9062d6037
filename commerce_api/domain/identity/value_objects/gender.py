"""Gender enumeration."""

from __future__ import annotations

from enum import Enum

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.result import Failure, Result, Success


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"

    @classmethod
    def parse(cls, raw: object) -> Result[Gender, ValidationError]:
        """Case-insensitive lookup; anything but male/female is rejected."""
        if not isinstance(raw, str) or not raw.strip():
            return Failure(ValidationError("Gender is required", field="gender"))
        try:
            return Success(cls(raw.strip().upper()))
        except ValueError:
            return Failure(
                ValidationError("Gender must be MALE or FEMALE", field="gender", value=raw)
            )

    @classmethod
    def parse_optional(cls, raw: object) -> Result[Gender | None, ValidationError]:
        """Like ``parse``, but a missing value (None) is accepted as no gender."""
        if raw is None:
            return Success(None)
        if isinstance(raw, Gender):
            return Success(raw)
        return cls.parse(raw)
