"""Name value object: the user's display name."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import ClassVar

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.value_object import ValidatedValue
from commerce_api.domain.identity.policies.name_masking import mask_name, user_perceived_length

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 10

# One script per name; mixing classes is rejected.
SCRIPT_CLASSES: dict[str, re.Pattern[str]] = {
    "latin": re.compile(r"[A-Za-z]+"),
    "hangul": re.compile(r"[\uac00-\ud7a3]+"),
    "han": re.compile(r"[\u4e00-\u9fff]+"),
}


def script_of(name: str) -> str | None:
    """Return the script class every character of ``name`` belongs to, if any."""
    for script, pattern in SCRIPT_CLASSES.items():
        if pattern.fullmatch(name):
            return script
    return None


@dataclass(frozen=True)
class Name(ValidatedValue):
    """
    Display name.

    Business Rules:
    - 2 to 10 user-perceived characters after trimming and NFC normalization
    - Letters of exactly one script class (Latin, Hangul or Han)
    - No digits, punctuation or whitespace
    """

    field_name: ClassVar[str] = "name"
    required_message: ClassVar[str] = "Name is required"

    value: str

    @classmethod
    def normalize(cls, raw: object) -> object:
        if isinstance(raw, str):
            return unicodedata.normalize("NFC", raw.strip())
        return raw

    @classmethod
    def violation(cls, value: str) -> ValidationError | None:
        if not isinstance(value, str) or not value.strip():
            return cls.invalid(cls.required_message)
        if not MIN_NAME_LENGTH <= user_perceived_length(value) <= MAX_NAME_LENGTH:
            return cls.invalid(
                f"Name must be {MIN_NAME_LENGTH}-{MAX_NAME_LENGTH} characters long", value
            )
        if script_of(value) is None:
            return cls.invalid(
                "Name must use letters of a single script, without digits, "
                "symbols or spaces",
                value,
            )
        return None

    @property
    def script(self) -> str:
        return script_of(self.value) or ""

    @property
    def masked(self) -> str:
        """Privacy-safe form: the last character replaced by ``*``."""
        return mask_name(self.value)
