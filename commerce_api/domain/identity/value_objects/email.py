"""Email value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from commerce_api.domain.common.exceptions import ValidationError
from commerce_api.domain.common.value_object import ValidatedValue

MAX_EMAIL_LENGTH = 255


@dataclass(frozen=True)
class Email(ValidatedValue):
    """
    Email address.

    Business Rules:
    - Surrounding whitespace is trimmed; no whitespace inside
    - At most MAX_EMAIL_LENGTH characters
    - Exactly one ``@`` with non-empty local and domain parts
    - The domain contains a ``.`` and the label after the last ``.`` is non-empty
    """

    field_name: ClassVar[str] = "email"
    required_message: ClassVar[str] = "Email is required"

    value: str

    @classmethod
    def violation(cls, value: str) -> ValidationError | None:
        if not isinstance(value, str) or not value:
            return cls.invalid(cls.required_message)
        if len(value) > MAX_EMAIL_LENGTH:
            return cls.invalid(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")
        if any(char.isspace() for char in value):
            return cls.invalid("Email cannot contain whitespace", value)

        at_count = value.count("@")
        if at_count == 0:
            return cls.invalid("Email must contain '@'", value)
        if at_count > 1:
            return cls.invalid("Email must contain exactly one '@'", value)

        local, domain = value.split("@")
        if not local:
            return cls.invalid("Email local part cannot be empty", value)
        if not domain:
            return cls.invalid("Email domain cannot be empty", value)
        if "." not in domain:
            return cls.invalid("Email domain must contain '.'", value)
        if not domain.rsplit(".", 1)[1]:
            return cls.invalid("Email domain must end with a non-empty label", value)
        return None

    @property
    def local_part(self) -> str:
        return self.value.split("@")[0]

    @property
    def domain(self) -> str:
        return self.value.split("@")[1]
