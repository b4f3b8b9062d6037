"""
Base classes for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Single-value objects built from raw client input derive from
``ValidatedValue``. They expose two entry points that share one rule set:

- ``parse(raw)`` normalizes the raw input and returns ``Success(vo)`` or
  ``Failure(ValidationError)``. Bad input is an ordinary return value.
- Direct construction (``LoginId("alice123")``) enforces the same rule in
  ``__post_init__`` and raises ``ValidationError``.

Example:
    @dataclass(frozen=True)
    class Nickname(ValidatedValue):
        field_name: ClassVar[str] = "nickname"
        value: str

        @classmethod
        def violation(cls, value: str) -> ValidationError | None:
            if not value.isalpha():
                return cls.invalid("Nickname must contain letters only", value)
            return None
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self

from .exceptions import ValidationError
from .result import Failure, Result, Success


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (all attributes must match)
    - Self-validating (validation in __post_init__)
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Single-value VOs return their only attribute.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)


class ValidatedValue(ValueObject, ABC):
    """
    Single-value object whose ``value`` is checked against one rule set.

    Subclasses are frozen dataclasses with a ``value`` field and implement
    ``violation``. ``normalize`` may be overridden to change how raw input
    is cleaned up before checking (the default trims strings).
    """

    field_name: ClassVar[str] = "value"
    required_message: ClassVar[str] = "Value is required"

    value: Any

    def __post_init__(self) -> None:
        error = self.violation(self.value)
        if error is not None:
            raise error

    @classmethod
    @abstractmethod
    def violation(cls, value: Any) -> ValidationError | None:  # noqa: ANN401
        """Return the first rule ``value`` breaks, or None when it is acceptable."""

    @classmethod
    def normalize(cls, raw: Any) -> Any:  # noqa: ANN401
        if isinstance(raw, str):
            return raw.strip()
        return raw

    @classmethod
    def invalid(cls, message: str, value: object = None) -> ValidationError:
        """Build a ValidationError tagged with this object's field name."""
        return ValidationError(message, field=cls.field_name, value=value)

    @classmethod
    def parse(cls, raw: object) -> Result[Self, ValidationError]:
        """Normalize and validate raw input without raising."""
        if raw is None:
            return Failure(cls.invalid(cls.required_message))
        value = cls.normalize(raw)
        error = cls.violation(value)
        if error is not None:
            return Failure(error)
        return Success(cls(value))

    def __str__(self) -> str:
        return str(self.value)
