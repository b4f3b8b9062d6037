"""
Result type for validation and use case outcomes.

A Result is either ``Success(value)`` or ``Failure(error)``. Field parsers,
the User aggregate and the identity use cases return Results so that a
rejected input is an ordinary value the caller inspects, not a non-local
jump.

Example:
    result = LoginId.parse(raw_login_id)
    if result.is_failure:
        return result
    login_id = result.unwrap()

    # Several independent checks, first failure wins
    failure = first_failure(LoginId.parse(a), Email.parse(b))
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_error(self) -> NoReturn:
        raise ValueError("Cannot get error from Success result")

    def unwrap_or_raise(self) -> T:
        """Get the success value (counterpart of Failure.unwrap_or_raise)."""
        return self.value

    def value_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Apply a function to the success value."""
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain a step that itself returns a Result."""
        return fn(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Cannot get value from Failure result: {self.error!r}")

    def unwrap_error(self) -> E:
        """Get the error."""
        return self.error

    def unwrap_or_raise(self) -> NoReturn:
        """
        Raise the carried error.

        Used at the HTTP boundary, where domain errors are turned into
        responses by exception handlers.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Failure: {self.error!r}")

    def value_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        return self

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Failure[E]":
        return self

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]  # noqa: UP007


def first_failure(*results: "Result[object, E]") -> "Failure[E] | None":
    """Return the first Failure among ``results`` in order, or None."""
    for result in results:
        if isinstance(result, Failure):
            return result
    return None
