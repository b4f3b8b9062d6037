"""Common value objects shared across domain modules."""

from .ids import UserId

__all__ = [
    "UserId",
]
