"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.

Inside the domain they usually travel as the error of a ``Failure``
rather than being raised. The HTTP layer raises them at the boundary and
translates them into responses.
"""

from typing import ClassVar


class DomainError(Exception):
    """
    Base exception for all domain errors.

    ``code`` is a stable, machine-readable name for the outcome.
    """

    code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when client-supplied input breaks a field or cross-field rule.

    Example: login id with punctuation, email without a domain.
    """

    code: ClassVar[str] = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value

    @property
    def reason(self) -> str:
        """Human-readable reason (alias of message)."""
        return self.message


class EntityNotFoundError(DomainError):
    """Raised when an entity cannot be found."""

    code: ClassVar[str] = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule rejects otherwise well-formed input.

    Example: signing up with a login id that is already taken.
    """

    code: ClassVar[str] = "BUSINESS_RULE_VIOLATION"

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    Raised when an aggregate invariant is violated.

    Example: assigning a new birth date to an existing user.
    """

    code: ClassVar[str] = "INVARIANT_VIOLATION"

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant
