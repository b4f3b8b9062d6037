"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject / ValidatedValue: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- AggregateRoot: Consistency boundaries with domain events
- DomainEvent: Notifications of significant domain occurrences
- Result: Success / Failure outcomes
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from .result import Failure, Result, Success, first_failure
from .value_object import ValidatedValue, ValueObject

__all__ = [
    "AggregateRoot",
    "BusinessRuleViolationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "Failure",
    "InvariantViolationError",
    "Result",
    "Success",
    "ValidatedValue",
    "ValidationError",
    "ValueObject",
    "first_failure",
]
