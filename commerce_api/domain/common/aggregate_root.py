"""
Base class for Aggregate Roots.

An Aggregate Root is the only entry point to a cluster of domain objects.
All writes go through it and all invariants are enforced there.

Example:
    @dataclass(eq=False)
    class User(AggregateRoot[UserId]):
        id: UserId
        hashed_password: HashedPassword

        def change_password(self, ...) -> Result[Self, DomainError]:
            ...
            self.hashed_password = new_hash
            self._record_event(UserPasswordChanged(login_id=...))
"""

from dataclasses import dataclass, field
from typing import ClassVar, Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType
from .exceptions import InvariantViolationError


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots:
    - Are responsible for maintaining invariants
    - Can record domain events for the caller to collect after saving
    - May declare ``frozen_fields``: attributes that can be set once,
      at construction, and never reassigned afterwards
    """

    frozen_fields: ClassVar[frozenset[str]] = frozenset()

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.frozen_fields and name in self.__dict__:
            raise InvariantViolationError(
                self.__class__.__name__, f"{name} cannot change after creation"
            )
        super().__setattr__(name, value)

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Collect and clear all recorded domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
