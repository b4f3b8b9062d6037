"""
Base class for Domain Events.

An event records something that already happened to an aggregate, named in
past tense (UserRegistered, not RegisterUser). Aggregates record events;
the use case collects them after a successful save and writes them to the
log. Events never carry password material.

Example:
    @dataclass(frozen=True)
    class UserRegistered(DomainEvent):
        login_id: str = ""
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from uuid import UUID, uuid4

_ENVELOPE_FIELDS = frozenset({"event_id", "occurred_at"})


def _primitive(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if hasattr(value, "to_primitive"):
        return value.to_primitive()
    return value


@dataclass(frozen=True)
class DomainEvent:
    """Base class for Domain Events. Subclasses add payload fields with defaults."""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    @property
    def payload(self) -> dict[str, object]:
        """Subclass fields only, without the envelope."""
        return {
            f.name: _primitive(getattr(self, f.name))
            for f in fields(self)
            if f.name not in _ENVELOPE_FIELDS
        }

    def to_dict(self) -> dict[str, object]:
        """Flat dictionary of envelope and payload, ready to pass as log fields."""
        return {
            "event_type": self.event_type,
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            **self.payload,
        }
