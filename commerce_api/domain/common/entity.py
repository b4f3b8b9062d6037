"""
Base class for Entities.

Entities have a distinct identity that runs through time. Two entities
are equal if they have the same identity, regardless of their attributes.

Example:
    @dataclass
    class User(Entity[UserId]):
        id: UserId
        login_id: LoginId
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed, storage-assigned entity identifiers.

    ``0`` is the placeholder for an entity that has not been persisted yet;
    the Identity Directory replaces it with the real id on first save.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_assigned(self) -> bool:
        """True once storage has assigned a real id."""
        return self.value != 0

    @classmethod
    def unassigned(cls) -> Self:
        """Placeholder id for an entity that has not been saved yet."""
        return cls(0)

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
