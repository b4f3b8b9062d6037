"""Identity domain events."""

from dataclasses import dataclass

from commerce_api.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    login_id: str = ""


@dataclass(frozen=True)
class UserPasswordChanged(DomainEvent):
    login_id: str = ""
