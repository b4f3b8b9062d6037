"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state. They carry the
raw client input; validation happens in the domain, not here.

Example:
    @dataclass(frozen=True)
    class SignUpCommand(Command):
        login_id: str
        password: str
        ...

    class SignUpUseCase(CommandHandler[SignUpCommand, Result[UserInfo, DomainError]]):
        def handle(self, command: SignUpCommand) -> Result[UserInfo, DomainError]:
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

TCommand = TypeVar("TCommand", bound="Command")
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are immutable and named in imperative form (SignUp,
    ChangePassword).
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Each command has exactly one handler. Handlers sequence domain calls
    and collaborator calls; business rules live in the domain.
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        raise NotImplementedError
