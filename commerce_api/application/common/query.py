"""
Query and QueryHandler base classes.

Queries request information without changing state.

Example:
    @dataclass(frozen=True)
    class GetMyInfoQuery(Query):
        login_id: str
        password: str

    class GetMyInfoUseCase(QueryHandler[GetMyInfoQuery, Result[UserInfo, DomainError]]):
        def handle(self, query: GetMyInfoQuery) -> Result[UserInfo, DomainError]:
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

TQuery = TypeVar("TQuery", bound="Query")
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query:
    """Base class for Queries. Immutable and read-only."""


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Base class for Query Handlers.

    Query handlers return DTOs, not domain entities, and never save.
    """

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        raise NotImplementedError
