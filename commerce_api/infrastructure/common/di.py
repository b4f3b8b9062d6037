from typing import Generic, TypeVar

from dependency_injector.providers import Provider

from commerce_api.core import container
from commerce_api.database import DatabaseSession

T = TypeVar("T")


class UseCaseDependency(Generic[T]):
    """
    FastAPI dependency that builds a use case from a container provider.

    The provider is called with ``container.db`` bound to the request's
    session, so every repository in the graph shares that session.
    """

    def __init__(self, provider: Provider[T]) -> None:
        self.provider = provider

    def __call__(self, db: DatabaseSession) -> T:
        with container.db.override(db):
            return self.provider()


def inject_use_case(provider: Provider[T]) -> UseCaseDependency[T]:
    return UseCaseDependency(provider)
