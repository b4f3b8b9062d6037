from typing import Protocol

from commerce_api.domain.identity.entities.user import User


class IdentityDirectoryProtocol(Protocol):
    """
    Lookup and persistence for users, keyed by login id.

    Implementations must make ``save`` of a new user atomic with respect to
    login id uniqueness (a unique constraint or a locked check-and-insert)
    and raise DuplicateLoginIdError when it is violated.
    """

    def exists_by_login_id(self, login_id: str) -> bool: ...

    def exists_by_email(self, email: str) -> bool: ...

    def find_by_login_id(self, login_id: str) -> User | None: ...

    def save(self, user: User) -> User: ...
