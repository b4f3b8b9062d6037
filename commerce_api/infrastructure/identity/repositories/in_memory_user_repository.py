"""In-memory Identity Directory."""

import logging
import threading
from datetime import UTC, datetime

from commerce_api.domain.common.exceptions import EntityNotFoundError
from commerce_api.domain.common.value_objects.ids import UserId
from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.exceptions import DuplicateLoginIdError

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """
    Identity Directory held in process memory.

    Check-and-insert runs under one lock, so two concurrent saves of the
    same login id cannot both succeed.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._login_id_index: dict[str, int] = {}  # login_id -> user id
        self._next_id = 1
        self._lock = threading.Lock()

    def find_by_login_id(self, login_id: str) -> User | None:
        with self._lock:
            user_id = self._login_id_index.get(login_id)
            if user_id is None:
                return None
            stored = self._users[user_id]
            return self._copy(stored, stored.id, stored.created_at, stored.updated_at)

    def exists_by_login_id(self, login_id: str) -> bool:
        with self._lock:
            return login_id in self._login_id_index

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return any(user.email.value == email for user in self._users.values())

    def save(self, user: User) -> User:
        now = datetime.now(UTC)
        with self._lock:
            if user.id.is_assigned:
                if user.id.value not in self._users:
                    raise EntityNotFoundError("User", user.id.value)
                saved = self._copy(user, user.id, user.created_at, now)
                self._users[user.id.value] = saved
                return saved

            login_id = user.login_id.value
            if login_id in self._login_id_index:
                raise DuplicateLoginIdError(login_id)

            saved = self._copy(user, UserId(self._next_id), now, now)
            self._next_id += 1
            self._users[saved.id.value] = saved
            self._login_id_index[login_id] = saved.id.value

        logger.info(f"Created user {login_id} (id={saved.id.value})")
        return saved

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    @staticmethod
    def _copy(
        user: User, user_id: UserId, created_at: datetime | None, updated_at: datetime | None
    ) -> User:
        return User.reconstitute(
            id=user_id,
            login_id=user.login_id,
            hashed_password=user.hashed_password,
            name=user.name,
            birth_date=user.birth_date,
            email=user.email,
            gender=user.gender,
            created_at=created_at,
            updated_at=updated_at,
        )
