"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from commerce_api.domain.common.exceptions import EntityNotFoundError
from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.exceptions import DuplicateLoginIdError
from commerce_api.infrastructure.identity.mappers.user_mapper import UserMapper
from commerce_api.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Identity Directory backed by the ``users`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_login_id(self, login_id: str) -> User | None:
        """
        Find a user by login id.

        Args:
            login_id: The exact, case-sensitive login id

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.login_id == login_id)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists_by_login_id(self, login_id: str) -> bool:
        stmt = select(UserORM.id).where(UserORM.login_id == login_id)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def exists_by_email(self, email: str) -> bool:
        stmt = select(UserORM.id).where(UserORM.email == email).limit(1)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Args:
            user: The user entity to save

        Returns:
            Saved user entity with database-generated values

        Raises:
            DuplicateLoginIdError: If the login id is already taken (for new users)
        """
        if not user.id.is_assigned:
            # Create new user
            try:
                orm_model = self.mapper.to_orm(user)
                self.db.add(orm_model)
                self.db.commit()
                self.db.refresh(orm_model)
                logger.info(f"Created user {user.login_id} (id={orm_model.id})")
                return self.mapper.to_domain(orm_model)
            except IntegrityError as e:
                self.db.rollback()
                if "login_id" in str(e.orig):
                    raise DuplicateLoginIdError(user.login_id.value) from e
                raise

        # Update existing user
        stmt = select(UserORM).where(UserORM.id == user.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise EntityNotFoundError("User", user.id.value)

        orm_model = self.mapper.to_orm(user, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)
