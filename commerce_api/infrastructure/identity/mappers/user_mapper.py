"""Mapper for User ORM <-> Domain conversion."""

from commerce_api.domain.common.value_objects.ids import UserId
from commerce_api.domain.identity.entities.user import User
from commerce_api.domain.identity.value_objects import (
    BirthDate,
    Email,
    Gender,
    HashedPassword,
    LoginId,
    Name,
)
from commerce_api.models import User as UserORM


class UserMapper:
    """Mapper for User ORM <-> Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain aggregate."""
        return User.reconstitute(
            id=UserId(orm_model.id),
            login_id=LoginId(orm_model.login_id),
            hashed_password=HashedPassword(orm_model.hashed_password),
            name=Name(orm_model.name),
            birth_date=BirthDate(orm_model.birth_date),
            email=Email(orm_model.email),
            gender=Gender(orm_model.gender) if orm_model.gender else None,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain aggregate to ORM model."""
        if orm_model:
            # Only the password changes after registration
            orm_model.hashed_password = domain_entity.hashed_password.value
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            login_id=domain_entity.login_id.value,
            hashed_password=domain_entity.hashed_password.value,
            name=domain_entity.name.value,
            birth_date=domain_entity.birth_date.value,
            email=domain_entity.email.value,
            gender=domain_entity.gender.value if domain_entity.gender else None,
        )
