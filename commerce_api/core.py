from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from commerce_api.application.identity.use_cases import (
    AuthenticateUserUseCase,
    ChangePasswordUseCase,
    GetMyInfoUseCase,
    SignUpUseCase,
)
from commerce_api.feature_flags import is_unique_email_required, is_user_registrations_enabled
from commerce_api.infrastructure.identity.repositories.user_repository import UserRepository
from commerce_api.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Identity directory and credential hasher
    user_repository = providers.Factory(UserRepository, db=db)
    password_service = providers.Singleton(PasswordServiceAdapter)

    # Identity module, application use cases
    sign_up_use_case = providers.Factory(
        SignUpUseCase,
        identity_directory=user_repository,
        password_hasher=password_service,
        require_unique_email=providers.Callable(is_unique_email_required),
        registrations_enabled=providers.Object(is_user_registrations_enabled),
    )

    authenticate_user_use_case = providers.Factory(
        AuthenticateUserUseCase,
        identity_directory=user_repository,
        password_hasher=password_service,
    )

    get_my_info_use_case = providers.Factory(
        GetMyInfoUseCase,
        authenticate_user_use_case=authenticate_user_use_case,
    )

    change_password_use_case = providers.Factory(
        ChangePasswordUseCase,
        identity_directory=user_repository,
        password_hasher=password_service,
    )


# Initialize container
container = Container()
