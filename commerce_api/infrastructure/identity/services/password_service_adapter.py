from commerce_api.infrastructure.identity.services import password_service


class PasswordServiceAdapter:
    """Credential Hasher backed by pwdlib, for DI."""

    def hash(self, raw_password: str) -> str:
        return password_service.hash_password(raw_password)

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        return password_service.verify_password(raw_password, hashed_password)

    def dummy_hash(self) -> str:
        return password_service.get_dummy_hash()
