from typing import Protocol

from commerce_api.domain.identity.value_objects.password import PasswordHasherProtocol


class CredentialHasherProtocol(PasswordHasherProtocol, Protocol):
    """Password hasher that can also supply a throwaway hash for timing-safe misses."""

    def dummy_hash(self) -> str: ...
