from .identity_directory import IdentityDirectoryProtocol
from .password_hasher import CredentialHasherProtocol

__all__ = [
    "CredentialHasherProtocol",
    "IdentityDirectoryProtocol",
]
