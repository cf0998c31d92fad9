"""
Credential providers hand connection factories a fresh credential map.
"""
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from .store import SecretStore


class CredentialProvider(ABC):
    """
    Source of connection credentials.

    ``get_credential_map`` is called on every connection request, so
    implementations may rotate credentials between calls.
    """

    @abstractmethod
    def get_credential_map(self) -> Dict[str, str]:
        """
        Return credential properties.

        Returns:
            Mapping such as ``{"user": ..., "password": ...}``
        """
        pass


class StaticCredentialProvider(CredentialProvider):
    """Credentials fixed at construction time."""

    def __init__(self, credentials: Mapping[str, str]):
        self._credentials = dict(credentials)

    def get_credential_map(self) -> Dict[str, str]:
        return dict(self._credentials)


class SecretCredentialProvider(CredentialProvider):
    """
    Credentials read from a named secret.

    ``key_map`` renames secret fields to driver property names, e.g.
    ``{"username": "user"}``. Fields not in the map keep their names.
    """

    def __init__(
        self,
        secret_store: SecretStore,
        secret_name: str,
        key_map: Optional[Mapping[str, str]] = None,
    ):
        self.secret_store = secret_store
        self.secret_name = secret_name
        self.key_map = dict(key_map or {})

    def get_credential_map(self) -> Dict[str, str]:
        secret = self.secret_store.get_secret_map(self.secret_name)
        return {self.key_map.get(key, key): str(value) for key, value in secret.items()}
