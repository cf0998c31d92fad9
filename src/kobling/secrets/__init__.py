"""
Secret and credential collaborators.

- SecretStore: named secret -> JSON key/value mapping (AWS Secrets Manager)
- CredentialProvider: credential maps for connection factories
"""
from .providers import (
    CredentialProvider,
    SecretCredentialProvider,
    StaticCredentialProvider,
)
from .store import SecretStore

__all__ = [
    "CredentialProvider",
    "SecretCredentialProvider",
    "StaticCredentialProvider",
    "SecretStore",
]
