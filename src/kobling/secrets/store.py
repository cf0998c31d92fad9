"""
Secret store backed by AWS Secrets Manager.

Secrets are JSON objects (``{"username": ..., "password": ...}``); the store
hands them back as plain dictionaries. The boto3 client can be injected so
tests and callers with their own sessions don't depend on ambient AWS config.
"""
import json
from typing import Any, Dict, Optional

import boto3

from kobling.messages import get_logger
from kobling.utility.exceptions import ConfigError, InvalidInputError


class SecretStore:
    """
    Resolve named secrets to key/value mappings.

    Example:
        ```python
        store = SecretStore()
        creds = store.get_secret_map("msk/credentials")
        creds["username"]
        ```
    """

    def __init__(self, client: Optional[Any] = None, region_name: Optional[str] = None):
        """
        Initialize secret store.

        Args:
            client: Pre-built ``secretsmanager`` client (created lazily if omitted)
            region_name: Region used when creating the client
        """
        self._client = client
        self.region_name = region_name
        self.logger = get_logger("kobling.secrets.store")

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self.region_name)
        return self._client

    def get_secret_string(self, name: str) -> str:
        """
        Fetch the raw secret string.

        Raises:
            InvalidInputError: If the secret cannot be read
            ConfigError: If the secret is empty or its binary payload is not UTF-8
        """
        self.logger.debug(f"Fetching secret '{name}'")
        try:
            response = self.client.get_secret_value(SecretId=name)
        except Exception as e:
            raise InvalidInputError(f"Unable to read secret '{name}': {e}") from e

        secret = response.get("SecretString")
        if not secret and response.get("SecretBinary"):
            try:
                secret = response["SecretBinary"].decode("utf-8")
            except UnicodeDecodeError as e:
                raise ConfigError(f"Secret '{name}' is not UTF-8 text") from e
        if not secret:
            raise ConfigError(f"Secret '{name}' is empty")
        return secret

    def get_secret_map(self, name: str) -> Dict[str, Any]:
        """
        Fetch a secret and decode it as a JSON object.

        Args:
            name: Secret name or ARN

        Returns:
            Dictionary of secret fields

        Raises:
            ConfigError: If the secret is not a JSON object
        """
        secret = self.get_secret_string(name)
        try:
            values = json.loads(secret)
        except json.JSONDecodeError as e:
            # Never echo the payload, it is the secret
            raise ConfigError(f"Secret '{name}' is not valid JSON") from e
        if not isinstance(values, dict):
            raise ConfigError(f"Secret '{name}' must be a JSON object")
        return values
