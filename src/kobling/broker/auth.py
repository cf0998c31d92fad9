"""
Authentication strategies for the Kafka consumer.

Exactly one ``AuthMode`` is active per configuration. Each mode has one
``AuthStrategy`` subclass, registered through ``__init_subclass__``, that
writes the security properties for that mode and nothing else.

Example:
    ```python
    mode = AuthMode.parse(" sasl_ssl_scram ")
    strategy = AuthStrategy.for_mode(mode)
    strategy.apply(properties, context)
    ```
"""
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Type

from kobling.messages import get_logger
from kobling.secrets import SecretStore
from kobling.utility.config import get_optional_config, get_required_config
from kobling.utility.exceptions import (
    MissingConfigurationError,
    UnsupportedAuthModeError,
)

from . import constants as c
from .staging import CertificateStager

logger = get_logger("kobling.broker.auth")


class AuthMode(str, Enum):
    """Supported broker authentication modes."""

    NO_AUTH = "NO_AUTH"
    TLS_ONLY = "TLS_ONLY"
    SASL_SSL_IAM = "SASL_SSL_IAM"
    SASL_SSL_SCRAM = "SASL_SSL_SCRAM"
    SASL_SSL_PLAIN = "SASL_SSL_PLAIN"
    SASL_PLAINTEXT_PLAIN = "SASL_PLAINTEXT_PLAIN"

    @classmethod
    def parse(cls, value: str) -> "AuthMode":
        """
        Parse a mode literal, ignoring case and surrounding whitespace.

        Also accepts the literals used by existing connector deployments
        (``SSL``, ``SASL_SSL_AWS_MSK_IAM``, ``SASL_SSL_SCRAM_SHA512``).

        Raises:
            UnsupportedAuthModeError: If the literal matches no mode
        """
        normalized = str(value or "").strip().upper()
        if normalized in cls.__members__:
            return cls[normalized]
        if normalized in LEGACY_AUTH_MODES:
            mode = LEGACY_AUTH_MODES[normalized]
            logger.debug(f"Auth type '{normalized}' read as {mode.value}")
            return mode
        raise UnsupportedAuthModeError(str(value))


LEGACY_AUTH_MODES: Dict[str, AuthMode] = {
    "SSL": AuthMode.TLS_ONLY,
    "SASL_SSL_AWS_MSK_IAM": AuthMode.SASL_SSL_IAM,
    "SASL_SSL_SCRAM_SHA512": AuthMode.SASL_SSL_SCRAM,
}


class AuthContext:
    """
    Lazy access to the collaborators a strategy may need.

    The broker secret is fetched at most once per context, and only by
    strategies that ask for it.
    """

    def __init__(
        self,
        config: Mapping[str, str],
        secret_store: Optional[SecretStore] = None,
        stager: Optional[CertificateStager] = None,
    ):
        self.config = config
        self._secret_store = secret_store
        self._stager = stager
        self._secrets: Optional[Dict[str, Any]] = None

    @property
    def secret_store(self) -> SecretStore:
        if self._secret_store is None:
            self._secret_store = SecretStore()
        return self._secret_store

    @property
    def stager(self) -> CertificateStager:
        if self._stager is None:
            self._stager = CertificateStager()
        return self._stager

    def secrets(self) -> Dict[str, Any]:
        if self._secrets is None:
            name = get_required_config(c.SECRETS_MANAGER_SECRET, self.config)
            self._secrets = self.secret_store.get_secret_map(name)
        return self._secrets

    def secret(self, field: str) -> str:
        """
        Get one field of the broker secret.

        Raises:
            MissingConfigurationError: If the secret lacks the field
        """
        value = self.secrets().get(field)
        if value is None or str(value) == "":
            raise MissingConfigurationError(
                field, f"Broker secret does not contain '{field}'"
            )
        return str(value)

    def certificate_reference(self) -> Optional[str]:
        return get_optional_config(c.CERTIFICATES_S3_REFERENCE, self.config)

    def stage_certificates(self) -> Path:
        reference = get_required_config(c.CERTIFICATES_S3_REFERENCE, self.config)
        return self.stager.stage(reference)


def login_module(module: str, username: str, password: str) -> str:
    """JAAS login module line embedding a username and password."""
    return f'{module} required username="{username}" password="{password}";'


class AuthStrategy(ABC):
    """
    Base class for authentication strategies.

    Subclasses register themselves for one mode:

        class NoAuthStrategy(AuthStrategy, auth_mode=AuthMode.NO_AUTH):
            ...
    """

    _registry: Dict[AuthMode, Type["AuthStrategy"]] = {}

    auth_mode: AuthMode

    def __init_subclass__(cls, auth_mode: AuthMode = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if auth_mode is not None:
            cls.auth_mode = auth_mode
            cls._registry[auth_mode] = cls

    @classmethod
    def for_mode(cls, mode: AuthMode) -> "AuthStrategy":
        """
        Get the strategy for a mode.

        Raises:
            UnsupportedAuthModeError: If no strategy is registered
        """
        strategy_class = cls._registry.get(mode)
        if strategy_class is None:
            raise UnsupportedAuthModeError(getattr(mode, "value", str(mode)))
        return strategy_class()

    @classmethod
    def registered_modes(cls) -> set:
        return set(cls._registry)

    @abstractmethod
    def apply(
        self, properties: MutableMapping[str, str], context: AuthContext
    ) -> MutableMapping[str, str]:
        """
        Write this mode's security properties.

        Args:
            properties: Consumer properties, updated in place
            context: Configuration, secret and staging access

        Returns:
            The same properties mapping
        """
        pass


class NoAuthStrategy(AuthStrategy, auth_mode=AuthMode.NO_AUTH):
    """Plaintext, unauthenticated: no security properties at all."""

    def apply(self, properties, context):
        return properties


class TlsStrategy(AuthStrategy, auth_mode=AuthMode.TLS_ONLY):
    """Mutual TLS with a staged keystore and truststore."""

    def apply(self, properties, context):
        # Configuration and secret fields are checked before anything is downloaded
        reference = get_required_config(c.CERTIFICATES_S3_REFERENCE, context.config)
        key_password = context.secret(c.SECRET_SSL_KEY_PASSWORD)
        keystore_password = context.secret(c.SECRET_KEYSTORE_PASSWORD)
        truststore_password = context.secret(c.SECRET_TRUSTSTORE_PASSWORD)
        cert_dir = context.stager.stage(reference)

        properties[c.SECURITY_PROTOCOL] = "SSL"
        properties[c.SSL_CLIENT_AUTH] = "required"
        properties[c.SSL_KEY_PASSWORD] = key_password
        properties[c.SSL_KEYSTORE_LOCATION] = str(cert_dir / c.KEYSTORE_FILE)
        properties[c.SSL_KEYSTORE_PASSWORD] = keystore_password
        properties[c.SSL_TRUSTSTORE_LOCATION] = str(cert_dir / c.TRUSTSTORE_FILE)
        properties[c.SSL_TRUSTSTORE_PASSWORD] = truststore_password
        return properties


class IamStrategy(AuthStrategy, auth_mode=AuthMode.SASL_SSL_IAM):
    """IAM token authentication over TLS; credentials come from the runtime."""

    def apply(self, properties, context):
        properties[c.SECURITY_PROTOCOL] = "SASL_SSL"
        properties[c.SASL_MECHANISM] = "AWS_MSK_IAM"
        properties[c.SASL_JAAS_CONFIG] = c.IAM_LOGIN_MODULE
        properties[c.SASL_CLIENT_CALLBACK_HANDLER] = c.IAM_CALLBACK_HANDLER
        return properties


class ScramStrategy(AuthStrategy, auth_mode=AuthMode.SASL_SSL_SCRAM):
    """SCRAM-SHA-512 over TLS."""

    def apply(self, properties, context):
        username = context.secret(c.SECRET_USERNAME)
        password = context.secret(c.SECRET_PASSWORD)
        properties[c.SECURITY_PROTOCOL] = "SASL_SSL"
        properties[c.SASL_MECHANISM] = "SCRAM-SHA-512"
        properties[c.SASL_JAAS_CONFIG] = login_module(
            c.SCRAM_LOGIN_MODULE, username, password
        )
        return properties


class SaslSslPlainStrategy(AuthStrategy, auth_mode=AuthMode.SASL_SSL_PLAIN):
    """
    SASL/PLAIN over TLS.

    The truststore is optional here: it is staged and configured only when a
    certificate reference is set, unlike TLS_ONLY where it is required.
    """

    def apply(self, properties, context):
        username = context.secret(c.SECRET_USERNAME)
        password = context.secret(c.SECRET_PASSWORD)
        properties[c.SECURITY_PROTOCOL] = "SASL_SSL"
        properties[c.SASL_MECHANISM] = "PLAIN"
        if context.certificate_reference():
            truststore_password = context.secret(c.SECRET_TRUSTSTORE_PASSWORD)
            cert_dir = context.stage_certificates()
            properties[c.SSL_TRUSTSTORE_LOCATION] = str(cert_dir / c.TRUSTSTORE_FILE)
            properties[c.SSL_TRUSTSTORE_PASSWORD] = truststore_password
        properties[c.SASL_JAAS_CONFIG] = login_module(
            c.PLAIN_LOGIN_MODULE, username, password
        )
        return properties


class SaslPlaintextPlainStrategy(AuthStrategy, auth_mode=AuthMode.SASL_PLAINTEXT_PLAIN):
    """SASL/PLAIN without TLS."""

    def apply(self, properties, context):
        username = context.secret(c.SECRET_USERNAME)
        password = context.secret(c.SECRET_PASSWORD)
        properties[c.SECURITY_PROTOCOL] = "SASL_PLAINTEXT"
        properties[c.SASL_MECHANISM] = "PLAIN"
        properties[c.SASL_JAAS_CONFIG] = login_module(
            c.PLAIN_LOGIN_MODULE, username, password
        )
        return properties


_missing = set(AuthMode) - AuthStrategy.registered_modes()
if _missing:  # pragma: no cover - guards against adding a mode without a strategy
    raise ImportError(f"No authentication strategy for {sorted(m.value for m in _missing)}")
