"""
Connection setup for federated catalogs: pooled relational connections and
authenticated Kafka consumer configuration.
"""
from .broker import (
    AuthMode,
    BrokerPropertyBuilder,
    CertificateStager,
    PayloadFormat,
    SplitDescriptor,
    build_consumer_properties,
)
from .connections import (
    ConnectionConfig,
    ConnectionInfo,
    ConnectionPool,
    GenericConnectionFactory,
    get_connection_info,
    resolve_connection_string,
)
from .secrets import (
    CredentialProvider,
    SecretCredentialProvider,
    SecretStore,
    StaticCredentialProvider,
)
from .utility.exceptions import ErrorCode, KoblingError
from .utility.types import to_column_type

__all__ = [
    # Relational connections
    "ConnectionConfig",
    "ConnectionInfo",
    "ConnectionPool",
    "GenericConnectionFactory",
    "get_connection_info",
    "resolve_connection_string",
    # Broker
    "AuthMode",
    "BrokerPropertyBuilder",
    "CertificateStager",
    "PayloadFormat",
    "SplitDescriptor",
    "build_consumer_properties",
    # Secrets
    "CredentialProvider",
    "SecretCredentialProvider",
    "SecretStore",
    "StaticCredentialProvider",
    # Errors and types
    "ErrorCode",
    "KoblingError",
    "to_column_type",
]
