"""
Broker (Kafka) consumer configuration for kobling.

Key components:
- AuthMode / AuthStrategy: one strategy per authentication mode
- CertificateStager: TLS material from S3 to a local directory
- BrokerPropertyBuilder: base + authentication + deserializer properties
- SplitDescriptor: topic/partition/offset range value object
"""
from .auth import AuthContext, AuthMode, AuthStrategy
from .deserializers import PayloadFormat, value_deserializer_properties
from .properties import BrokerPropertyBuilder, build_consumer_properties
from .split import SplitDescriptor
from .staging import (
    CertificateStager,
    ObjectStoreReference,
    parse_object_store_reference,
)

__all__ = [
    "AuthContext",
    "AuthMode",
    "AuthStrategy",
    "PayloadFormat",
    "value_deserializer_properties",
    "BrokerPropertyBuilder",
    "build_consumer_properties",
    "SplitDescriptor",
    "CertificateStager",
    "ObjectStoreReference",
    "parse_object_store_reference",
]
