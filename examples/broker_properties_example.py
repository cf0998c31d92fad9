#!/usr/bin/env python3
"""
Broker Properties Example

Builds consumer properties for an IAM-authenticated cluster and resolves a
relational connection string, all offline: IAM needs no secret, and the
credential provider here is static.
"""

import sys
from pathlib import Path

# Add src to path so we can import kobling
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kobling import (  # noqa: E402
    AuthMode,
    StaticCredentialProvider,
    build_consumer_properties,
    resolve_connection_string,
    to_column_type,
)
from kobling.utility.masking import mask_properties  # noqa: E402


def show_broker_properties():
    """Print consumer properties for an IAM cluster."""
    print("Building consumer properties...")
    config = {
        "kafka_endpoint": "b-1.orders.kafka.local:9098,b-2.orders.kafka.local:9098",
        "auth_type": AuthMode.SASL_SSL_IAM.value,
    }
    properties = build_consumer_properties(config, payload_format="json")

    for key, value in sorted(mask_properties(properties).items()):
        print(f"  {key}={value}")


def show_connection_string():
    """Strip a secret placeholder and merge credentials."""
    print("\nResolving connection string...")
    properties = {"charset": "utf8mb4"}
    provider = StaticCredentialProvider({"UID": "reader", "PWD": "example-only"})

    resolved = resolve_connection_string(
        "SERVER=db.internal;DATABASE=orders;${prod/orders/mysql}", properties, provider
    )

    print(f"  connection string: {resolved}")
    print(f"  properties: {sorted(mask_properties(properties))}")


def show_type_mapping():
    """Map a few schema-registry type names."""
    print("\nMapping column types...")
    for type_name in ["int64", " Boolean ", "timestamp", "geometry"]:
        print(f"  {type_name!r} -> {to_column_type(type_name)}")


if __name__ == "__main__":
    show_broker_properties()
    show_connection_string()
    show_type_mapping()
