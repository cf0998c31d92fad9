"""
Common test fixtures and configuration.

Clients for AWS services and database drivers are replaced with MagicMocks;
nothing here needs network access.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Dict
from unittest.mock import MagicMock

import pytest

# Add src directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)
    yield


@pytest.fixture
def broker_secret() -> Dict[str, str]:
    """Contents of the broker secret."""
    return {
        "username": "kafka-reader",
        "password": "s3cr3t-Pa55",
        "ssl_key_password": "key-pass",
        "ssl_keystore_password": "keystore-pass",
        "ssl_truststore_password": "truststore-pass",
    }


@pytest.fixture
def secrets_client(broker_secret):
    """Mock secretsmanager client returning the broker secret."""
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": json.dumps(broker_secret)}
    return client


@pytest.fixture
def secret_store(secrets_client):
    """SecretStore wired to the mock client."""
    from kobling.secrets import SecretStore

    return SecretStore(client=secrets_client)


def make_s3_client(objects: Dict[str, bytes]) -> MagicMock:
    """Mock S3 client serving ``{key: content}`` from one bucket."""
    client = MagicMock()
    paginator = MagicMock()

    def paginate(Bucket, Prefix):
        contents = [{"Key": key} for key in objects if key.startswith(Prefix)]
        return [{"Contents": contents}] if contents else [{}]

    def download_fileobj(bucket, key, handle):
        handle.write(objects[key])

    paginator.paginate.side_effect = paginate
    client.get_paginator.return_value = paginator
    client.download_fileobj.side_effect = download_fileobj
    return client


@pytest.fixture
def certificate_objects() -> Dict[str, bytes]:
    """Keystore and truststore under the kafka/certs prefix."""
    return {
        "kafka/certs/": b"",
        "kafka/certs/kafka.client.keystore.jks": b"keystore-bytes",
        "kafka/certs/kafka.client.truststore.jks": b"truststore-bytes",
    }


@pytest.fixture
def s3_client(certificate_objects):
    """Mock S3 client serving the certificate objects."""
    return make_s3_client(certificate_objects)


@pytest.fixture
def stager(s3_client, tmp_path):
    """CertificateStager staging into the test's tmp_path."""
    from kobling.broker import CertificateStager

    return CertificateStager(s3_client=s3_client, temp_dir=str(tmp_path))


@pytest.fixture
def broker_config() -> Dict[str, str]:
    """Minimal broker configuration; tests set auth_type."""
    return {
        "kafka_endpoint": "b-1.cluster.kafka.local:9096,b-2.cluster.kafka.local:9096",
        "secrets_manager_secret": "kafka/reader",
        "certificates_s3_reference": "s3://cert-bucket/kafka/certs",
    }


@pytest.fixture
def s3_client_factory():
    """Build mock S3 clients for custom object layouts."""
    return make_s3_client
