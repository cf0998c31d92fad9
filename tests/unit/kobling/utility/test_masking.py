"""
Unit tests for secret masking helpers.
"""
from kobling.utility.masking import MASK, mask_connection_string, mask_properties


def test_mask_properties_hides_credentials():
    """Password and login-module values are masked; others are kept."""
    properties = {
        "bootstrap.servers": "b-1:9096",
        "ssl.keystore.password": "keystore-pass",
        "sasl.jaas.config": 'X required username="u" password="p";',
        "ssl.keystore.location": "/tmp/kobling-certs/kafka.client.keystore.jks",
    }

    masked = mask_properties(properties)

    assert masked["bootstrap.servers"] == "b-1:9096"
    assert masked["ssl.keystore.password"] == MASK
    assert masked["sasl.jaas.config"] == MASK
    assert masked["ssl.keystore.location"] == properties["ssl.keystore.location"]
    assert properties["ssl.keystore.password"] == "keystore-pass"


def test_mask_connection_string():
    """Placeholders and inline passwords are masked."""
    masked = mask_connection_string("SERVER=db;UID=reader;PWD=hunter2;${prod/db}")

    assert "hunter2" not in masked
    assert "prod/db" not in masked
    assert "UID=reader" in masked


def test_mask_connection_string_braced_password():
    """A braced password is masked whole, even when it contains separators."""
    masked = mask_connection_string("SERVER=db;PWD={p;;q};DATABASE=sales")

    assert masked == "SERVER=db;PWD=****;DATABASE=sales"


def test_masking_and_resolver_share_placeholder_grammar():
    """Whatever the resolver strips is exactly what gets masked."""
    from kobling.connections import resolver
    from kobling.utility import masking

    assert resolver.SECRET_PLACEHOLDER_PATTERN is masking.SECRET_PLACEHOLDER_PATTERN
    assert mask_connection_string("A=1;${bad!name}") == "A=1;${bad!name}"
