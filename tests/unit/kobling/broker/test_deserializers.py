"""
Unit tests for value deserializer selection.
"""
import pytest

from kobling.broker.deserializers import (
    SCHEMA_REGISTRY_DESERIALIZER,
    PayloadFormat,
    value_deserializer_properties,
)
from kobling.utility.exceptions import ErrorCode, UnsupportedPayloadFormatError

STRING_DESERIALIZER = "org.apache.kafka.common.serialization.StringDeserializer"


@pytest.mark.parametrize("name", ["json", "CSV", " string "])
def test_text_formats_use_string_deserializer(name):
    """Text payloads are read as strings."""
    assert value_deserializer_properties(name) == {"value.deserializer": STRING_DESERIALIZER}


def test_avro_uses_schema_registry():
    """Avro payloads decode to generic records."""
    assert value_deserializer_properties(PayloadFormat.AVRO) == {
        "value.deserializer": SCHEMA_REGISTRY_DESERIALIZER,
        "avroRecordType": "GENERIC_RECORD",
    }


def test_protobuf_uses_schema_registry():
    """Protobuf payloads decode to dynamic messages."""
    assert value_deserializer_properties("protobuf") == {
        "value.deserializer": SCHEMA_REGISTRY_DESERIALIZER,
        "protobufMessageType": "DYNAMIC_MESSAGE",
    }


@pytest.mark.parametrize("name", ["xml", "", "parquet"])
def test_unknown_format(name):
    """Unknown formats raise UnsupportedPayloadFormatError."""
    with pytest.raises(UnsupportedPayloadFormatError) as exc_info:
        PayloadFormat.parse(name)

    assert exc_info.value.code is ErrorCode.UNSUPPORTED_PAYLOAD_FORMAT
