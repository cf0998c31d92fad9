"""
Value deserializer selection by payload format.

JSON, CSV and plain string topics are read as strings and decoded by the
caller; Avro and Protobuf topics go through the schema-registry deserializer
with the record type it should produce.
"""
from enum import Enum
from typing import Dict

from kobling.utility.exceptions import UnsupportedPayloadFormatError

from . import constants as c

SCHEMA_REGISTRY_DESERIALIZER = (
    "com.amazonaws.services.schemaregistry.deserializers."
    "GlueSchemaRegistryKafkaDeserializer"
)
AVRO_RECORD_TYPE = "avroRecordType"
PROTOBUF_MESSAGE_TYPE = "protobufMessageType"


class PayloadFormat(str, Enum):
    """Encodings a topic payload may use."""

    JSON = "JSON"
    CSV = "CSV"
    AVRO = "AVRO"
    PROTOBUF = "PROTOBUF"
    STRING = "STRING"

    @classmethod
    def parse(cls, value: str) -> "PayloadFormat":
        """
        Parse a format name, ignoring case and surrounding whitespace.

        Raises:
            UnsupportedPayloadFormatError: If the name is unknown
        """
        normalized = str(value or "").strip().upper()
        if normalized not in cls.__members__:
            raise UnsupportedPayloadFormatError(str(value))
        return cls[normalized]


def value_deserializer_properties(payload_format) -> Dict[str, str]:
    """
    Consumer properties selecting the value deserializer.

    Args:
        payload_format: PayloadFormat or its name

    Returns:
        Properties to merge into the consumer configuration

    Raises:
        UnsupportedPayloadFormatError: If the format is unknown
    """
    if not isinstance(payload_format, PayloadFormat):
        payload_format = PayloadFormat.parse(payload_format)

    if payload_format is PayloadFormat.AVRO:
        return {
            c.VALUE_DESERIALIZER: SCHEMA_REGISTRY_DESERIALIZER,
            AVRO_RECORD_TYPE: "GENERIC_RECORD",
        }
    if payload_format is PayloadFormat.PROTOBUF:
        return {
            c.VALUE_DESERIALIZER: SCHEMA_REGISTRY_DESERIALIZER,
            PROTOBUF_MESSAGE_TYPE: "DYNAMIC_MESSAGE",
        }
    return {c.VALUE_DESERIALIZER: c.STRING_DESERIALIZER}
