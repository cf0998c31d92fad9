"""
Kafka consumer property assembly.

Base consumer settings are the same for every cluster; the authentication
mode decides the rest. The mode is parsed before anything touches the network
so a bad configuration fails without side effects.
"""
import uuid
from typing import Dict, Mapping, Optional, Union

from kobling.messages import get_logger
from kobling.secrets import SecretStore
from kobling.utility.config import get_required_config
from kobling.utility.masking import mask_properties
from kobling.utility.settings import CONSUMER_DEFAULTS, ConsumerDefaults

from . import constants as c
from .auth import AuthContext, AuthMode, AuthStrategy
from .deserializers import PayloadFormat, value_deserializer_properties
from .staging import CertificateStager


class BrokerPropertyBuilder:
    """
    Build consumer properties from an untyped configuration map.

    Example:
        ```python
        builder = BrokerPropertyBuilder()
        properties = builder.build({
            "kafka_endpoint": "b-1.cluster:9098",
            "auth_type": "SASL_SSL_IAM",
        })
        ```
    """

    def __init__(
        self,
        secret_store: Optional[SecretStore] = None,
        stager: Optional[CertificateStager] = None,
        defaults: Optional[ConsumerDefaults] = None,
    ):
        """
        Initialize property builder.

        Args:
            secret_store: Source of the broker secret (created lazily)
            stager: Certificate stager (created lazily)
            defaults: Consumer tuning defaults
        """
        self.secret_store = secret_store
        self.stager = stager
        self.defaults = defaults or CONSUMER_DEFAULTS
        self.logger = get_logger("kobling.broker.properties")

    def base_properties(self, config: Mapping[str, str]) -> Dict[str, str]:
        """
        Settings shared by every authentication mode.

        Raises:
            MissingConfigurationError: If the bootstrap endpoint is missing
        """
        return {
            c.BOOTSTRAP_SERVERS: get_required_config(c.KAFKA_ENDPOINT, config),
            c.GROUP_ID: str(uuid.uuid4()),
            c.EXCLUDE_INTERNAL_TOPICS: "true",
            c.ENABLE_AUTO_COMMIT: "false",
            c.AUTO_OFFSET_RESET: self.defaults.auto_offset_reset,
            c.MAX_POLL_RECORDS: str(self.defaults.max_poll_records),
            c.MAX_PARTITION_FETCH_BYTES: str(self.defaults.max_partition_fetch_bytes),
            c.KEY_DESERIALIZER: c.STRING_DESERIALIZER,
        }

    def build(self, config: Mapping[str, str]) -> Dict[str, str]:
        """
        Build base plus authentication properties.

        Args:
            config: Configuration map (``kafka_endpoint``, ``auth_type``, ...)

        Returns:
            Consumer properties

        Raises:
            MissingConfigurationError: If a required key is missing
            UnsupportedAuthModeError: If ``auth_type`` is unknown
            StagingError: If certificates cannot be staged
        """
        mode = AuthMode.parse(get_required_config(c.AUTH_TYPE, config))
        properties = self.base_properties(config)

        context = AuthContext(config, secret_store=self.secret_store, stager=self.stager)
        AuthStrategy.for_mode(mode).apply(properties, context)

        self.logger.debug(
            f"Built consumer properties for {mode.value}: {mask_properties(properties)}"
        )
        return properties

    def build_consumer_properties(
        self,
        config: Mapping[str, str],
        payload_format: Union[PayloadFormat, str, None] = None,
    ) -> Dict[str, str]:
        """
        Build the full consumer configuration, value deserializer included.

        Args:
            config: Configuration map
            payload_format: Topic payload encoding (default: plain string)

        Raises:
            UnsupportedPayloadFormatError: If the format is unknown
        """
        # Validate the format before any secret or object store call
        value_properties = value_deserializer_properties(
            payload_format or PayloadFormat.STRING
        )
        properties = self.build(config)
        properties.update(value_properties)
        return properties


def build_consumer_properties(
    config: Mapping[str, str],
    payload_format: Union[PayloadFormat, str, None] = None,
    secret_store: Optional[SecretStore] = None,
    stager: Optional[CertificateStager] = None,
) -> Dict[str, str]:
    """Convenience wrapper around ``BrokerPropertyBuilder``."""
    builder = BrokerPropertyBuilder(secret_store=secret_store, stager=stager)
    return builder.build_consumer_properties(config, payload_format)
