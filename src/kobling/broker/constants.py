"""
Configuration keys and Kafka client property names used by the broker path.
"""

# Configuration keys (untyped string map)
KAFKA_ENDPOINT = "kafka_endpoint"
AUTH_TYPE = "auth_type"
CERTIFICATES_S3_REFERENCE = "certificates_s3_reference"
SECRETS_MANAGER_SECRET = "secrets_manager_secret"

# Fields inside the broker secret
SECRET_USERNAME = "username"
SECRET_PASSWORD = "password"
SECRET_SSL_KEY_PASSWORD = "ssl_key_password"
SECRET_KEYSTORE_PASSWORD = "ssl_keystore_password"
SECRET_TRUSTSTORE_PASSWORD = "ssl_truststore_password"

# Staged certificate file names
KEYSTORE_FILE = "kafka.client.keystore.jks"
TRUSTSTORE_FILE = "kafka.client.truststore.jks"

# Kafka client properties
BOOTSTRAP_SERVERS = "bootstrap.servers"
GROUP_ID = "group.id"
EXCLUDE_INTERNAL_TOPICS = "exclude.internal.topics"
ENABLE_AUTO_COMMIT = "enable.auto.commit"
AUTO_OFFSET_RESET = "auto.offset.reset"
MAX_POLL_RECORDS = "max.poll.records"
MAX_PARTITION_FETCH_BYTES = "max.partition.fetch.bytes"
KEY_DESERIALIZER = "key.deserializer"
VALUE_DESERIALIZER = "value.deserializer"

SECURITY_PROTOCOL = "security.protocol"
SASL_MECHANISM = "sasl.mechanism"
SASL_JAAS_CONFIG = "sasl.jaas.config"
SASL_CLIENT_CALLBACK_HANDLER = "sasl.client.callback.handler.class"
SSL_CLIENT_AUTH = "ssl.client.auth"
SSL_KEY_PASSWORD = "ssl.key.password"
SSL_KEYSTORE_LOCATION = "ssl.keystore.location"
SSL_KEYSTORE_PASSWORD = "ssl.keystore.password"
SSL_TRUSTSTORE_LOCATION = "ssl.truststore.location"
SSL_TRUSTSTORE_PASSWORD = "ssl.truststore.password"

STRING_DESERIALIZER = "org.apache.kafka.common.serialization.StringDeserializer"

IAM_LOGIN_MODULE = "software.amazon.msk.auth.iam.IAMLoginModule required;"
IAM_CALLBACK_HANDLER = "software.amazon.msk.auth.iam.IAMClientCallbackHandler"
SCRAM_LOGIN_MODULE = "org.apache.kafka.common.security.scram.ScramLoginModule"
PLAIN_LOGIN_MODULE = "org.apache.kafka.common.security.plain.PlainLoginModule"
