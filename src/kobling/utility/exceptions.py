"""
Custom exceptions for kobling - stable codes, actionable messages.

Every error raised by kobling carries a machine-readable ``code`` next to its
human-readable message, so a federation adapter can hand both back to the
query engine without string matching.

Exception Hierarchy:
    KoblingError (base)
    ├── InvalidInputError - Unresolvable address, malformed input
    ├── InvalidCredentialsError - Credentials rejected by the source
    ├── UnsupportedOperationError - Operation that cannot be performed
    ├── ConnectionAcquisitionError - Any other failure getting a connection
    │   └── PoolExhaustedError - No connection became available in time
    ├── StagingError - Bad object-store reference or certificate copy failure
    └── ConfigError - Malformed configuration or secret payload (always fatal)
        ├── MissingConfigurationError - Required key absent or empty
        ├── UnsupportedAuthModeError - Unknown authentication mode literal
        └── UnsupportedPayloadFormatError - Unknown payload encoding

Usage Guidelines:
    - Always chain (`raise SpecificError(...) from e`) when wrapping a driver or
      client exception so the original traceback survives.
    - Never put secret values in messages; name the key instead.
"""
from enum import Enum
from typing import Dict, Optional


class ErrorCode(str, Enum):
    """Stable error codes surfaced to callers."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    OPERATION_NOT_SUPPORTED = "OPERATION_NOT_SUPPORTED"
    CONNECTION_FAILURE = "CONNECTION_FAILURE"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"
    UNSUPPORTED_AUTH_MODE = "UNSUPPORTED_AUTH_MODE"
    UNSUPPORTED_PAYLOAD_FORMAT = "UNSUPPORTED_PAYLOAD_FORMAT"
    STAGING_FAILURE = "STAGING_FAILURE"


class KoblingError(Exception):
    """Base exception for all kobling errors."""

    code: ErrorCode = ErrorCode.CONNECTION_FAILURE

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> Dict[str, str]:
        """Error as a plain mapping for callers that serialize it."""
        return {"code": self.code.value, "message": self.message}


class InvalidInputError(KoblingError):
    """Input the data source cannot act on (e.g. unknown host)."""

    code = ErrorCode.INVALID_INPUT


class InvalidCredentialsError(KoblingError):
    """Credentials were rejected by the data source."""

    code = ErrorCode.INVALID_CREDENTIALS


class UnsupportedOperationError(KoblingError):
    """Operation that cannot be carried out."""

    code = ErrorCode.OPERATION_NOT_SUPPORTED


class ConnectionAcquisitionError(KoblingError):
    """Connection could not be obtained for any other reason."""

    code = ErrorCode.CONNECTION_FAILURE


class PoolExhaustedError(ConnectionAcquisitionError):
    """No pooled connection became available before the timeout."""

    pass


class StagingError(KoblingError):
    """Certificate staging failed."""

    code = ErrorCode.STAGING_FAILURE


class ConfigError(KoblingError):
    """Raised when there's an error in configuration."""

    code = ErrorCode.INVALID_CONFIGURATION


class MissingConfigurationError(ConfigError):
    """A required configuration key is absent or empty."""

    code = ErrorCode.MISSING_CONFIGURATION

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(
            message or f"Required configuration '{key}' has not been populated"
        )
        self.key = key


class UnsupportedAuthModeError(ConfigError):
    """Authentication mode literal is not one of the known modes."""

    code = ErrorCode.UNSUPPORTED_AUTH_MODE

    def __init__(self, value: str):
        super().__init__(f"Unsupported authentication type: '{value}'")
        self.value = value


class UnsupportedPayloadFormatError(ConfigError):
    """Payload encoding has no deserializer."""

    code = ErrorCode.UNSUPPORTED_PAYLOAD_FORMAT

    def __init__(self, value: str):
        super().__init__(f"Unsupported payload format: '{value}'")
        self.value = value
