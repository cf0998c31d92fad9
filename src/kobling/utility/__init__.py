"""
Utility functions and classes for kobling.
"""
from .config import get_optional_config, get_required_config
from .exceptions import (
    ConfigError,
    ConnectionAcquisitionError,
    ErrorCode,
    InvalidCredentialsError,
    InvalidInputError,
    KoblingError,
    MissingConfigurationError,
    PoolExhaustedError,
    StagingError,
    UnsupportedAuthModeError,
    UnsupportedOperationError,
    UnsupportedPayloadFormatError,
)
from .masking import mask_connection_string, mask_properties
from .types import to_column_type

__all__ = [
    "ErrorCode",
    "KoblingError",
    "InvalidInputError",
    "InvalidCredentialsError",
    "UnsupportedOperationError",
    "ConnectionAcquisitionError",
    "PoolExhaustedError",
    "StagingError",
    "ConfigError",
    "MissingConfigurationError",
    "UnsupportedAuthModeError",
    "UnsupportedPayloadFormatError",
    "get_required_config",
    "get_optional_config",
    "mask_properties",
    "mask_connection_string",
    "to_column_type",
]
