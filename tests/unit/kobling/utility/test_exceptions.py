"""
Unit tests for the error taxonomy.
"""
import pytest

from kobling.utility.exceptions import (
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


@pytest.mark.parametrize(
    "error, code",
    [
        (InvalidInputError("x"), ErrorCode.INVALID_INPUT),
        (InvalidCredentialsError("x"), ErrorCode.INVALID_CREDENTIALS),
        (UnsupportedOperationError("x"), ErrorCode.OPERATION_NOT_SUPPORTED),
        (ConnectionAcquisitionError("x"), ErrorCode.CONNECTION_FAILURE),
        (PoolExhaustedError("x"), ErrorCode.CONNECTION_FAILURE),
        (ConfigError("x"), ErrorCode.INVALID_CONFIGURATION),
        (MissingConfigurationError("k"), ErrorCode.MISSING_CONFIGURATION),
        (UnsupportedAuthModeError("k"), ErrorCode.UNSUPPORTED_AUTH_MODE),
        (UnsupportedPayloadFormatError("k"), ErrorCode.UNSUPPORTED_PAYLOAD_FORMAT),
        (StagingError("x"), ErrorCode.STAGING_FAILURE),
    ],
)
def test_every_error_has_a_stable_code(error, code):
    assert isinstance(error, KoblingError)
    assert error.code is code
    assert error.to_dict() == {"code": code.value, "message": error.message}


def test_configuration_errors_share_a_base():
    """Configuration shape errors can be caught together."""
    for error in (
        MissingConfigurationError("k"),
        UnsupportedAuthModeError("x"),
        UnsupportedPayloadFormatError("x"),
    ):
        assert isinstance(error, ConfigError)


def test_code_override():
    """A code can be set per instance."""
    assert KoblingError("x", code=ErrorCode.INVALID_INPUT).code is ErrorCode.INVALID_INPUT
