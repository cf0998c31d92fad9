"""
Unit tests for configuration accessors.
"""
import pytest

from kobling.utility.config import get_optional_config, get_required_config
from kobling.utility.exceptions import ErrorCode, MissingConfigurationError


def test_required_config_present():
    assert get_required_config("kafka_endpoint", {"kafka_endpoint": "b-1:9092"}) == "b-1:9092"


@pytest.mark.parametrize("config", [{}, {"kafka_endpoint": ""}, {"kafka_endpoint": "  "}, {"kafka_endpoint": None}])
def test_required_config_missing(config):
    """Missing or blank values name the key."""
    with pytest.raises(MissingConfigurationError) as exc_info:
        get_required_config("kafka_endpoint", config)

    assert exc_info.value.key == "kafka_endpoint"
    assert exc_info.value.code is ErrorCode.MISSING_CONFIGURATION
    assert "kafka_endpoint" in str(exc_info.value)


def test_optional_config():
    assert get_optional_config("a", {"a": "x"}) == "x"
    assert get_optional_config("a", {"a": " "}, "fallback") == "fallback"
    assert get_optional_config("a", {}) is None
