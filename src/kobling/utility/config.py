"""
Accessors for untyped, environment-variable-like configuration maps.
"""
from typing import Mapping, Optional

from .exceptions import MissingConfigurationError


def get_required_config(key: str, config: Mapping[str, str]) -> str:
    """
    Get a required configuration value.

    Args:
        key: Configuration key
        config: String-to-string configuration map

    Returns:
        The configured value

    Raises:
        MissingConfigurationError: If the key is absent or empty
    """
    value = config.get(key) or ""
    if not str(value).strip():
        raise MissingConfigurationError(key)
    return str(value)


def get_optional_config(
    key: str, config: Mapping[str, str], default: Optional[str] = None
) -> Optional[str]:
    """Get a configuration value, treating blank values as missing."""
    value = config.get(key)
    if value is None or not str(value).strip():
        return default
    return str(value)
