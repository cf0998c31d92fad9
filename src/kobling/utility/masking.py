"""
Helpers that keep secrets out of log lines and CLI output.
"""
import re
from typing import Dict, Mapping

MASK = "****"

# Property keys whose values are credentials or embed them
SENSITIVE_KEY_MARKERS = ("password", "secret", "jaas", "token", "pwd")

_CONNECTION_SECRET_PATTERN = re.compile(
    r"((?:PWD|PASSWORD)\s*=\s*)(\{(?:[^}]|\}\})*\}|[^;]*)", re.IGNORECASE
)
# Secret references such as ${prod/sales/mysql}; the resolver strips these
SECRET_PLACEHOLDER_PATTERN = re.compile(r"\$\{[A-Za-z0-9:/_+=.@-]+\}")


def is_sensitive_key(key: str) -> bool:
    """Whether a property key holds a credential."""
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEY_MARKERS)


def mask_properties(properties: Mapping[str, str]) -> Dict[str, str]:
    """Copy of a property bag with credential values replaced."""
    return {
        key: (MASK if is_sensitive_key(key) else value)
        for key, value in properties.items()
    }


def mask_connection_string(connection_string: str) -> str:
    """Mask secret placeholders and inline passwords in a connection string."""
    masked = SECRET_PLACEHOLDER_PATTERN.sub("${" + MASK + "}", connection_string)
    return _CONNECTION_SECRET_PATTERN.sub(lambda m: m.group(1) + MASK, masked)
