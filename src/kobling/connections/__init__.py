"""
Connection management for kobling.

Turns catalog configuration into pooled, authenticated relational connections.

Key components:
- ConnectionConfig / ConnectionInfo: what to connect to and with which driver
- resolve_connection_string: strips ${secret} placeholders, merges credentials
- ConnectionPool: thread-safe pool handing out PooledConnection proxies
- GenericConnectionFactory: one lazily created pool per factory instance
"""
from .base import BaseConnectionFactory
from .config import (
    ENGINE_DEFAULTS,
    ConnectionConfig,
    ConnectionInfo,
    get_connection_info,
)
from .factory import GenericConnectionFactory
from .pool import ConnectionPool, PooledConnection
from .resolver import (
    SECRET_PLACEHOLDER_PATTERN,
    find_placeholders,
    has_placeholder,
    resolve_connection_string,
    strip_placeholders,
)

__all__ = [
    "BaseConnectionFactory",
    "ConnectionConfig",
    "ConnectionInfo",
    "ENGINE_DEFAULTS",
    "get_connection_info",
    "GenericConnectionFactory",
    "ConnectionPool",
    "PooledConnection",
    "SECRET_PLACEHOLDER_PATTERN",
    "find_placeholders",
    "has_placeholder",
    "resolve_connection_string",
    "strip_placeholders",
]
