"""
Generic pooled connection factory for ODBC-reachable databases.

Each factory resolves secret placeholders, lazily builds exactly one pool for
its own lifetime and translates driver failures into kobling errors. Pools are
owned by the factory instance, so unrelated catalogs never share or serialize
on each other's state.
"""
import re
import threading
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import quote_plus

from kobling.messages import get_logger
from kobling.secrets import CredentialProvider
from kobling.utility.exceptions import (
    ConnectionAcquisitionError,
    InvalidCredentialsError,
    InvalidInputError,
    KoblingError,
    UnsupportedOperationError,
)
from kobling.utility.masking import mask_connection_string
from kobling.utility.settings import POOL_DEFAULTS

from .base import BaseConnectionFactory
from .config import ConnectionConfig, ConnectionInfo
from .pool import ConnectionPool, PooledConnection, is_connection_alive
from .resolver import resolve_connection_string

UNKNOWN_HOST_MESSAGE = "Name or service not known"
BAD_CREDENTIALS_MESSAGE = "Incorrect username or password was specified."

# One KEY=VALUE attribute; a braced value may contain ';' and escapes '}' as '}}'
_ATTRIBUTE_PATTERN = re.compile(r"(?:[^;{]|\{(?:[^}]|\}\})*\}|\{)+")


def _pyodbc_connect(connection_string: str, **attributes: Any) -> Any:
    import pyodbc

    # pyodbc appends keyword attributes to the connection string
    return pyodbc.connect(connection_string, **attributes)


def _ping(conn: Any) -> bool:
    """Round-trip a trivial query on a pooled connection."""
    if not is_connection_alive(conn):
        return False
    conn.execute("SELECT 1").fetchone()
    return True


class GenericConnectionFactory(BaseConnectionFactory):
    """
    Connection factory backed by a per-instance connection pool.

    Features:
    - Secret placeholders stripped from the connection string
    - Credentials from the provider merged into driver properties
    - Driver and default port filled in from ``ConnectionInfo``
    - Pool created once per factory, even under concurrent first use
    - Driver errors mapped onto stable error codes

    Example:
        ```python
        factory = GenericConnectionFactory(
            config=ConnectionConfig(
                catalog="sales",
                engine="mysql",
                connection_string="SERVER=db.internal;DATABASE=sales;${prod/sales}",
            ),
            properties={"charset": "utf8mb4"},
            info=get_connection_info("mysql"),
        )
        with factory.get_connection(credential_provider) as conn:
            ...
        ```
    """

    def __init__(
        self,
        config: ConnectionConfig,
        properties: Optional[Mapping[str, str]],
        info: ConnectionInfo,
        pool_class: Callable[..., ConnectionPool] = ConnectionPool,
        connect: Optional[Callable[..., Any]] = None,
        pool_options: Optional[Mapping[str, Any]] = None,
    ):
        """
        Initialize connection factory.

        Args:
            config: Catalog connection configuration
            properties: Driver properties (copied)
            info: Driver name and default port for the engine
            pool_class: Pool constructor, called once per factory
            connect: Driver connect function (default: pyodbc.connect)
            pool_options: Overrides for max_size, acquire_timeout and the
                liveness validator (default: ``SELECT 1`` round trip)
        """
        if config is None:
            raise ValueError("config must not be None")
        if info is None:
            raise ValueError("info must not be None")

        self.config = config
        self.info = info
        self.properties: Dict[str, str] = dict(properties or {})
        self.pool_class = pool_class
        self.connect = connect or _pyodbc_connect
        self.pool_options = dict(pool_options or {})

        self._pool: Optional[ConnectionPool] = None
        self._pool_lock = threading.Lock()

        self.logger = get_logger(f"kobling.catalog.{config.catalog}")

    @property
    def pool(self) -> Optional[ConnectionPool]:
        """The pool, once the first connection has been requested."""
        return self._pool

    def get_connection(
        self, credential_provider: Optional[CredentialProvider] = None
    ) -> PooledConnection:
        """
        Borrow a connection from this factory's pool.

        Args:
            credential_provider: Source of credentials; when omitted the
                connection string is used as configured

        Returns:
            PooledConnection; ``close()`` hands it back to the pool

        Raises:
            InvalidInputError: If the host cannot be resolved
            InvalidCredentialsError: If the credentials are rejected
            ConnectionAcquisitionError: For any other acquisition failure
        """
        connection_string = resolve_connection_string(
            self.config.connection_string, self.properties, credential_provider
        )
        try:
            return self._get_or_create_pool(connection_string).acquire()
        except KoblingError:
            raise
        except Exception as e:
            raise self._translate_error(e) from e

    def _get_or_create_pool(self, connection_string: str) -> ConnectionPool:
        pool = self._pool
        if pool is None or not pool.initialized:
            with self._pool_lock:
                if self._pool is None:
                    self._pool = self._create_pool(connection_string)
                # A failed warm-up is retried by the next caller; the pool
                # itself is never rebuilt
                if not self._pool.initialized:
                    self._pool.initialize()
        return self._pool

    def _create_pool(self, connection_string: str) -> ConnectionPool:
        driver_string = self._build_connection_string(connection_string)
        # Snapshot so later credential merges can't change live pool settings
        attributes = dict(self.properties)

        self.logger.debug(
            f"Creating connection pool: {mask_connection_string(driver_string)}"
        )
        return self.pool_class(
            name=self.config.catalog,
            creator=lambda: self.connect(driver_string, **attributes),
            min_idle=1,
            max_size=self.pool_options.get("max_size", POOL_DEFAULTS.max_size),
            acquire_timeout=self.pool_options.get(
                "acquire_timeout", POOL_DEFAULTS.acquire_timeout
            ),
            validator=self.pool_options.get("validator", _ping),
        )

    def _build_connection_string(self, connection_string: str) -> str:
        """
        Fill in DRIVER and PORT when the configured string lacks them.

        Attributes are split on ';' outside braces only, so braced values
        reach the driver untouched.
        """
        parts = [
            part
            for part in _ATTRIBUTE_PATTERN.findall(connection_string)
            if part.strip()
        ]
        keys = {part.split("=", 1)[0].strip().upper() for part in parts}

        if "DRIVER" not in keys:
            parts.insert(0, f"DRIVER={{{self.info.driver}}}")
        if "PORT" not in keys:
            parts.append(f"PORT={self.info.default_port}")
        return ";".join(parts)

    def _translate_error(self, error: Exception) -> KoblingError:
        message = str(error)
        if UNKNOWN_HOST_MESSAGE in message:
            return InvalidInputError(message)
        if BAD_CREDENTIALS_MESSAGE in message:
            return InvalidCredentialsError(message)
        return ConnectionAcquisitionError(
            f"Failed to get connection for '{self.config.catalog}': {message}"
        )

    @staticmethod
    def encode_value(value: str) -> str:
        """
        Percent-encode a value as UTF-8 for use inside a connection URL.

        Raises:
            UnsupportedOperationError: If the value cannot be encoded as UTF-8
        """
        try:
            return quote_plus(value, encoding="utf-8")
        except UnicodeEncodeError as e:
            raise UnsupportedOperationError(f"Unsupported encoding: {e.reason}") from e
