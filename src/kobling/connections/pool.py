"""
Thread-safe connection pool.

Keeps a floor of idle connections open, grows on demand up to a ceiling and
blocks callers once the ceiling is reached. Connections are handed out as
``PooledConnection`` proxies whose ``close()`` returns them to the pool.
"""
import queue
import threading
import time
from typing import Any, Callable, Optional

from kobling.messages import get_logger
from kobling.utility.exceptions import PoolExhaustedError
from kobling.utility.settings import POOL_DEFAULTS


def is_connection_alive(conn: Any) -> bool:
    """Default liveness check: the driver has not marked the connection closed."""
    return getattr(conn, "closed", False) is not True


class PooledConnection:
    """
    Logical connection borrowed from a pool.

    Attribute access is forwarded to the underlying driver connection.
    ``close()`` releases it back to the pool instead of closing the socket.

    Example:
        ```python
        with pool.acquire() as conn:
            conn.cursor().execute("SELECT 1")
        ```
    """

    def __init__(self, pool: "ConnectionPool", connection: Any):
        self._pool = pool
        self._connection = connection
        self._released = False

    @property
    def raw(self) -> Any:
        """The underlying driver connection."""
        return self._connection

    @property
    def closed(self) -> bool:
        return self._released

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        self._pool.release(self._connection)

    def __getattr__(self, name: str) -> Any:
        if self._released:
            raise AttributeError(f"Connection already returned to the pool ({name})")
        return getattr(self._connection, name)

    def __enter__(self) -> "PooledConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ConnectionPool:
    """
    Connection pool backed by ``queue.Queue``.

    Design:
    - ``initialize()`` opens ``min_idle`` connections up front
    - ``acquire()`` prefers idle connections, opens new ones while below
      ``max_size`` and otherwise waits up to ``acquire_timeout`` seconds
    - Idle connections failing ``validator`` are closed and replaced
    - Errors raised by ``creator`` propagate unchanged so the owning factory
      can translate them

    Example:
        ```python
        pool = ConnectionPool(
            name="sales_mysql",
            creator=lambda: pyodbc.connect(conn_str),
            min_idle=1,
        )
        pool.initialize()
        conn = pool.acquire()
        try:
            ...
        finally:
            conn.close()
        ```
    """

    def __init__(
        self,
        name: str,
        creator: Callable[[], Any],
        min_idle: int = POOL_DEFAULTS.min_idle,
        max_size: int = POOL_DEFAULTS.max_size,
        acquire_timeout: float = POOL_DEFAULTS.acquire_timeout,
        validator: Optional[Callable[[Any], bool]] = None,
    ):
        """
        Initialize connection pool.

        Args:
            name: Name of this pool (for logging)
            creator: Callable opening a new driver connection
            min_idle: Connections to open during initialize()
            max_size: Maximum connections open at once
            acquire_timeout: Seconds to wait when the pool is exhausted
            validator: Liveness check run on idle connections before they are
                handed out (default: is_connection_alive)
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        if min_idle > max_size:
            raise ValueError("min_idle cannot exceed max_size")

        self.name = name
        self.creator = creator
        self.min_idle = min_idle
        self.max_size = max_size
        self.acquire_timeout = acquire_timeout
        self.validator = validator or is_connection_alive

        self._idle: queue.Queue = queue.Queue(maxsize=max_size)
        self._lock = threading.Lock()
        self._opened = 0
        self._initialized = False
        self._closed = False

        self.logger = get_logger(f"kobling.connections.pool.{name}")

    def initialize(self) -> None:
        """
        Open the idle floor of connections.

        Raises whatever ``creator`` raises; connections opened before the
        failure are closed again.
        """
        if self._initialized:
            self.logger.warning(f"Pool {self.name} already initialized")
            return

        self.logger.info(
            f"Initializing connection pool '{self.name}' "
            f"(min_idle={self.min_idle}, max_size={self.max_size})"
        )
        for i in range(self.min_idle):
            try:
                conn = self._open()
            except Exception as e:
                self.logger.error(f"Failed to create connection {i + 1}: {e}")
                self._drain()
                raise
            self._idle.put_nowait(conn)
            self.logger.debug(f"Created connection {i + 1}/{self.min_idle}")

        self._initialized = True
        self.logger.success(f"Pool '{self.name}' initialized")

    def acquire(self) -> PooledConnection:
        """
        Borrow a connection.

        Returns:
            PooledConnection proxy

        Raises:
            RuntimeError: If the pool is not initialized or is closed
            PoolExhaustedError: If no connection frees up within the timeout
        """
        if not self._initialized:
            raise RuntimeError(
                f"Pool {self.name} not initialized. Call initialize() first."
            )
        if self._closed:
            raise RuntimeError(f"Pool {self.name} is closed")

        deadline = time.monotonic() + self.acquire_timeout
        while True:
            try:
                conn = self._idle.get_nowait()
            except queue.Empty:
                conn = self._open_if_capacity()
                if conn is not None:
                    break
                try:
                    conn = self._idle.get(
                        timeout=max(deadline - time.monotonic(), 0)
                    )
                except queue.Empty:
                    raise PoolExhaustedError(
                        f"No connection available from pool '{self.name}' "
                        f"after {self.acquire_timeout}s"
                    ) from None

            if self._is_alive(conn):
                break
            # Frees the slot, so the next pass opens a replacement
            self.logger.warning(
                f"Connection from pool '{self.name}' was dead, opening a new one"
            )
            self._discard(conn)

        self.logger.debug(
            f"Acquired connection from pool '{self.name}' (idle: {self._idle.qsize()})"
        )
        return PooledConnection(self, conn)

    def release(self, conn: Any) -> None:
        """Return a connection to the pool, or close it if the pool is closed."""
        if self._closed:
            self._discard(conn)
            return
        self._idle.put_nowait(conn)
        self.logger.debug(
            f"Released connection to pool '{self.name}' (idle: {self._idle.qsize()})"
        )

    def close(self) -> None:
        """Close idle connections. Borrowed ones close when released."""
        if self._closed:
            return
        self.logger.info(f"Closing connection pool '{self.name}'")
        self._closed = True
        closed_count = self._drain()
        self.logger.success(f"Pool '{self.name}' closed ({closed_count} connections)")

    def _open(self) -> Any:
        conn = self.creator()
        with self._lock:
            self._opened += 1
        return conn

    def _open_if_capacity(self) -> Optional[Any]:
        with self._lock:
            if self._opened >= self.max_size:
                return None
            # Reserve the slot before the blocking connect
            self._opened += 1
        try:
            return self.creator()
        except Exception:
            with self._lock:
                self._opened -= 1
            raise

    def _is_alive(self, conn: Any) -> bool:
        try:
            return bool(self.validator(conn))
        except Exception as e:
            self.logger.warning(f"Health check failed: {e}")
            return False

    def _discard(self, conn: Any) -> None:
        self._close_quietly(conn)
        with self._lock:
            self._opened -= 1

    def _drain(self) -> int:
        closed_count = 0
        while True:
            try:
                conn = self._idle.get_nowait()
            except queue.Empty:
                break
            self._discard(conn)
            closed_count += 1
        return closed_count

    def _close_quietly(self, conn: Any) -> None:
        try:
            conn.close()
        except Exception as e:
            self.logger.warning(f"Error closing connection: {e}")

    @property
    def size(self) -> int:
        """Connections currently open (idle and borrowed)."""
        return self._opened

    @property
    def available(self) -> int:
        """Idle connections ready to hand out."""
        return self._idle.qsize()

    @property
    def in_use(self) -> int:
        """Connections currently borrowed."""
        return self._opened - self._idle.qsize()

    @property
    def initialized(self) -> bool:
        return self._initialized
