"""
Connection configuration value objects and per-engine defaults.
"""
from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

from kobling.utility.config import get_optional_config
from kobling.utility.exceptions import ConfigError, MissingConfigurationError

DEFAULT_CONNECTION_STRING_KEY = "default"
CONNECTION_STRING_SUFFIX = "_connection_string"


class ConnectionConfig(BaseModel):
    """
    Where and how a catalog connects.

    The connection string may carry secret placeholders such as
    ``${sales/mysql}``; they are stripped before the string reaches a driver.
    """

    model_config = ConfigDict(frozen=True)

    catalog: str = Field(..., description="Catalog this connection serves")
    engine: str = Field(..., description="Database engine, e.g. 'mysql'")
    connection_string: str = Field(
        ..., description="ODBC connection string, possibly with ${secret} tokens"
    )

    @classmethod
    def from_config(
        cls, catalog: str, engine: str, config: Mapping[str, str]
    ) -> "ConnectionConfig":
        """
        Build from an untyped configuration map.

        Looks up ``<catalog>_connection_string`` first and falls back to
        ``default``.

        Raises:
            MissingConfigurationError: If neither key is populated
        """
        key = f"{catalog}{CONNECTION_STRING_SUFFIX}"
        connection_string = get_optional_config(key, config) or get_optional_config(
            DEFAULT_CONNECTION_STRING_KEY, config
        )
        if connection_string is None:
            raise MissingConfigurationError(key)
        return cls(catalog=catalog, engine=engine, connection_string=connection_string)


class ConnectionInfo(BaseModel):
    """Driver and default port for an engine."""

    model_config = ConfigDict(frozen=True)

    driver: str = Field(..., description="ODBC driver name")
    default_port: int = Field(..., ge=1, le=65535, description="Default TCP port")


ENGINE_DEFAULTS: Dict[str, ConnectionInfo] = {
    "mysql": ConnectionInfo(driver="MySQL ODBC 8.0 Unicode Driver", default_port=3306),
    "postgresql": ConnectionInfo(driver="PostgreSQL Unicode", default_port=5432),
    "sqlserver": ConnectionInfo(
        driver="ODBC Driver 18 for SQL Server", default_port=1433
    ),
}


def get_connection_info(engine: str) -> ConnectionInfo:
    """
    Get driver defaults for an engine.

    Raises:
        ConfigError: If the engine is unknown
    """
    try:
        return ENGINE_DEFAULTS[engine.strip().lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown database engine '{engine}'. "
            f"Expected one of {sorted(ENGINE_DEFAULTS)}"
        ) from None
