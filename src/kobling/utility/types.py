"""
Map schema-registry type names onto canonical Polars column types.

Topic schemas describe their fields with loose textual type names
(``"int32"``, ``"BOOL"``, ``"Timestamp"``). Everything downstream works with
Polars dtypes, so names are normalised here. Unknown names fall back to text.
"""
from typing import Dict

import polars as pl

DEFAULT_COLUMN_TYPE = pl.Utf8

_COLUMN_TYPES: Dict[str, pl.DataType] = {
    "BOOLEAN": pl.Boolean,
    "BOOL": pl.Boolean,
    "TINYINT": pl.Int8,
    "SMALLINT": pl.Int16,
    "INT": pl.Int32,
    "INT32": pl.Int32,
    "INTEGER": pl.Int32,
    "LONG": pl.Int64,
    "BIGINT": pl.Int64,
    "INT64": pl.Int64,
    "FLOAT": pl.Float32,
    "DOUBLE": pl.Float64,
    "DECIMAL": pl.Float64,
    "DATE": pl.Date,
    "TIMESTAMP": pl.Datetime("ms"),
}


def to_column_type(type_name: str) -> pl.DataType:
    """
    Convert a textual type name to a Polars dtype.

    Matching ignores case and surrounding whitespace. Any name not in the
    table maps to ``pl.Utf8``.

    Args:
        type_name: Type name as found in the source schema

    Returns:
        Polars dtype for the column
    """
    return _COLUMN_TYPES.get(str(type_name).strip().upper(), DEFAULT_COLUMN_TYPE)
