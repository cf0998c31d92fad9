"""
Unit tests for type name mapping.
"""
import polars as pl
import pytest

from kobling.utility.types import to_column_type


@pytest.mark.parametrize(
    "type_name, expected",
    [
        ("BOOL", pl.Boolean),
        ("boolean", pl.Boolean),
        (" Boolean ", pl.Boolean),
        ("tinyint", pl.Int8),
        ("SMALLINT", pl.Int16),
        ("int", pl.Int32),
        ("Int32", pl.Int32),
        ("INTEGER", pl.Int32),
        ("long", pl.Int64),
        ("BIGINT", pl.Int64),
        ("int64", pl.Int64),
        ("float", pl.Float32),
        ("DOUBLE", pl.Float64),
        ("decimal", pl.Float64),
        ("date", pl.Date),
        ("TIMESTAMP", pl.Datetime("ms")),
    ],
)
def test_known_types(type_name, expected):
    """Known names map regardless of case and whitespace."""
    assert to_column_type(type_name) == expected


@pytest.mark.parametrize("type_name", ["unknown_type", "", "   ", "varchar", "STRUCT<a:int>"])
def test_unknown_types_default_to_text(type_name):
    """Anything else is text."""
    assert to_column_type(type_name) == pl.Utf8
