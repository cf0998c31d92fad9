"""
Unit tests for secret placeholder resolution.
"""
import pytest

from kobling.connections.resolver import (
    find_placeholders,
    has_placeholder,
    resolve_connection_string,
    strip_placeholders,
)
from kobling.secrets import StaticCredentialProvider


@pytest.fixture
def provider():
    return StaticCredentialProvider({"user": "reader", "password": "hunter2"})


@pytest.mark.parametrize(
    "template, expected",
    [
        ("SERVER=db;DATABASE=sales", "SERVER=db;DATABASE=sales"),
        ("SERVER=db;DATABASE=sales;${prod/sales}", "SERVER=db;DATABASE=sales;"),
        ("${a}SERVER=db;${b:c}DATABASE=sales;${x_y+z=.@-1}", "SERVER=db;DATABASE=sales;"),
        ("${arn:aws:secretsmanager:us-east-1:123:secret:db}", ""),
    ],
)
def test_resolution_removes_every_placeholder(provider, template, expected):
    """Every well-formed placeholder disappears, globally."""
    result = resolve_connection_string(template, {}, provider)

    assert result == expected
    assert not has_placeholder(result)


@pytest.mark.parametrize(
    "malformed",
    [
        "${}",
        "${has space}",
        "${semi;colon}",
        "$ {spaced}",
        "{no_dollar}",
        "${unterminated",
        "${bang!}",
    ],
)
def test_malformed_placeholders_are_left_alone(provider, malformed):
    """Placeholder-like text with the wrong characters is not touched."""
    template = f"SERVER=db;{malformed}"

    assert resolve_connection_string(template, {}, provider) == template


def test_credentials_merged_in_place(provider):
    """Provider credentials land in the caller's property bag."""
    properties = {"charset": "utf8mb4", "user": "stale"}

    resolve_connection_string("SERVER=db;${secret}", properties, provider)

    assert properties == {"charset": "utf8mb4", "user": "reader", "password": "hunter2"}


def test_without_provider_nothing_changes():
    """No provider: string returned as-is and no credentials merged."""
    properties = {"charset": "utf8mb4"}
    template = "SERVER=db;${secret}"

    assert resolve_connection_string(template, properties) == template
    assert properties == {"charset": "utf8mb4"}


def test_zero_matches_is_valid(provider):
    """A string without placeholders still merges credentials."""
    properties = {}

    assert resolve_connection_string("SERVER=db", properties, provider) == "SERVER=db"
    assert properties["user"] == "reader"


def test_find_and_strip_helpers():
    """Helpers agree on what a placeholder is."""
    value = "A=${one};B=${two};C=${not valid}"

    assert find_placeholders(value) == ["${one}", "${two}"]
    assert strip_placeholders(value) == "A=;B=;C=${not valid}"
