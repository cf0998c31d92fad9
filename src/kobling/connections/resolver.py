"""
Secret placeholder handling for connection strings.

A connection string may reference its secret inline, e.g.
``SERVER=db;DATABASE=sales;${prod/sales/mysql}``. The reference only tells the
credential provider which secret to use; it must never reach the driver. The
resolver strips every placeholder and merges the provider's credentials into
the driver properties instead.
"""
from typing import List, MutableMapping, Optional

from kobling.secrets import CredentialProvider
from kobling.utility.masking import SECRET_PLACEHOLDER_PATTERN


def find_placeholders(connection_string: str) -> List[str]:
    """All well-formed placeholders in order of appearance."""
    return SECRET_PLACEHOLDER_PATTERN.findall(connection_string)


def has_placeholder(connection_string: str) -> bool:
    """Whether the string contains at least one well-formed placeholder."""
    return SECRET_PLACEHOLDER_PATTERN.search(connection_string) is not None


def strip_placeholders(connection_string: str) -> str:
    """Remove every well-formed placeholder. Malformed ones are left alone."""
    return SECRET_PLACEHOLDER_PATTERN.sub("", connection_string)


def resolve_connection_string(
    template: str,
    properties: MutableMapping[str, str],
    credential_provider: Optional[CredentialProvider] = None,
) -> str:
    """
    Resolve a connection string template against a credential provider.

    Without a provider the template is returned unchanged and ``properties``
    is left untouched. With one, all placeholders are removed and the
    provider's credentials are merged into ``properties`` in place (last
    write wins).

    Args:
        template: Connection string, possibly containing ``${...}`` tokens
        properties: Driver properties, updated in place
        credential_provider: Source of credentials

    Returns:
        Connection string safe to hand to the driver
    """
    if credential_provider is None:
        return template

    properties.update(credential_provider.get_credential_map())
    return strip_placeholders(template)
