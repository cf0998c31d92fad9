"""
Base connection factory interface.

Defines the contract that catalog connection factories implement.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

from kobling.secrets import CredentialProvider


class BaseConnectionFactory(ABC):
    """
    Abstract base class for relational connection factories.

    A factory owns everything needed to reach one catalog: its connection
    string template, driver properties and, once used, its pool.

    Example:
        ```python
        class MyFactory(BaseConnectionFactory):
            def get_connection(self, credential_provider=None):
                ...
        ```
    """

    @abstractmethod
    def get_connection(
        self, credential_provider: Optional[CredentialProvider] = None
    ) -> Any:
        """
        Return an open connection.

        Args:
            credential_provider: Source of credentials for the connection

        Returns:
            Database connection object (type varies by driver)
        """
        pass
