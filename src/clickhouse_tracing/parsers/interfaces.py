"""
Interfaces for connection-string parsers.
"""

from abc import ABC, abstractmethod

from ..models import ConnectionDescriptor


class ConnectionStringParser(ABC):
    """Abstract interface for turning a raw connection string into a descriptor."""

    @abstractmethod
    def parse(self, connection_string: str) -> ConnectionDescriptor:
        """
        Parse a connection string.

        Args:
            connection_string: Raw connection string, e.g. ``Host=localhost;Port=8123``

        Returns:
            ConnectionDescriptor with the fields used for span tags

        Raises:
            ConnectionStringError: If the text cannot be parsed
        """
        pass
