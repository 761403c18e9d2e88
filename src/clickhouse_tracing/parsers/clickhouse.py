"""
Parser for ClickHouse client connection strings.
"""

import logging

from pydantic import ValidationError

from .interfaces import ConnectionStringParser
from .utils import split_pairs
from ..exceptions import ConnectionStringError
from ..models import ConnectionDescriptor

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PROTOCOL = "http"
DEFAULT_DATABASE = "default"
DEFAULT_USERNAME = "default"
DEFAULT_PORTS = {
    "http": 8123,
    "https": 8443,
}


class ClickHouseConnectionStringParser(ConnectionStringParser):
    """
    Reads ``Host=...;Port=...;Database=...;Username=...`` style connection strings.

    Keys are case-insensitive, unknown keys (Password, Compression, Timeout, ...)
    are ignored.
    """

    def parse(self, connection_string: str) -> ConnectionDescriptor:
        pairs = split_pairs(connection_string)

        protocol = (pairs.get("protocol") or DEFAULT_PROTOCOL).lower()
        port_text = pairs.get("port")
        if port_text:
            try:
                port = int(port_text)
            except ValueError:
                raise ConnectionStringError(f"Invalid port '{port_text}'") from None
        else:
            port = DEFAULT_PORTS.get(protocol, DEFAULT_PORTS[DEFAULT_PROTOCOL])

        try:
            descriptor = ConnectionDescriptor(
                database=pairs.get("database") or DEFAULT_DATABASE,
                username=pairs.get("username") or DEFAULT_USERNAME,
                protocol=protocol,
                host=pairs.get("host") or DEFAULT_HOST,
                port=port,
            )
        except ValidationError as e:
            raise ConnectionStringError(f"Invalid connection string: {e.error_count()} invalid field(s)") from e

        logger.debug(f"Parsed connection string for '{descriptor.host}:{descriptor.port}'")
        return descriptor
