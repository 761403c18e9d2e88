"""
Exceptions raised by clickhouse_tracing.
"""


class ClickHouseTracingError(Exception):
    """Base class for errors raised by this package."""


class ConnectionStringError(ClickHouseTracingError, ValueError):
    """Raised when a connection string cannot be read into a descriptor."""
