"""
ClickHouse Tracing - OpenTelemetry instrumentation helpers for ClickHouse database clients.

This package provides:
- A process-wide span factory for client spans
- Helpers that tag spans with database name, user, service and statement text
- Success and error finalization with an exception event
- A context manager wrapping all of the above around one database operation
"""

from .version import __version__

__author__ = "ClickHouse Tracing Contributors"

from .config import TracingConfig
from .exceptions import ClickHouseTracingError, ConnectionStringError
from .instrument import traced_operation
from .models import ConnectionDescriptor
from .parsers import ClickHouseConnectionStringParser, ConnectionStringParser
from .span_factory import SpanFactory, configure, get_span_factory
from .span_helpers import set_connection_tags, set_exception, set_success, start_span

__all__ = [
    "__version__",
    "TracingConfig",
    "SpanFactory",
    "configure",
    "get_span_factory",
    "start_span",
    "set_connection_tags",
    "set_success",
    "set_exception",
    "traced_operation",
    "ConnectionDescriptor",
    "ConnectionStringParser",
    "ClickHouseConnectionStringParser",
    # Errors
    "ClickHouseTracingError",
    "ConnectionStringError",
]
