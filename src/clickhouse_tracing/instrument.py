"""
Context manager that traces one database operation from start to finish.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from opentelemetry.trace import Span

from .parsers import ConnectionStringParser
from .span_helpers import set_connection_tags, set_exception, set_success, start_span


@contextmanager
def traced_operation(
    name: str,
    connection_string: Optional[str] = None,
    statement: Optional[str] = None,
    parser: Optional[ConnectionStringParser] = None,
) -> Iterator[Span]:
    """
    Trace a database operation.

    The span is ended with an OK status when the block completes and with an
    ERROR status and exception event when it raises. The exception is re-raised.

    Example:
        >>> with traced_operation("command.execute", conn_str, "SELECT 1"):
        ...     client.execute("SELECT 1")
    """
    span = start_span(name)
    set_connection_tags(span, connection_string, statement, parser=parser)
    try:
        yield span
    except BaseException as e:
        set_exception(span, e)
        raise
    set_success(span)
