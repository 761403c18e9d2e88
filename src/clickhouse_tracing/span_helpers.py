"""
Helpers that start, tag and finalize ClickHouse client spans.

Every helper accepts ``None`` or a non-recording span and does nothing in that
case, so callers never need to check whether tracing is enabled.
"""

from typing import Optional
import logging
import threading

from opentelemetry.trace import Span, Status, StatusCode

from .constants import (
    EVENT_EXCEPTION,
    EVENT_EXCEPTION_MESSAGE,
    EVENT_EXCEPTION_TYPE,
    STATEMENT_MAX_LENGTH,
    TAG_DB_CONNECTION_STRING,
    TAG_DB_NAME,
    TAG_DB_STATEMENT,
    TAG_DB_SYSTEM,
    TAG_DB_USER,
    TAG_PEER_SERVICE,
    TAG_STATUS_CODE,
    TAG_STATUS_DESCRIPTION,
    TAG_THREAD_ID,
    VALUE_DB_SYSTEM,
    VALUE_STATUS_ERROR,
    VALUE_STATUS_OK,
)
from .parsers import ClickHouseConnectionStringParser, ConnectionStringParser
from .span_factory import get_span_factory

logger = logging.getLogger(__name__)

_default_parser = ClickHouseConnectionStringParser()


def _is_recording(span: Optional[Span]) -> bool:
    return span is not None and span.is_recording()


def _set_tag(span: Span, key: str, value: Optional[str]) -> None:
    # OpenTelemetry rejects None attribute values; an absent value means no tag.
    if value is not None:
        span.set_attribute(key, value)


def truncate_statement(statement: Optional[str]) -> Optional[str]:
    """Cut a statement down to STATEMENT_MAX_LENGTH characters."""
    if statement is not None and len(statement) > STATEMENT_MAX_LENGTH:
        return statement[:STATEMENT_MAX_LENGTH]
    return statement


def exception_type_name(exception: BaseException) -> str:
    """Fully qualified type name, e.g. ``socket.timeout`` or ``ValueError`` for builtins."""
    cls = type(exception)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def start_span(name: str) -> Span:
    """
    Start a client span for a database operation.

    Args:
        name: Span name, e.g. ``connection.open`` or ``command.execute``

    Returns:
        The started span; tagged with thread id and database system when recording
    """
    span = get_span_factory().create_span(name)
    if not span.is_recording():
        return span
    span.set_attribute(TAG_THREAD_ID, str(threading.get_ident()))
    span.set_attribute(TAG_DB_SYSTEM, VALUE_DB_SYSTEM)
    return span


def set_connection_tags(
    span: Optional[Span],
    connection_string: Optional[str],
    statement: Optional[str],
    parser: Optional[ConnectionStringParser] = None,
) -> None:
    """
    Tag a span with connection details and the statement text.

    Connection tags are skipped when the connection string is blank or cannot
    be parsed. The connection string is recorded as given, including any
    password it contains.

    Args:
        span: Span to tag
        connection_string: Raw connection string
        statement: SQL text, truncated to STATEMENT_MAX_LENGTH characters
        parser: Connection string parser, defaults to the ClickHouse parser
    """
    if not _is_recording(span):
        return

    if connection_string and not connection_string.isspace():
        try:
            descriptor = (parser or _default_parser).parse(connection_string)
        except Exception as e:
            logger.warning(f"Skipping connection tags: {type(e).__name__}: {e}")
        else:
            span.set_attribute(TAG_DB_CONNECTION_STRING, connection_string)
            span.set_attribute(TAG_DB_NAME, descriptor.database)
            span.set_attribute(TAG_DB_USER, descriptor.username)
            span.set_attribute(TAG_PEER_SERVICE, descriptor.service_uri)
    else:
        logger.debug("No connection string, skipping connection tags")

    _set_tag(span, TAG_DB_STATEMENT, truncate_statement(statement))


def set_success(span: Optional[Span]) -> None:
    """Mark a span as successful and end it."""
    if not _is_recording(span):
        return
    span.set_status(Status(StatusCode.OK))
    span.set_attribute(TAG_STATUS_CODE, VALUE_STATUS_OK)
    span.end()


def set_exception(span: Optional[Span], exception: Optional[BaseException]) -> None:
    """
    Mark a span as failed, record an exception event and end it.

    Args:
        span: Span to finalize
        exception: The error raised by the database operation, may be None
    """
    if not _is_recording(span):
        return
    description = str(exception) if exception is not None else None
    span.set_status(Status(StatusCode.ERROR, description))
    span.set_attribute(TAG_STATUS_CODE, VALUE_STATUS_ERROR)
    _set_tag(span, TAG_STATUS_DESCRIPTION, description)

    attributes = {}
    if exception is not None:
        attributes[EVENT_EXCEPTION_TYPE] = exception_type_name(exception)
        attributes[EVENT_EXCEPTION_MESSAGE] = description
    span.add_event(EVENT_EXCEPTION, attributes=attributes)
    span.end()
