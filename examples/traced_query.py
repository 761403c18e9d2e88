"""
Trace a few fake ClickHouse operations and print the spans to the console.

Run with: python examples/traced_query.py
"""

import logging
import time

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from clickhouse_tracing import (
    set_connection_tags,
    set_exception,
    set_success,
    start_span,
    traced_operation,
)

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

CONNECTION_STRING = "Host=localhost;Port=8123;Database=default;Username=default"


def configure_console_tracer() -> None:
    resource = Resource.create({SERVICE_NAME: "clickhouse-tracing-example"})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def main():
    configure_console_tracer()

    # Explicit helpers, the way a connection object would call them
    span = start_span("connection.open")
    set_connection_tags(span, CONNECTION_STRING, None)
    time.sleep(0.01)
    set_success(span)

    with traced_operation("command.execute", CONNECTION_STRING, "SELECT version()"):
        time.sleep(0.01)

    span = start_span("command.execute")
    set_connection_tags(span, CONNECTION_STRING, "SELECT * FROM system.numbers LIMIT " + "9" * 400)
    try:
        raise TimeoutError("timeout")
    except TimeoutError as e:
        logger.info(f"Query failed: {e}")
        set_exception(span, e)


if __name__ == "__main__":
    main()
