"""
Shared fixtures for recording spans with the OpenTelemetry SDK.
"""

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_OFF

from clickhouse_tracing import span_factory
from clickhouse_tracing.config import TracingConfig
from clickhouse_tracing.span_factory import SpanFactory


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that record spans through the OpenTelemetry SDK")


@pytest.fixture
def span_exporter(monkeypatch):
    """Install a process-wide factory whose spans end up in an in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(span_factory, "_factory", SpanFactory(TracingConfig(tracer_provider=provider)))
    yield exporter
    exporter.clear()


@pytest.fixture
def disabled_tracing(monkeypatch):
    """Install a process-wide factory that never samples, and its exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider(sampler=ALWAYS_OFF)
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(span_factory, "_factory", SpanFactory(TracingConfig(tracer_provider=provider)))
    yield exporter
    exporter.clear()
