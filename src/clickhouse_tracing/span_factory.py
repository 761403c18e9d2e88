"""
Process-wide factory for ClickHouse client spans.
"""

from typing import Optional
from importlib import metadata
import logging
import threading

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Span, SpanKind, Tracer

from .config import TracingConfig
from .version import __version__

logger = logging.getLogger(__name__)


def _read_version(distribution_name: str) -> str:
    """Version of the installed distribution, or the package version when it is not installed."""
    try:
        return metadata.version(distribution_name)
    except metadata.PackageNotFoundError:
        return __version__


class SpanFactory:
    """
    Creates client spans from a single tracer.

    The tracer is built on the first call to ``get_tracer`` and reused for the
    lifetime of the factory.
    """

    def __init__(self, config: Optional[TracingConfig] = None):
        """
        Initialize the SpanFactory.

        Args:
            config: Tracing configuration, defaults to ``TracingConfig()``
        """
        self.config = config or TracingConfig()
        self._tracer: Optional[Tracer] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._tracer is not None

    def get_tracer(self) -> Tracer:
        """Return the tracer, creating it on first use."""
        tracer = self._tracer
        if tracer is not None:
            return tracer
        with self._lock:
            if self._tracer is None:
                version = _read_version(self.config.distribution_name)
                self._tracer = trace.get_tracer(
                    self.config.instrumentation_name,
                    version,
                    tracer_provider=self.config.tracer_provider,
                )
                logger.debug(f"Created tracer '{self.config.instrumentation_name}' version {version}")
            return self._tracer

    def create_span(self, name: str) -> Span:
        """
        Start a client span with no parent.

        Args:
            name: Span name, e.g. ``connection.open``

        Returns:
            The started span; a non-recording span when tracing is disabled
        """
        return self.get_tracer().start_span(name, context=Context(), kind=SpanKind.CLIENT)


_factory: Optional[SpanFactory] = None
_factory_lock = threading.Lock()


def get_span_factory() -> SpanFactory:
    """Return the process-wide span factory."""
    global _factory
    factory = _factory
    if factory is not None:
        return factory
    with _factory_lock:
        if _factory is None:
            _factory = SpanFactory()
        return _factory


def configure(config: TracingConfig) -> SpanFactory:
    """
    Replace the process-wide span factory.

    Must run before the first span is created. Once the tracer exists the
    current factory is kept, so its tracer and version label never change.

    Args:
        config: Tracing configuration for the new factory

    Returns:
        The process-wide factory in effect after the call
    """
    global _factory
    with _factory_lock:
        if _factory is not None and _factory.initialized:
            logger.warning("Span factory already in use, ignoring reconfiguration")
            return _factory
        _factory = SpanFactory(config)
        return _factory
