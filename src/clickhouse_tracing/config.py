"""
Configuration for the span factory.
"""

from dataclasses import dataclass
from typing import Optional

from opentelemetry.trace import TracerProvider

from .constants import DISTRIBUTION_NAME, INSTRUMENTATION_NAME


@dataclass
class TracingConfig:
    """Configuration for creating the ClickHouse tracer."""
    tracer_provider: Optional[TracerProvider] = None
    instrumentation_name: str = INSTRUMENTATION_NAME
    distribution_name: str = DISTRIBUTION_NAME
