"""
Data models used by the ClickHouse instrumentation.
"""

from .connection import ConnectionDescriptor

__all__ = [
    "ConnectionDescriptor",
]
