# Parsers module
from .interfaces import ConnectionStringParser
from .clickhouse import ClickHouseConnectionStringParser
from .utils import split_pairs, unquote

__all__ = [
    "ConnectionStringParser",
    "ClickHouseConnectionStringParser",
    "split_pairs",
    "unquote"
]
