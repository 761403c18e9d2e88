"""
Span attribute keys and values shared by the ClickHouse instrumentation.
"""

INSTRUMENTATION_NAME = "ClickHouse.Client"
DISTRIBUTION_NAME = "clickhouse-tracing"

TAG_DB_CONNECTION_STRING = "db.connection_string"
TAG_DB_NAME = "db.name"
TAG_DB_STATEMENT = "db.statement"
TAG_DB_SYSTEM = "db.system"
TAG_DB_USER = "db.user"
TAG_PEER_SERVICE = "peer.service"
TAG_THREAD_ID = "thread.id"
TAG_STATUS_CODE = "otel.status_code"
TAG_STATUS_DESCRIPTION = "otel.status_description"

EVENT_EXCEPTION = "exception"
EVENT_EXCEPTION_TYPE = "exception.type"
EVENT_EXCEPTION_MESSAGE = "exception.message"

VALUE_DB_SYSTEM = "clickhouse"
VALUE_STATUS_OK = "OK"
VALUE_STATUS_ERROR = "ERROR"

STATEMENT_MAX_LENGTH = 300
