"""
Connection descriptor model for the fields read from a ClickHouse connection string.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SCHEME_PORTS = {
    "http": 80,
    "https": 443,
}


class ConnectionDescriptor(BaseModel):
    """Read-only view over the parts of a connection string used for span tags."""
    database: str = Field("default", description="Database name")
    username: str = Field("default", description="Name of the user connecting")
    protocol: str = Field("http", description="Transport protocol (http or https)")
    host: str = Field("localhost", description="Server host name")
    port: int = Field(8123, ge=0, le=65535, description="Server port")

    model_config = ConfigDict(frozen=True)

    @property
    def service_uri(self) -> str:
        """
        URI of the target service, e.g. ``http://localhost:8123/``.

        The port is left out when it is the default port of the scheme.
        """
        scheme = self.protocol.lower()
        host = self.host.lower()
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        if DEFAULT_SCHEME_PORTS.get(scheme) == self.port:
            return f"{scheme}://{host}/"
        return f"{scheme}://{host}:{self.port}/"
