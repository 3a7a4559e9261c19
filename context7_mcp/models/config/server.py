"""Server configuration models."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from context7_mcp import __version__
from context7_mcp.models.api.system import LogLevel


class ServerSettings(BaseSettings):
    """Process configuration read from the environment.

    The listening port comes from the bare ``PORT`` variable (default 3000);
    everything else uses the ``CONTEXT7_MCP_`` prefix, e.g.
    ``CONTEXT7_MCP_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTEXT7_MCP_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    host: str = "0.0.0.0"
    path: str = "/mcp"
    log_level: LogLevel = LogLevel.INFO
    server_name: str = "context7-mcp"
    server_version: str = __version__

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate host is not empty."""
        if not v or not v.strip():
            raise ValueError("Host cannot be empty")
        return v.strip()

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Endpoint path must be absolute."""
        if not v.startswith("/"):
            raise ValueError("Endpoint path must start with '/'")
        return v.rstrip("/") or "/"

    @property
    def base_url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}"

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}{self.path}"


__all__ = ["ServerSettings"]
