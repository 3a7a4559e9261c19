"""Configuration management for the Context7 MCP CLI."""

from context7_mcp.models.config import ServerSettings

# Global configuration instance
_settings: ServerSettings | None = None


def get_settings() -> ServerSettings:
    """Get the global settings instance, loading it from the environment."""
    global _settings
    if _settings is None:
        _settings = ServerSettings()
    return _settings


def set_settings(settings: ServerSettings | None) -> None:
    """Set (or with None, reset) the global settings instance."""
    global _settings
    _settings = settings


def get_endpoint_url() -> str:
    """Get the MCP endpoint URL of a locally running server."""
    return get_settings().endpoint_url
