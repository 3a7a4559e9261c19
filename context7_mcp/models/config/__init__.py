"""Configuration models for Context7 MCP."""

from context7_mcp.models.config.server import *

__all__ = ["ServerSettings"]
