"""Centralized model definitions for Context7 MCP.

This package contains all Pydantic models organized by domain:
- api/: error bodies, tool parameter structs and health responses
- config/: configuration models
"""

from context7_mcp.models.api.jsonrpc import *
from context7_mcp.models.api.system import *
from context7_mcp.models.api.tools import *
from context7_mcp.models.config.server import *

__all__ = [
    # Error bodies
    "METHOD_NOT_ALLOWED",
    "error_envelope",
    # Tool parameters
    "ResolveLibraryIdParams",
    "GetLibraryDocsParams",
    # System
    "LogLevel",
    "HealthResponse",
    # Config
    "ServerSettings",
]
