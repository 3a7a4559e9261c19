"""MCP server for Context7 documentation lookup.

This package holds the operation registry, the two documentation tools,
the SDK-backed request handlers and the process entry point.
"""

from context7_mcp.mcp_server.backend import DocumentationBackend, PlaceholderBackend
from context7_mcp.mcp_server.dispatcher import MCPDispatcher
from context7_mcp.mcp_server.registry import OperationDescriptor, OperationRegistry
from context7_mcp.mcp_server.tools import Context7Tools, build_registry

__all__ = [
    "Context7Tools",
    "DocumentationBackend",
    "MCPDispatcher",
    "OperationDescriptor",
    "OperationRegistry",
    "PlaceholderBackend",
    "build_registry",
]
