"""HTTP transport for the Context7 MCP server."""

from context7_mcp.api.main import MCPTransport, create_app

__all__ = ["MCPTransport", "create_app"]
