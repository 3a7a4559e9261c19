"""Command line interface for Context7 MCP."""

from context7_mcp import __version__

__all__ = ["__version__"]
