"""Shared infrastructure for Context7 MCP."""
