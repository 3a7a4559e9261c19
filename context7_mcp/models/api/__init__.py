"""Wire-level models for the MCP endpoint."""
