"""
Context7 MCP: documentation lookup tools served over the Model Context Protocol.

A small stateless HTTP server exposing `resolve-library-id` and
`get-library-docs` as MCP tools, backed by a pluggable documentation backend.
"""

__version__ = "1.0.0"
