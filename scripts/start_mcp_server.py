#!/usr/bin/env python3
"""Startup script for the Context7 MCP server."""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from context7_mcp.mcp_server.main import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nMCP server stopped by user")
