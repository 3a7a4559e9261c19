#!/usr/bin/env python3
"""Smoke test against a running Context7 MCP server."""

import asyncio
import sys
from pathlib import Path

import httpx

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from context7_mcp.cli.utils import MCPClient


async def test_basic_functionality(url: str | None = None) -> bool:
    """Exercise the handshake, both tools and the rejected verbs."""
    print("🧪 Testing Context7 MCP server")
    print("=" * 50)

    client = MCPClient(url)

    print(f"\n1. Initializing against {client.url}...")
    ok, result = await client.request(
        "initialize",
        {
            "protocolVersion": "2025-06-18",
            "capabilities": {},
            "clientInfo": {"name": "smoke-test", "version": "0.1.0"},
        },
    )
    if not ok:
        print(f"❌ Cannot initialize: {result}")
        print("   Make sure the server is running with: context7-mcp server start")
        return False
    print(f"✅ Server: {result['serverInfo']['name']} {result['serverInfo']['version']}")

    print("\n2. Listing tools...")
    ok, result = await client.request("tools/list")
    if not ok:
        print(f"❌ Failed to list tools: {result}")
        return False
    for tool in result["tools"]:
        print(f"   - {tool['name']}")

    print("\n3. Resolving 'Next.js'...")
    ok, result = await client.call_tool("resolve-library-id", {"libraryName": "Next.js"})
    if not ok or result.get("isError"):
        print(f"❌ resolve-library-id failed: {result}")
        return False
    library_id = result["content"][0]["text"]
    print(f"✅ Resolved to {library_id}")

    print("\n4. Fetching docs on 'routing'...")
    ok, result = await client.call_tool(
        "get-library-docs",
        {"context7CompatibleLibraryID": library_id, "topic": "routing"},
    )
    if not ok or library_id not in result["content"][0]["text"]:
        print(f"❌ get-library-docs failed: {result}")
        return False
    print("✅ Documentation returned")

    print("\n5. Checking GET is rejected...")
    async with httpx.AsyncClient() as http:
        response = await http.get(client.url)
    if response.status_code != 405 or response.json()["error"]["code"] != -32000:
        print(f"❌ Unexpected GET response: {response.status_code} {response.text}")
        return False
    print("✅ GET rejected with 405")

    print("\n🎉 All checks passed")
    return True


if __name__ == "__main__":
    endpoint = sys.argv[1] if len(sys.argv) > 1 else None
    success = asyncio.run(test_basic_functionality(endpoint))
    sys.exit(0 if success else 1)
