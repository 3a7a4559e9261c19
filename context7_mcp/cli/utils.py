"""Utility functions for the Context7 MCP CLI."""

import json
import uuid
from typing import Any

import click
import httpx
from rich.console import Console
from rich.table import Table

from context7_mcp.cli.config import get_endpoint_url

console = Console()


def echo_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")


def print_table(
    data: list[dict], title: str = "", headers: list[str] | None = None
) -> None:
    """Print data as a rich table."""
    if not data:
        console.print(f"[yellow]No {title.lower()} found.[/yellow]")
        return

    table = Table(title=title)
    headers = headers or list(data[0].keys())
    for header in headers:
        table.add_column(header.replace("_", " ").title())

    for row in data:
        table.add_row(*[str(row.get(header, "")) for header in headers])

    console.print(table)


def parse_arguments(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into tool arguments.

    Values that parse as JSON numbers, booleans or null keep that type;
    everything else is passed as a string.
    """
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got '{pair}'")
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = value
        if isinstance(parsed, (dict, list, str)):
            parsed = value
        arguments[key] = parsed
    return arguments


class MCPClient:
    """Minimal JSON-RPC client for a running Context7 MCP server."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url or get_endpoint_url()
        self.timeout = timeout
        self.transport = transport

    async def request(
        self, method: str, params: dict | None = None
    ) -> tuple[bool, dict | str]:
        """Send one JSON-RPC request.

        Returns:
            tuple: (success: bool, result: dict | error message)
        """
        payload = {
            "jsonrpc": "2.0",
            "id": str(uuid.uuid4()),
            "method": method,
            "params": params or {},
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Accept": "application/json, text/event-stream"},
                )
        except httpx.RequestError as e:
            return False, f"Connection error: {e}"

        try:
            data = response.json()
        except json.JSONDecodeError:
            return False, f"HTTP {response.status_code}: {response.text}"

        if "error" in data:
            error = data["error"]
            return False, f"{error.get('message')} (code {error.get('code')})"
        if response.status_code != 200:
            return False, f"HTTP {response.status_code}: {response.text}"
        return True, data.get("result", {})

    async def ping(self) -> tuple[bool, str | None]:
        """Check if the server answers a ping."""
        success, result = await self.request("ping")
        return success, None if success else str(result)

    async def call_tool(
        self, name: str, arguments: dict[str, Any]
    ) -> tuple[bool, dict | str]:
        return await self.request(
            "tools/call", {"name": name, "arguments": arguments}
        )
