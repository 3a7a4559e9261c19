"""Tool inspection and invocation commands for the Context7 MCP CLI."""

import asyncio
import json

import click

from context7_mcp.cli.utils import (
    MCPClient,
    echo_error,
    echo_info,
    parse_arguments,
    print_table,
)
from context7_mcp.mcp_server.backend import PlaceholderBackend
from context7_mcp.mcp_server.tools import build_registry


@click.group()
def tools():
    """Inspect and call the documentation tools.

    Examples:
        context7-mcp tools list
        context7-mcp tools list --format json
        context7-mcp tools call get-library-docs \\
            -a context7CompatibleLibraryID=/nextjs/nextjs/v14 -a topic=routing
    """
    pass


@tools.command(name="list")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
def list_tools(output_format):
    """List the tools the server exposes and their parameters."""
    descriptors = build_registry(PlaceholderBackend()).descriptors()

    if output_format == "json":
        data = [
            descriptor.to_tool().model_dump(by_alias=True, exclude_none=True)
            for descriptor in descriptors
        ]
        click.echo(json.dumps(data, indent=2))
        return

    rows = []
    for descriptor in descriptors:
        for param in descriptor.parameters.values():
            rows.append(
                {
                    "tool": descriptor.name,
                    "parameter": param.name,
                    "type": param.type,
                    "required": "yes" if param.required else "no",
                    "description": param.description,
                }
            )
    print_table(rows, title="Tools")


@tools.command()
@click.argument("name")
@click.option(
    "--arg", "-a", "args", multiple=True, help="Tool argument as key=value (repeatable)"
)
@click.option("--url", default=None, help="MCP endpoint URL (default from settings)")
def call(name, args, url):
    """Call a tool on a running server and print its text output.

    Args:
        name: Tool name, e.g. resolve-library-id
    """
    arguments = parse_arguments(args)
    client = MCPClient(url)

    success, result = asyncio.run(client.call_tool(name, arguments))
    if not success:
        echo_error(f"Tool call failed: {result}")
        echo_info("Make sure the server is running: context7-mcp server start")
        raise SystemExit(1)

    for block in result.get("content", []):
        if block.get("type") == "text":
            click.echo(block.get("text", ""))

    if result.get("isError"):
        raise SystemExit(1)
