"""Server management commands for the Context7 MCP CLI."""

import asyncio

import click

from context7_mcp.cli.config import set_settings
from context7_mcp.cli.utils import MCPClient, echo_error, echo_info, echo_success
from context7_mcp.models.api.system import LogLevel
from context7_mcp.models.config.server import ServerSettings


@click.group()
def server():
    """Run and check the Context7 MCP server.

    Examples:
        context7-mcp server start                   # Listen on $PORT or 3000
        context7-mcp server start --port 8080       # Listen on a given port
        context7-mcp server status                  # Ping the local server
    """
    pass


@server.command()
@click.option("--host", default=None, help="Interface to bind (default from settings)")
@click.option("--port", type=int, default=None, help="Port to listen on")
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    default=None,
    help="Log level",
)
def start(host, port, log_level):
    """Start the MCP server in the foreground.

    Connects the documentation tools to the HTTP endpoint and serves
    until interrupted. Command line options override the environment.
    """
    from context7_mcp.mcp_server.main import main

    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if log_level is not None:
        overrides["log_level"] = log_level.upper()

    settings = ServerSettings(**overrides)
    set_settings(settings)

    echo_info(f"Starting server at {settings.endpoint_url}")
    main(settings)


@server.command()
@click.option("--url", default=None, help="MCP endpoint URL (default from settings)")
@click.option("--timeout", default=5.0, help="Request timeout in seconds")
def status(url, timeout):
    """Check whether a server answers on its MCP endpoint."""
    client = MCPClient(url, timeout=timeout)

    ok, error = asyncio.run(client.ping())
    if ok:
        echo_success(f"Server is reachable at {client.url}")
    else:
        echo_error(f"Server is not reachable at {client.url}: {error}")
        raise SystemExit(1)
