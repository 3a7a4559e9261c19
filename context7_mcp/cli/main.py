"""Main CLI entry point for Context7 MCP."""

import click
from rich.console import Console

from .config import get_settings
from .utils import echo_error

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.pass_context
def cli(ctx, version):
    """Context7 MCP - documentation lookup tools over MCP.

    Run the MCP server, inspect the tools it exposes, and call them
    against a running instance.

    Examples:
        context7-mcp -v                                   # Show version
        context7-mcp server start --port 3000             # Start the server
        context7-mcp server status                        # Ping a running server
        context7-mcp tools list                           # Show available tools
        context7-mcp tools call resolve-library-id -a libraryName=Next.js
    """
    if version:
        from . import __version__

        console.print(f"Context7 MCP v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)
    ctx.obj["settings"] = get_settings()


def register_commands():
    """Register all command groups."""
    try:
        from .commands.server import server

        cli.add_command(server)
    except ImportError as e:
        echo_error(f"Failed to load server commands: {e}")

    try:
        from .commands.tools import tools

        cli.add_command(tools)
    except ImportError as e:
        echo_error(f"Failed to load tools commands: {e}")


# Register commands when module is imported
register_commands()


if __name__ == "__main__":
    cli()
