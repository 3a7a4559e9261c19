"""Main entry point for the Context7 MCP server."""

import logging
import sys

import uvicorn
from fastapi import FastAPI

from context7_mcp.api.main import create_app
from context7_mcp.core.logging import setup_logging
from context7_mcp.mcp_server.backend import DocumentationBackend, PlaceholderBackend
from context7_mcp.mcp_server.tools import build_registry
from context7_mcp.models.config.server import ServerSettings

logger = logging.getLogger(__name__)


def setup_server(
    settings: ServerSettings, backend: DocumentationBackend | None = None
) -> FastAPI:
    """Build the registry and connect it to the HTTP transport."""
    registry = build_registry(backend or PlaceholderBackend())
    return create_app(registry, settings)


def main(
    settings: ServerSettings | None = None,
    backend: DocumentationBackend | None = None,
) -> None:
    """Connect the tools to the transport, then start listening.

    Exits with status 1 if the connection step fails; nothing listens in
    that case.
    """
    settings = settings or ServerSettings()
    setup_logging(settings.log_level.value)

    try:
        app = setup_server(settings, backend)
    except Exception as e:
        logger.error(f"Failed to set up the server: {e}", exc_info=True)
        sys.exit(1)

    logger.info(
        f"Starting MCP Context7 Server on port {settings.port} "
        f"(endpoint {settings.path})"
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.value.lower(),
        log_config=None,
    )


def cli_main():
    """Synchronous entry point for script generation."""
    main()


if __name__ == "__main__":
    cli_main()
