"""MCP request handlers backed by the operation registry.

The SDK server owns the protocol: ``initialize`` and version negotiation,
``ping``, notifications and unknown methods. This module only answers
``tools/list`` and ``tools/call`` from the registry.
"""

import logging

import mcp.types as types
from mcp.server import Server, ServerRequestContext
from mcp.shared.exceptions import MCPError

from context7_mcp import __version__
from context7_mcp.mcp_server.errors import Context7MCPError, InternalError
from context7_mcp.mcp_server.registry import OperationRegistry

logger = logging.getLogger(__name__)


class MCPDispatcher:
    """Route tool requests from an SDK server to registered operations."""

    def __init__(
        self,
        registry: OperationRegistry,
        server_name: str = "context7-mcp",
        server_version: str = __version__,
    ):
        self.registry = registry
        self.server = Server(
            server_name,
            version=server_version,
            on_list_tools=self.list_tools,
            on_call_tool=self.call_tool,
        )

    async def list_tools(
        self,
        ctx: ServerRequestContext,
        params: types.PaginatedRequestParams | None,
    ) -> types.ListToolsResult:
        tools = [descriptor.to_tool() for descriptor in self.registry.descriptors()]
        return types.ListToolsResult(tools=tools)

    async def call_tool(
        self,
        ctx: ServerRequestContext,
        params: types.CallToolRequestParams,
    ) -> types.CallToolResult:
        """Validate the arguments, then run the operation's handler.

        Unknown tools and invalid arguments are answered with INVALID_PARAMS
        before any handler runs. A handler fault is logged and answered with
        INTERNAL_ERROR.
        """
        try:
            handler = self.registry.resolve(params.name)
            arguments = self.registry.validate(params.name, params.arguments)
        except Context7MCPError as e:
            logger.warning(f"Rejected call to {params.name}: {e.message}")
            raise e.to_mcp_error() from e

        logger.info(f"Calling tool: {params.name}")
        try:
            return await handler(arguments)
        except MCPError:
            raise
        except Context7MCPError as e:
            logger.warning(f"Tool {params.name} failed: {e.message}")
            raise e.to_mcp_error() from e
        except Exception as e:
            logger.error(f"Tool {params.name} raised: {e}", exc_info=True)
            raise InternalError().to_mcp_error() from e
