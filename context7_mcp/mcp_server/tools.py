"""MCP tools for Context7 documentation lookup."""

import logging

import mcp.types as types

from context7_mcp.mcp_server.backend import DocumentationBackend
from context7_mcp.mcp_server.errors import LibraryNotFoundError
from context7_mcp.mcp_server.registry import OperationDescriptor, OperationRegistry
from context7_mcp.models.api.tools import GetLibraryDocsParams, ResolveLibraryIdParams

logger = logging.getLogger(__name__)

RESOLVE_LIBRARY_ID = OperationDescriptor(
    name="resolve-library-id",
    description="Resolves a general library name into a Context7-compatible ID",
    params_model=ResolveLibraryIdParams,
)

GET_LIBRARY_DOCS = OperationDescriptor(
    name="get-library-docs",
    description="Fetches up-to-date documentation for a library using its Context7-compatible ID",
    params_model=GetLibraryDocsParams,
)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    """Wrap text in a single-block tool result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        is_error=is_error,
    )


class Context7Tools:
    """Collection of MCP tools backed by a documentation backend."""

    def __init__(self, backend: DocumentationBackend):
        """Initialize tools with the backend that performs lookups."""
        self.backend = backend

    async def resolve_library_id(
        self, params: ResolveLibraryIdParams
    ) -> types.CallToolResult:
        """Resolve a library name into a Context7-compatible ID.

        Args:
            params: Validated arguments carrying ``libraryName``

        Returns:
            Tool result with the library ID as its only text block, or an
            error result when the backend knows no such library
        """
        logger.info(f"Resolving library name: {params.library_name}")
        try:
            library_id = await self.backend.lookup(params.library_name)
        except LibraryNotFoundError as e:
            logger.warning(e.message)
            return text_result(e.message, is_error=True)
        return text_result(library_id)

    async def get_library_docs(
        self, params: GetLibraryDocsParams
    ) -> types.CallToolResult:
        """Fetch documentation for a Context7-compatible library ID.

        ``topic`` and ``tokens`` are passed through to the backend untouched.
        """
        logger.info(
            f"Fetching docs for: {params.library_id} with topic: {params.topic or 'none'}"
        )
        try:
            docs = await self.backend.fetch_docs(
                params.library_id, topic=params.topic, tokens=params.tokens
            )
        except LibraryNotFoundError as e:
            logger.warning(e.message)
            return text_result(e.message, is_error=True)
        return text_result(docs)


def build_registry(backend: DocumentationBackend) -> OperationRegistry:
    """Create a registry holding both documentation tools."""
    tools = Context7Tools(backend)
    registry = OperationRegistry()
    registry.register(RESOLVE_LIBRARY_ID, tools.resolve_library_id)
    registry.register(GET_LIBRARY_DOCS, tools.get_library_docs)
    return registry
