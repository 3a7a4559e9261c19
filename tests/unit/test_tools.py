"""
Unit tests for the documentation backend and MCP tools.
"""

from unittest.mock import AsyncMock

import pytest

from context7_mcp.mcp_server.backend import (
    PLACEHOLDER_LIBRARY_ID,
    DocumentationBackend,
    PlaceholderBackend,
)
from context7_mcp.mcp_server.errors import LibraryNotFoundError
from context7_mcp.mcp_server.tools import Context7Tools, build_registry
from context7_mcp.models.api.tools import GetLibraryDocsParams, ResolveLibraryIdParams


def docs_params(**kwargs):
    return GetLibraryDocsParams.model_validate(kwargs)


class TestPlaceholderBackend:
    """Test the placeholder backend."""

    def setup_method(self):
        self.backend = PlaceholderBackend()

    @pytest.mark.asyncio
    async def test_lookup_returns_fixed_id(self):
        """Lookup ignores the name and returns the placeholder ID."""
        assert await self.backend.lookup("Next.js") == "/nextjs/nextjs/v14"
        assert await self.backend.lookup("React") == PLACEHOLDER_LIBRARY_ID

    @pytest.mark.asyncio
    async def test_lookup_blank_name(self):
        """Blank names resolve to the placeholder ID as well."""
        assert await self.backend.lookup("   ") == "/nextjs/nextjs/v14"
        assert await self.backend.lookup("") == PLACEHOLDER_LIBRARY_ID

    @pytest.mark.asyncio
    async def test_fetch_docs_embeds_id_and_topic(self):
        """Docs mention the requested ID and topic."""
        text = await self.backend.fetch_docs("/vercel/next.js", topic="routing")
        assert "/vercel/next.js" in text
        assert "Topic: routing" in text

    @pytest.mark.asyncio
    async def test_fetch_docs_default_topic(self):
        """Without a topic the docs are labelled General."""
        text = await self.backend.fetch_docs("/vercel/next.js")
        assert "Topic: General" in text

    @pytest.mark.asyncio
    async def test_fetch_docs_accepts_token_limit(self):
        """A token limit is accepted without changing the text."""
        limited = await self.backend.fetch_docs("/a/b", tokens=10)
        unlimited = await self.backend.fetch_docs("/a/b")
        assert limited == unlimited

    def test_is_documentation_backend(self):
        assert isinstance(self.backend, DocumentationBackend)


class TestContext7Tools:
    """Test tool handlers against a mocked backend."""

    def setup_method(self):
        """Set up tools with a mock backend."""
        self.backend = AsyncMock(spec=DocumentationBackend)
        self.tools = Context7Tools(self.backend)

    @pytest.mark.asyncio
    async def test_resolve_library_id(self):
        """The resolved ID is the single text block."""
        self.backend.lookup.return_value = "/facebook/react"

        result = await self.tools.resolve_library_id(
            ResolveLibraryIdParams(libraryName="React")
        )

        self.backend.lookup.assert_awaited_once_with("React")
        assert not result.is_error
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "/facebook/react"

    @pytest.mark.asyncio
    async def test_resolve_library_id_not_found(self):
        """Lookup misses become error results, not exceptions."""
        self.backend.lookup.side_effect = LibraryNotFoundError("nope")

        result = await self.tools.resolve_library_id(
            ResolveLibraryIdParams(libraryName="nope")
        )

        assert result.is_error
        assert "nope" in result.content[0].text

    @pytest.mark.asyncio
    async def test_get_library_docs_passes_parameters_through(self):
        """Topic and token limit reach the backend unchanged."""
        self.backend.fetch_docs.return_value = "docs"

        result = await self.tools.get_library_docs(
            docs_params(
                context7CompatibleLibraryID="/nextjs/nextjs/v14",
                topic="routing",
                tokens=2000,
            )
        )

        self.backend.fetch_docs.assert_awaited_once_with(
            "/nextjs/nextjs/v14", topic="routing", tokens=2000
        )
        assert result.content[0].text == "docs"

    @pytest.mark.asyncio
    async def test_get_library_docs_optional_fields_default_to_none(self):
        self.backend.fetch_docs.return_value = "docs"

        await self.tools.get_library_docs(
            docs_params(context7CompatibleLibraryID="/nextjs/nextjs/v14")
        )

        self.backend.fetch_docs.assert_awaited_once_with(
            "/nextjs/nextjs/v14", topic=None, tokens=None
        )

    @pytest.mark.asyncio
    async def test_backend_faults_propagate(self):
        """Unexpected backend failures are left to the transport."""
        self.backend.fetch_docs.side_effect = RuntimeError("backend down")

        with pytest.raises(RuntimeError):
            await self.tools.get_library_docs(
                docs_params(context7CompatibleLibraryID="/a/b")
            )


class TestBuildRegistry:
    """Test registry construction."""

    def test_registers_both_tools(self):
        registry = build_registry(PlaceholderBackend())
        assert "resolve-library-id" in registry
        assert "get-library-docs" in registry
        assert len(registry) == 2
        assert not registry.frozen

    @pytest.mark.asyncio
    async def test_handlers_use_given_backend(self):
        """Registered handlers talk to the injected backend."""
        backend = AsyncMock(spec=DocumentationBackend)
        backend.lookup.return_value = "/custom/lib"
        registry = build_registry(backend)

        params = registry.validate("resolve-library-id", {"libraryName": "lib"})
        result = await registry.resolve("resolve-library-id")(params)

        assert result.content[0].text == "/custom/lib"
