"""Parameter structs for MCP tool calls.

Field aliases carry the camelCase names used on the wire. Models are strict
so that e.g. a string passed for `tokens` is rejected instead of coerced.
"""

from pydantic import BaseModel, ConfigDict, Field


class ResolveLibraryIdParams(BaseModel):
    """Arguments of `resolve-library-id`."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    library_name: str = Field(
        ...,
        alias="libraryName",
        description="The name of the library to resolve (e.g., 'React' or 'Next.js')",
    )


class GetLibraryDocsParams(BaseModel):
    """Arguments of `get-library-docs`."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    library_id: str = Field(
        ...,
        alias="context7CompatibleLibraryID",
        description="The unique ID for the library (e.g., '/nextjs/nextjs/v14')",
    )
    topic: str | None = Field(
        default=None,
        description="An optional topic to focus the search on (e.g., 'routing')",
    )
    tokens: int | None = Field(
        default=None,
        description="An optional limit on the number of tokens to return",
    )


__all__ = ["ResolveLibraryIdParams", "GetLibraryDocsParams"]
