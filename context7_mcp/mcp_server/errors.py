"""Error taxonomy for the Context7 MCP server."""

from typing import Any

from mcp.shared.exceptions import MCPError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData

from context7_mcp.models.api.jsonrpc import METHOD_NOT_ALLOWED


class Context7MCPError(Exception):
    """Base exception carrying a JSON-RPC error code."""

    code: int = INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: int | None = None,
        data: dict[str, Any] | None = None,
    ):
        self.message = message
        if code is not None:
            self.code = code
        self.data = data
        super().__init__(message)

    def to_error(self) -> ErrorData:
        """Render as a JSON-RPC error object."""
        return ErrorData(code=self.code, message=self.message, data=self.data)

    def to_mcp_error(self) -> MCPError:
        """Convert for raising out of an SDK request handler."""
        return MCPError(self.code, self.message, self.data)


class DuplicateOperationError(Context7MCPError):
    """Raised when an operation name is registered twice."""

    def __init__(self, name: str):
        super().__init__(f"Operation '{name}' is already registered")
        self.name = name


class RegistryFrozenError(Context7MCPError):
    """Raised when registering into a registry that is already connected."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot register '{name}': registry is read-only after startup"
        )
        self.name = name


class UnknownOperationError(Context7MCPError):
    """Raised when no operation is registered under the requested name."""

    code = INVALID_PARAMS

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", data={"tool": name})
        self.name = name


class ValidationError(Context7MCPError):
    """Raised when operation parameters fail schema validation."""

    code = INVALID_PARAMS

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid params: {field}: {reason}",
            data={"field": field, "reason": reason},
        )
        self.field = field
        self.reason = reason


class MethodNotAllowedError(Context7MCPError):
    """Raised for HTTP verbs the MCP endpoint does not accept."""

    code = METHOD_NOT_ALLOWED

    def __init__(self, method: str | None = None):
        super().__init__("Method not allowed.")
        self.method = method


class InternalError(Context7MCPError):
    """Generic fault surfaced to callers without internal details."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class ServerSetupError(Context7MCPError):
    """Raised when the registry cannot be connected to the transport."""


class LibraryNotFoundError(Context7MCPError):
    """Raised by a documentation backend when a library cannot be resolved."""

    def __init__(self, library_name: str):
        super().__init__(
            f"No library found matching '{library_name}'",
            data={"libraryName": library_name},
        )
        self.library_name = library_name
