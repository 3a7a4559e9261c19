"""JSON-RPC error bodies the HTTP layer sends on its own.

Everything else on the wire is produced by the MCP SDK; only the
method-not-allowed code has no counterpart in ``mcp.types``.
"""

from typing import Any

import mcp.types as types

# Server-defined range, implementation-defined band
METHOD_NOT_ALLOWED = -32000


def error_envelope(code: int, message: str, data: Any = None) -> dict[str, Any]:
    """Build an error envelope with a null id as a plain dict."""
    error = types.ErrorData(code=code, message=message, data=data)
    envelope = types.JSONRPCError(jsonrpc="2.0", id=None, error=error)
    body = envelope.model_dump(by_alias=True, mode="json")
    if data is None:
        body["error"].pop("data", None)
    return body


__all__ = ["METHOD_NOT_ALLOWED", "error_envelope"]
