"""Error responses and the last-resort error middleware for the MCP endpoint."""

import logging

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from context7_mcp.mcp_server.errors import InternalError, MethodNotAllowedError
from context7_mcp.models.api.jsonrpc import error_envelope

logger = logging.getLogger(__name__)


def internal_error_response() -> JSONResponse:
    """500 with the generic internal-error envelope and a null id."""
    error = InternalError()
    return JSONResponse(
        status_code=500, content=error_envelope(error.code, error.message)
    )


def method_not_allowed_response() -> JSONResponse:
    """405 with the method-not-allowed envelope and a null id."""
    error = MethodNotAllowedError()
    return JSONResponse(
        status_code=405,
        content=error_envelope(error.code, error.message),
        headers={"Allow": "POST"},
    )


class JSONRPCErrorMiddleware:
    """Turn faults escaping the app into an internal-error envelope.

    The envelope is only sent when no response has started yet; otherwise
    the fault is logged and the partial response is left as it is.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            if response_started:
                logger.error(
                    f"Error after response started, not re-sending: {e}", exc_info=True
                )
                return
            logger.error(f"Unhandled exception: {e}", exc_info=True)
            await internal_error_response()(scope, receive, send)
