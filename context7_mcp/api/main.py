"""FastAPI application exposing the MCP endpoint over HTTP."""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

import mcp.types as types
from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from pydantic import ValidationError as PydanticValidationError
from starlette.routing import Route
from starlette.types import Message, Receive, Scope, Send

from context7_mcp.api.error_handlers import (
    JSONRPCErrorMiddleware,
    internal_error_response,
    method_not_allowed_response,
)
from context7_mcp.core.logging import get_logger
from context7_mcp.mcp_server.dispatcher import MCPDispatcher
from context7_mcp.mcp_server.errors import ServerSetupError
from context7_mcp.mcp_server.registry import OperationRegistry
from context7_mcp.models.api.system import HealthResponse
from context7_mcp.models.config.server import ServerSettings

logger = get_logger(__name__)


class MalformedRequestError(ValueError):
    """Raised when a request body is not a usable JSON-RPC message."""


class MCPTransport:
    """ASGI endpoint in front of the SDK session manager.

    Verbs other than POST and bodies that are not a single JSON-RPC message
    are answered here. Everything else is handed to the session manager,
    which runs statelessly: no session is issued or tracked.
    """

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["method"] != "POST":
            logger.info(f"Received {scope['method']} MCP request")
            await method_not_allowed_response()(scope, receive, send)
            return

        body = await self._read_body(receive)
        logger.info("Received MCP request", bytes=len(body))
        try:
            self.decode(body)
        except MalformedRequestError as e:
            logger.warning(f"Rejected MCP request: {e}")
            await internal_error_response()(scope, receive, send)
            return

        await self.session_manager.handle_request(
            scope, self._replay(body, receive), self._fault_status(send)
        )

    @staticmethod
    def decode(body: bytes) -> types.JSONRPCMessage:
        """Parse a body into exactly one JSON-RPC message.

        Raises:
            MalformedRequestError: On invalid JSON, a batch or an invalid envelope
        """
        try:
            payload = json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedRequestError(f"Invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise MalformedRequestError("Request must be a single JSON object")
        try:
            message = types.jsonrpc_message_adapter.validate_python(payload)
        except PydanticValidationError as e:
            raise MalformedRequestError(f"Invalid request envelope: {e}") from e

        # An id that is neither a string nor an integer leaves a notification
        if "id" in payload and isinstance(message, types.JSONRPCNotification):
            raise MalformedRequestError(f"Invalid request id: {payload['id']!r}")
        return message

    @staticmethod
    async def _read_body(receive: Receive) -> bytes:
        chunks = []
        while True:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    @staticmethod
    def _replay(body: bytes, receive: Receive) -> Receive:
        sent = False

        async def replay() -> Message:
            nonlocal sent
            if not sent:
                sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        return replay

    @staticmethod
    def _fault_status(send: Send) -> Send:
        """Give replies carrying INTERNAL_ERROR a 500 status.

        The start message is held back until the first body chunk shows
        whether the reply is an internal-error envelope.
        """
        start: Message | None = None

        async def fault_status(message: Message) -> None:
            nonlocal start
            if message["type"] == "http.response.start":
                start = message
                return
            if start is not None:
                if _is_internal_error(message.get("body", b"")):
                    start = {**start, "status": 500}
                await send(start)
                start = None
            await send(message)

        return fault_status


def _is_internal_error(body: bytes) -> bool:
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return False
    if not isinstance(payload, dict) or not isinstance(payload.get("error"), dict):
        return False
    return payload["error"].get("code") == types.INTERNAL_ERROR


def create_app(
    registry: OperationRegistry, settings: ServerSettings | None = None
) -> FastAPI:
    """Connect a registry to a new HTTP application.

    The registry is frozen here; it must already hold every operation. The
    session manager only serves while the app's lifespan is running.

    Raises:
        ServerSetupError: If the registry has no operations to serve
    """
    settings = settings or ServerSettings()

    if len(registry) == 0:
        raise ServerSetupError("Registry has no operations to serve")
    registry.freeze()

    dispatcher = MCPDispatcher(
        registry,
        server_name=settings.server_name,
        server_version=settings.server_version,
    )
    session_manager = StreamableHTTPSessionManager(
        app=dispatcher.server,
        json_response=True,
        stateless=True,
    )
    transport = MCPTransport(session_manager)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info("MCP session manager started", path=settings.path)
            yield
        logger.info("MCP session manager stopped")

    app = FastAPI(
        title="Context7 MCP Server",
        description="Documentation lookup tools over the Model Context Protocol",
        version=settings.server_version,
        lifespan=lifespan,
    )
    app.add_middleware(JSONRPCErrorMiddleware)
    app.state.settings = settings
    app.state.registry = registry
    app.state.dispatcher = dispatcher
    app.state.transport = transport

    # Mounted as a raw ASGI endpoint so every verb reaches the transport
    app.router.routes.append(Route(settings.path, endpoint=transport))

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            timestamp=datetime.now(),
            version=settings.server_version,
            operations=[descriptor.name for descriptor in registry.descriptors()],
        )

    logger.info(
        "Registry connected to transport",
        path=settings.path,
        operations=len(registry),
    )
    return app
