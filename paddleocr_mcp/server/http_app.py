"""Streamable HTTP front end: one ``paddle-ocr`` tool taking a ``fileUrl``.

Clients may override the OCR endpoint per session with the ``x-api-url`` and
``x-token`` headers on the initialize request. The overrides are kept in a
SessionRegistry owned by the app and dropped when the session is deleted.
A client that disconnects without sending DELETE keeps its entry until the
process exits.
"""

import contextlib
from collections.abc import AsyncIterator
from typing import Any

import httpx
import uvicorn
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.datastructures import Headers
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from paddleocr_mcp.config.settings import Settings
from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.ocr.models import ApiCredentials
from paddleocr_mcp.processor.processor import Processor, build_http_client, build_processor
from paddleocr_mcp.server.sessions import SessionRegistry
from paddleocr_mcp.server.tools import SOURCE_URL, CredentialsProvider, create_server

MCP_PATH = "/mcp"
MCP_SESSION_ID_HEADER = "mcp-session-id"
API_URL_HEADER = "x-api-url"
TOKEN_HEADER = "x-token"


def credentials_from_headers(headers: Headers) -> ApiCredentials:
    return ApiCredentials(
        api_url=headers.get(API_URL_HEADER, ""),
        token=headers.get(TOKEN_HEADER, ""),
    )


def session_credentials(
    registry: SessionRegistry,
    defaults: ApiCredentials,
) -> CredentialsProvider:
    """Resolve credentials: session overrides, then request headers, then settings."""

    def provide(request: Any) -> ApiCredentials:
        if request is None:
            return defaults
        headers = request.headers
        overrides = registry.lookup(headers.get(MCP_SESSION_ID_HEADER))
        if overrides is None:
            overrides = credentials_from_headers(headers)
        return overrides.merged_with(defaults)

    return provide


class SessionCredentialsMiddleware:
    """Registers header credentials for new sessions and evicts deleted ones.

    Eviction happens only on an explicit DELETE.
    """

    def __init__(self, app: ASGIApp, registry: SessionRegistry) -> None:
        self.app = app
        self.registry = registry

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        session_id = Headers(scope=scope).get(MCP_SESSION_ID_HEADER)
        if session_id is None:
            await self.app(scope, receive, self._capturing_send(scope, send))
            return

        await self.app(scope, receive, send)
        if scope["method"] == "DELETE":
            self.registry.evict(session_id)

    def _capturing_send(self, scope: Scope, send: Send) -> Send:
        credentials = credentials_from_headers(Headers(scope=scope))

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                assigned = Headers(raw=message.get("headers", [])).get(MCP_SESSION_ID_HEADER)
                if assigned and assigned not in self.registry:
                    self.registry.create(assigned, credentials)
            await send(message)

        return send_wrapper


class StreamableHTTPEndpoint:
    """ASGI adapter so Starlette routes requests straight to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._session_manager.handle_request(scope, receive, send)


def create_http_app(
    processor: Processor,
    settings: Settings,
    registry: SessionRegistry | None = None,
    client: httpx.AsyncClient | None = None,
) -> Starlette:
    """Build the Starlette app serving MCP over streamable HTTP at ``/mcp``.

    ``client`` is closed when the app shuts down.
    """
    registry = registry if registry is not None else SessionRegistry()
    server = create_server(
        processor,
        source=SOURCE_URL,
        credentials=session_credentials(registry, settings.credentials()),
    )
    session_manager = StreamableHTTPSessionManager(
        app=server,
        event_store=None,
        json_response=False,
        stateless=False,
    )

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        Log.info("Starting StreamableHTTP session manager")
        try:
            async with session_manager.run():
                yield
        finally:
            if client is not None:
                await client.aclose()
            Log.info("StreamableHTTP session manager stopped")

    return Starlette(
        debug=False,
        routes=[
            Route(
                MCP_PATH,
                endpoint=StreamableHTTPEndpoint(session_manager),
                methods=["GET", "POST", "DELETE"],
            )
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET", "POST", "DELETE"],
                allow_headers=["*"],
                expose_headers=["Mcp-Session-Id"],
            ),
            Middleware(SessionCredentialsMiddleware, registry=registry),
        ],
        lifespan=lifespan,
    )


async def run_http(settings: Settings) -> None:
    client = build_http_client(settings)
    processor = build_processor(settings, client)
    app = create_http_app(processor, settings, client=client)
    Log.info(f"MCP server listening on {settings.http_host}:{settings.http_port}")
    config = uvicorn.Config(
        app,
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )
    await uvicorn.Server(config).serve()
