"""
MCP server wiring and transports.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call over
stdio, or over streamable HTTP behind the bearer-token middleware.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from . import __version__
from .auth import BearerAuthMiddleware
from .client.google_client import GoogleCalendarClient
from .config import Settings
from .handlers import dispatch_tool
from .helpers import ToolExecutionError
from .state.store import set_client
from .tools import ALL_TOOLS

log = logging.getLogger("gcal_mcp.server")

SERVER_NAME = "Google Calendar"
METADATA_PATH = "/.well-known/oauth-protected-resource"


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server: Server = Server(SERVER_NAME, version=__version__)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  # Arguments are checked by the pydantic models in gcal_mcp.validation.
  @server.call_tool(validate_input=False)
  async def call_tool(
    name: str, arguments: dict[str, Any] | None
  ) -> list[TextContent] | tuple[list[TextContent], dict[str, Any]]:
    result = await dispatch_tool(name, arguments or {})
    if result.is_error:
      raise ToolExecutionError(result.text)
    content = [TextContent(type="text", text=result.text)]
    if result.data is None:
      return content
    return content, result.data

  return server


def init_client(settings: Settings) -> GoogleCalendarClient:
  """Build the Google client from settings and install it in the state store."""
  try:
    client = GoogleCalendarClient(credentials_data=settings.google_credentials())
  except Exception as e:
    log.error("Failed to initialize Google Calendar client: %s", e)
    raise

  set_client(client)
  log.info("Google Calendar client initialized")
  return client


async def run_stdio(server: Server) -> None:
  async with stdio_server() as (read_stream, write_stream):
    await server.run(read_stream, write_stream, server.create_initialization_options())


async def protected_resource_metadata(request: Request) -> Response:
  """OAuth protected-resource metadata; bearer tokens are issued out of band."""
  headers = {"Access-Control-Allow-Origin": "*", "Access-Control-Allow-Methods": "GET, OPTIONS"}
  if request.method == "OPTIONS":
    return Response(status_code=204, headers=headers)
  resource = f"{request.url.scheme}://{request.url.netloc}"
  return JSONResponse(
    {"resource": resource, "authorization_servers": [], "bearer_methods_supported": ["header"]},
    headers=headers,
  )


def create_http_app(server: Server, auth_secret: str) -> Starlette:
  """Starlette app serving MCP at /mcp behind the bearer token.

  The protected-resource metadata stays reachable without a token.
  """
  session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

  async def handle_mcp(scope: Scope, receive: Receive, send: Send) -> None:
    await session_manager.handle_request(scope, receive, send)

  @contextlib.asynccontextmanager
  async def lifespan(app: Starlette) -> AsyncIterator[None]:
    async with session_manager.run():
      yield

  return Starlette(
    routes=[
      Route(METADATA_PATH, protected_resource_metadata, methods=["GET", "OPTIONS"]),
      Mount("/mcp", app=BearerAuthMiddleware(handle_mcp, secret=auth_secret)),
    ],
    lifespan=lifespan,
  )


async def run_http(server: Server, settings: Settings) -> None:
  import uvicorn

  if not settings.auth_secret:
    log.warning("MCP_AUTH_SECRET is not set; every HTTP request will be refused")

  app = create_http_app(server, settings.auth_secret)
  config = uvicorn.Config(
    app,
    host=settings.host,
    port=settings.port,
    log_level=settings.log_level.lower(),
  )
  log.info("Serving MCP over HTTP on %s:%s/mcp", settings.host, settings.port)
  await uvicorn.Server(config).serve()
