"""
Bearer-token authentication for the HTTP transport.

Every inbound HTTP request must carry ``Authorization: Bearer <secret>``
matching MCP_AUTH_SECRET before any tool runs. With no secret configured
all requests are refused.
"""

from __future__ import annotations

import hmac
import logging

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

log = logging.getLogger("gcal_mcp.auth")


def bearer_token(authorization: str | None) -> str | None:
  """Extract the token from an Authorization header value."""
  if not authorization:
    return None
  scheme, _, token = authorization.partition(" ")
  if scheme.lower() != "bearer" or not token.strip():
    return None
  return token.strip()


def is_authorized(credential: str | None, secret: str | None) -> bool:
  if not secret or not credential:
    return False
  return hmac.compare_digest(credential.encode(), secret.encode())


class BearerAuthMiddleware:
  """ASGI middleware rejecting HTTP requests without the shared bearer token."""

  def __init__(self, app: ASGIApp, secret: str) -> None:
    self.app = app
    self.secret = secret

  async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
    if scope["type"] != "http":
      await self.app(scope, receive, send)
      return

    token = bearer_token(Headers(scope=scope).get("authorization"))
    if not is_authorized(token, self.secret):
      log.warning("Rejected unauthenticated request to %s", scope.get("path", ""))
      response = JSONResponse(
        {"error": "invalid_token", "error_description": "Missing or invalid bearer token"},
        status_code=401,
        headers={"WWW-Authenticate": 'Bearer error="invalid_token"'},
      )
      await response(scope, receive, send)
      return

    await self.app(scope, receive, send)
