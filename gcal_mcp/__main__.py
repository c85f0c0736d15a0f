"""
Entry point for the Google Calendar MCP server.

Run with: python -m gcal_mcp          (stdio; MCP_TRANSPORT=http for HTTP)
"""

from __future__ import annotations

import asyncio
import logging
import sys

log = logging.getLogger("gcal_mcp")


def main() -> None:
  from .config import ConfigError, Settings
  from .server import create_mcp_server, init_client, run_http, run_stdio

  try:
    settings = Settings.from_env()
  except ConfigError as e:
    print(f"Configuration error: {e}", file=sys.stderr)
    sys.exit(2)

  # stdout carries the stdio transport, so logs go to stderr
  logging.basicConfig(
    level=settings.log_level,
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )

  try:
    init_client(settings)
  except (ConfigError, ValueError) as e:
    log.error("Configuration error: %s", e)
    sys.exit(2)

  server = create_mcp_server()
  if settings.transport == "http":
    asyncio.run(run_http(server, settings))
  else:
    asyncio.run(run_stdio(server))


if __name__ == "__main__":
  main()
