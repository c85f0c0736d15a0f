"""
Environment-driven server configuration.

Google credentials come either from a JSON file of authorized-user info
(``GOOGLE_CREDENTIALS_FILE``) or from the individual OAuth variables.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class ConfigError(Exception):
  """Raised when required configuration is missing or malformed."""


TRANSPORTS = ("stdio", "http")


@dataclass(frozen=True)
class Settings:
  google_client_id: str = ""
  google_client_secret: str = ""
  google_refresh_token: str = ""
  google_credentials_file: str = ""
  auth_secret: str = ""
  transport: str = "stdio"
  host: str = "127.0.0.1"
  port: int = 8000
  log_level: str = "INFO"

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    transport = env.get("MCP_TRANSPORT", "stdio").strip().lower() or "stdio"
    if transport not in TRANSPORTS:
      raise ConfigError(f"Unsupported MCP_TRANSPORT: {transport} (expected one of {TRANSPORTS})")

    raw_port = env.get("MCP_PORT", "8000").strip() or "8000"
    if not raw_port.isdigit():
      raise ConfigError(f"MCP_PORT must be a number, got {raw_port!r}")

    return cls(
      google_client_id=env.get("GOOGLE_CLIENT_ID", ""),
      google_client_secret=env.get("GOOGLE_CLIENT_SECRET", ""),
      google_refresh_token=env.get("GOOGLE_REFRESH_TOKEN", ""),
      google_credentials_file=env.get("GOOGLE_CREDENTIALS_FILE", ""),
      auth_secret=env.get("MCP_AUTH_SECRET", ""),
      transport=transport,
      host=env.get("MCP_HOST", "127.0.0.1"),
      port=int(raw_port),
      log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )

  def google_credentials(self) -> dict[str, Any]:
    """Authorized-user info for the Google client."""
    if self.google_credentials_file:
      path = Path(self.google_credentials_file)
      try:
        data = json.loads(path.read_text())
      except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read Google credentials from {path}: {e}") from e
      # Accept both a bare authorized-user dict and {"credentials": {...}}
      if isinstance(data, dict) and isinstance(data.get("credentials"), dict):
        data = data["credentials"]
      if not isinstance(data, dict):
        raise ConfigError(f"Google credentials in {path} must be a JSON object")
      return data

    if not (self.google_client_id and self.google_client_secret and self.google_refresh_token):
      raise ConfigError(
        "Missing Google OAuth environment variables "
        "(GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, GOOGLE_REFRESH_TOKEN)"
      )
    return {
      "client_id": self.google_client_id,
      "client_secret": self.google_client_secret,
      "refresh_token": self.google_refresh_token,
    }
