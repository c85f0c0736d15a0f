"""
Utility tool handlers.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..defaults import DEFAULT_TIME_ZONE, to_rfc3339
from ..helpers import ToolResponse

LOCALTIME_PATH = Path("/etc/localtime")


def _zone_from_file(path: Path) -> str:
  """IANA name from a tzfile path, following links into a zoneinfo tree."""
  try:
    target = str(path.resolve())
  except OSError:
    return DEFAULT_TIME_ZONE
  marker = "zoneinfo/"
  if marker in target:
    return target.split(marker, 1)[1]
  return DEFAULT_TIME_ZONE


def local_zone_name() -> str:
  """Best-effort IANA name of the process's local timezone."""
  tz = os.environ.get("TZ", "").lstrip(":")
  if tz.startswith("/"):
    return _zone_from_file(Path(tz))
  if tz:
    return tz
  return _zone_from_file(LOCALTIME_PATH)


async def get_current_time(args: dict[str, Any]) -> ToolResponse:
  iso = to_rfc3339(datetime.now(timezone.utc))
  zone = local_zone_name()
  return ToolResponse(text=f"Current time: {iso} ({zone})", data={"iso": iso, "timeZone": zone})
