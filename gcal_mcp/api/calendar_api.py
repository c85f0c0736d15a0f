"""
Calendar API layer.
"""

from __future__ import annotations

from typing import Any

from ..state.store import require_client


async def list_calendars() -> list[dict[str, Any]]:
  """List calendars visible to the authenticated identity."""
  return await require_client().list_calendars()


async def get_calendar(calendar_id: str) -> dict[str, Any]:
  """Get calendar metadata (including its configured timeZone)."""
  return await require_client().get_calendar(calendar_id)
