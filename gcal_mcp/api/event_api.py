"""
Event API layer.
"""

from __future__ import annotations

from typing import Any

from ..state.store import require_client


async def list_events(
  calendar_id: str,
  time_min: str | None = None,
  time_max: str | None = None,
  max_results: int | None = None,
  time_zone: str | None = None,
) -> list[dict[str, Any]]:
  """List single-instance events in a window, ordered by start time."""
  return await require_client().list_events(
    calendar_id,
    time_min=time_min,
    time_max=time_max,
    max_results=max_results,
    time_zone=time_zone,
  )


async def search_events(
  calendar_id: str,
  query: str,
  max_results: int | None = None,
  time_zone: str | None = None,
) -> list[dict[str, Any]]:
  """Full-text search over events."""
  return await require_client().search_events(
    calendar_id,
    query,
    max_results=max_results,
    time_zone=time_zone,
  )


async def insert_event(calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
  return await require_client().insert_event(calendar_id, body)


async def patch_event(calendar_id: str, event_id: str, body: dict[str, Any]) -> dict[str, Any]:
  return await require_client().patch_event(calendar_id, event_id, body)


async def delete_event(calendar_id: str, event_id: str) -> None:
  await require_client().delete_event(calendar_id, event_id)
