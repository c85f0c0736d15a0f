"""
Free/busy API layer.
"""

from __future__ import annotations

from typing import Any

from ..state.store import require_client


async def query_freebusy(
  calendar_ids: list[str],
  time_min: str,
  time_max: str,
  time_zone: str,
) -> dict[str, dict[str, Any]]:
  """One batched query for every calendar id; keyed by calendar id."""
  return await require_client().query_freebusy(calendar_ids, time_min, time_max, time_zone)
