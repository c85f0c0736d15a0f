"""
Default resolution for calendar identity and timezone.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from .api import calendar_api
from .validation import parse_datetime

log = logging.getLogger("gcal_mcp.defaults")

DEFAULT_CALENDAR_ID = "primary"
DEFAULT_TIME_ZONE = "UTC"
DEFAULT_LIST_WINDOW = timedelta(days=30)


def resolve_calendar_id(calendar_id: str | None = None) -> str:
  return calendar_id or DEFAULT_CALENDAR_ID


async def resolve_time_zone(calendar_id: str, time_zone: str | None = None) -> str:
  """Return ``time_zone`` if given, else the calendar's configured zone.

  Costs one provider call when ``time_zone`` is missing; provider errors
  propagate to the calling tool.
  """
  if time_zone:
    return time_zone

  calendar = await calendar_api.get_calendar(calendar_id)
  resolved = calendar.get("timeZone") or DEFAULT_TIME_ZONE
  log.debug("Resolved timezone for %s: %s", calendar_id, resolved)
  return resolved


def to_rfc3339(value: datetime) -> str:
  """UTC instant in the ``...T...Z`` form the Calendar API expects."""
  return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_window(
  start: str | None,
  end: str | None,
  now: datetime | None = None,
) -> tuple[str, str]:
  """Fill a missing list window: start defaults to now, end to start + 30 days."""
  if start is None:
    start_dt = now or datetime.now(timezone.utc)
    start = to_rfc3339(start_dt)
  else:
    start_dt = parse_datetime(start)
  if end is None:
    end_dt = start_dt + DEFAULT_LIST_WINDOW
    end = to_rfc3339(end_dt) if end_dt.tzinfo else end_dt.isoformat()
  return start, end
