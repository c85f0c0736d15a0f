"""
Calendar management tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import calendar_api
from ..client.provider import ProviderError
from ..helpers import ErrorCategory, ToolResponse, format_calendar, handle_provider_error
from ..models import CalendarListEntry


async def list_calendars(args: dict[str, Any]) -> ToolResponse:
  try:
    raw = await calendar_api.list_calendars()
  except ProviderError as e:
    return handle_provider_error(
      "list_calendars", e, ErrorCategory.CALENDAR, action="list calendars"
    )

  calendars = [CalendarListEntry.from_api(cal) for cal in raw]
  if not calendars:
    return ToolResponse(text="No calendars found in your account.", data={"calendars": []})

  lines = [format_calendar(cal) for cal in calendars]
  text = f"Found {len(calendars)} calendars:\n\n" + "\n\n".join(lines)
  return ToolResponse(text=text, data={"calendars": [cal.dump() for cal in calendars]})
