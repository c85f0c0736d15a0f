"""
Tool dispatch: routes tool names to handler functions.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..helpers import ToolResponse
from ..validation import ValidationError
from .calendar import list_calendars
from .event import create_event, delete_event, list_events, search_events, update_event
from .freebusy import get_freebusy
from .utility import get_current_time

log = logging.getLogger("gcal_mcp.handlers")

Handler = Callable[[dict[str, Any]], Awaitable[ToolResponse]]

# Map tool names to handler functions
HANDLERS: dict[str, Handler] = {
  # Calendar tools
  "list_calendars": list_calendars,
  # Event tools
  "list_events": list_events,
  "search_events": search_events,
  "create_event": create_event,
  "update_event": update_event,
  "delete_event": delete_event,
  # Free/busy tools
  "get_freebusy": get_freebusy,
  # Utility tools
  "get_current_time": get_current_time,
}

# Legacy names kept for existing clients
TOOL_ALIASES: dict[str, str] = {
  "edit_event": "update_event",
}


def resolve_tool_name(tool_name: str) -> str:
  return TOOL_ALIASES.get(tool_name, tool_name)


async def dispatch_tool(tool_name: str, args: dict[str, Any]) -> ToolResponse:
  """Dispatch a tool call to the appropriate handler.

  Validation failures come back as error responses. Provider failures the
  handler could not classify propagate as ToolExecutionError.
  """
  handler = HANDLERS.get(resolve_tool_name(tool_name))
  if not handler:
    log.error("Unknown tool: %s", tool_name)
    return ToolResponse(text=f"Unknown tool: {tool_name}", is_error=True)

  try:
    return await handler(args)
  except ValidationError as e:
    log.info("Rejected %s arguments: %s", tool_name, e)
    return ToolResponse(text=str(e), is_error=True)
