"""
Shared response envelope, formatting and error handling helpers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .client.provider import ProviderError
from .models import CalendarEvent, CalendarFreeBusy, CalendarListEntry

log = logging.getLogger("gcal_mcp.helpers")

UNAUTHORIZED_MESSAGE = "Unauthorized - check your Google Calendar permissions"


# ---------------------------------------------------------------------------
# Tool response
# ---------------------------------------------------------------------------


@dataclass
class ToolResponse:
  """Envelope returned by every tool: a text summary plus optional data."""

  text: str
  data: dict[str, Any] | None = None
  is_error: bool = False


class ToolExecutionError(RuntimeError):
  """Unclassified failure; surfaced by the transport as a failed tool call."""


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_event_line(event: CalendarEvent) -> str:
  """Format a single event as a summary line."""
  start = event.start or "No start time"
  return f"{start} → {event.summary} (ID: {event.id or 'no-id'})"


def format_calendar(calendar: CalendarListEntry) -> str:
  """Format calendar info as a bullet."""
  primary = " (Primary)" if calendar.primary else ""
  description = f" - {calendar.description}" if calendar.description else ""
  access_role = f" [{calendar.access_role}]" if calendar.access_role else ""
  return f"• {calendar.id}{primary}\n  {calendar.summary}{description}{access_role}"


def format_busy_calendar(entry: CalendarFreeBusy) -> str:
  if not entry.busy:
    return f"{entry.calendar_id}:\n  • Free (no busy times)"
  times = "\n".join(f"  • {interval.start} → {interval.end}" for interval in entry.busy)
  return f"{entry.calendar_id}:\n{times}"


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  CALENDAR = "CALENDAR"
  EVENT = "EVENT"
  FREEBUSY = "FREEBUSY"


class ErrorKind(str, Enum):
  NOT_FOUND = "not_found"
  UNAUTHORIZED = "unauthorized"
  MALFORMED = "malformed"
  FATAL = "fatal"


def classify_provider_error(error: ProviderError, *, allow_malformed: bool = False) -> ErrorKind:
  """Map a provider status code onto the tool-level outcome."""
  if error.code == 404:
    return ErrorKind.NOT_FOUND
  if error.code in (401, 403):
    return ErrorKind.UNAUTHORIZED
  if error.code == 400 and allow_malformed:
    return ErrorKind.MALFORMED
  return ErrorKind.FATAL


def error_code(function_name: str, category: ErrorCategory) -> str:
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{category.value}-ERR-{hash_val:03d}"


def handle_provider_error(
  function_name: str,
  error: ProviderError,
  category: ErrorCategory,
  *,
  action: str,
  not_found: str | None = None,
  allow_malformed: bool = False,
) -> ToolResponse:
  """Fold expected provider failures into a response; raise the rest.

  ``action`` completes "Failed to ..." in the fatal message. ``not_found``
  is the text returned for a 404; without it a 404 is fatal too.
  """
  kind = classify_provider_error(error, allow_malformed=allow_malformed)
  if kind is ErrorKind.NOT_FOUND and not_found is not None:
    log.info("%s: not found (%s)", function_name, error.message)
    return ToolResponse(text=not_found)
  if kind is ErrorKind.UNAUTHORIZED:
    log.warning("%s: provider refused access (%s)", function_name, error.code)
    return ToolResponse(text=UNAUTHORIZED_MESSAGE)
  if kind is ErrorKind.MALFORMED:
    log.info("%s: bad request (%s)", function_name, error.message)
    return ToolResponse(
      text=f"Bad request - check your date formats and calendar IDs: {error.message}"
    )

  code = error_code(function_name, category)
  log.error("[MCP] Error in %s - Code: %s - %s", function_name, code, error)
  raise ToolExecutionError(f"Failed to {action}: {error.message}") from error
