"""
Free/busy tool handler.

All calendar ids go to the provider in one batched query. Each id then
gets its own outcome, so one inaccessible calendar never hides the
answers for the others.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from ..api import freebusy_api
from ..client.provider import ProviderError
from ..helpers import ErrorCategory, ToolResponse, format_busy_calendar, handle_provider_error
from ..models import CalendarFreeBusy, FreeBusyInterval
from ..validation import GetFreebusyParams, parse_params

MAX_FREEBUSY_CALENDARS = 50

NOT_FOUND_REASON = "Calendar not found or inaccessible"


@dataclass(frozen=True)
class FreeBusyOutcome:
  """Result for one calendar id: ok with intervals, not_found, or error."""

  calendar_id: str
  status: Literal["ok", "not_found", "error"]
  busy: list[FreeBusyInterval] = field(default_factory=list)
  reason: str | None = None

  @property
  def ok(self) -> bool:
    return self.status == "ok"

  def render(self) -> str:
    if self.ok:
      return format_busy_calendar(CalendarFreeBusy(calendar_id=self.calendar_id, busy=self.busy))
    return f"{self.calendar_id}:\n  • Error: {self.reason}"


def classify_freebusy(
  calendar_ids: list[str], calendars: dict[str, dict[str, Any]]
) -> list[FreeBusyOutcome]:
  """Turn the provider's per-calendar map into one outcome per requested id."""
  outcomes: list[FreeBusyOutcome] = []
  for calendar_id in calendar_ids:
    entry = calendars.get(calendar_id)
    if entry is None:
      outcomes.append(FreeBusyOutcome(calendar_id, "not_found", reason=NOT_FOUND_REASON))
      continue

    errors = entry.get("errors") or []
    if errors:
      reason = ", ".join(str(err.get("reason", "unknown")) for err in errors)
      outcomes.append(FreeBusyOutcome(calendar_id, "error", reason=reason))
      continue

    busy = [
      FreeBusyInterval(start=b.get("start", ""), end=b.get("end", ""))
      for b in entry.get("busy") or []
    ]
    outcomes.append(FreeBusyOutcome(calendar_id, "ok", busy=busy))
  return outcomes


def _empty_data(params: GetFreebusyParams) -> dict[str, Any]:
  return {
    "range": {"start": params.start, "end": params.end},
    "timeZone": params.time_zone,
    "calendars": [],
    "errors": [],
  }


async def get_freebusy(args: dict[str, Any]) -> ToolResponse:
  params = parse_params(GetFreebusyParams, args)
  calendar_ids = params.calendar_id_list()

  if not calendar_ids:
    return ToolResponse(text="Error: No valid calendar IDs provided.", data=_empty_data(params))
  if len(calendar_ids) > MAX_FREEBUSY_CALENDARS:
    return ToolResponse(
      text=f"Error: Too many calendar IDs (max {MAX_FREEBUSY_CALENDARS}).",
      data=_empty_data(params),
    )

  try:
    calendars = await freebusy_api.query_freebusy(
      calendar_ids, params.start, params.end, params.time_zone
    )
  except ProviderError as e:
    return handle_provider_error(
      "get_freebusy",
      e,
      ErrorCategory.FREEBUSY,
      action="get free/busy information",
      allow_malformed=True,
    )

  outcomes = classify_freebusy(calendar_ids, calendars)
  successful = [o for o in outcomes if o.ok]

  text = f"Free/busy information from {params.start} to {params.end} ({params.time_zone}):\n\n"
  text += "\n\n".join(o.render() for o in outcomes)
  text += f"\n\nSummary: Successfully queried {len(successful)}/{len(outcomes)} calendars."

  data = {
    "range": {"start": params.start, "end": params.end},
    "timeZone": params.time_zone,
    "calendars": [
      CalendarFreeBusy(calendar_id=o.calendar_id, busy=o.busy).dump() for o in successful
    ],
    "errors": [{"calendarId": o.calendar_id, "reason": o.reason} for o in outcomes if not o.ok],
  }
  return ToolResponse(text=text, data=data)
