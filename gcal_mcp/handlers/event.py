"""
Event management tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import event_api
from ..client.provider import ProviderError
from ..defaults import resolve_calendar_id, resolve_time_zone, resolve_window
from ..helpers import (
  ErrorCategory,
  ToolResponse,
  format_event_line,
  handle_provider_error,
)
from ..models import CalendarEvent
from ..validation import (
  CreateEventParams,
  DeleteEventParams,
  ListEventsParams,
  SearchEventsParams,
  UpdateEventParams,
  parse_params,
)


def _event_list_text(header: str, events: list[CalendarEvent]) -> str:
  return f"{header}:\n\n" + "\n".join(format_event_line(event) for event in events)


def _attendee_body(emails: list[str] | None) -> list[dict[str, str]]:
  return [{"email": email} for email in emails or []]


async def list_events(args: dict[str, Any]) -> ToolResponse:
  params = parse_params(ListEventsParams, args)
  calendar_id = resolve_calendar_id(params.calendar_id)
  time_min, time_max = resolve_window(params.start, params.end)

  try:
    time_zone = await resolve_time_zone(calendar_id, params.time_zone)
    raw = await event_api.list_events(
      calendar_id,
      time_min=time_min,
      time_max=time_max,
      max_results=params.max_results,
      time_zone=time_zone,
    )
  except ProviderError as e:
    return handle_provider_error(
      "list_events",
      e,
      ErrorCategory.EVENT,
      action="list events",
      not_found=f"Calendar not found: {calendar_id}",
    )

  events = [CalendarEvent.from_api(event) for event in raw]
  data = {
    "calendarId": calendar_id,
    "timeZone": time_zone,
    "range": {"start": time_min, "end": time_max},
    "events": [event.dump() for event in events],
  }
  if not events:
    text = f"No events found in calendar '{calendar_id}' from {time_min} to {time_max}"
  else:
    text = _event_list_text(f"Found {len(events)} events in calendar '{calendar_id}'", events)
  return ToolResponse(text=text, data=data)


async def search_events(args: dict[str, Any]) -> ToolResponse:
  params = parse_params(SearchEventsParams, args)
  calendar_id = resolve_calendar_id(params.calendar_id)
  query = params.query

  try:
    time_zone = await resolve_time_zone(calendar_id, params.time_zone)
    raw = await event_api.search_events(
      calendar_id,
      query,
      max_results=params.max_results,
      time_zone=time_zone,
    )
  except ProviderError as e:
    return handle_provider_error(
      "search_events",
      e,
      ErrorCategory.EVENT,
      action="search events",
      not_found=f"Calendar not found: {calendar_id}",
    )

  events = [CalendarEvent.from_api(event) for event in raw]
  data = {
    "calendarId": calendar_id,
    "query": query,
    "timeZone": time_zone,
    "events": [event.dump() for event in events],
  }
  if not events:
    text = f'No events found matching query "{query}" in calendar \'{calendar_id}\''
  else:
    text = _event_list_text(
      f'Found {len(events)} events matching "{query}" in calendar \'{calendar_id}\'', events
    )
  return ToolResponse(text=text, data=data)


async def create_event(args: dict[str, Any]) -> ToolResponse:
  params = parse_params(CreateEventParams, args)
  calendar_id = resolve_calendar_id(params.calendar_id)

  try:
    time_zone = await resolve_time_zone(calendar_id, params.time_zone)
    body: dict[str, Any] = {
      "summary": params.summary,
      "start": {"dateTime": params.start, "timeZone": time_zone},
      "end": {"dateTime": params.end, "timeZone": time_zone},
    }
    if params.description is not None:
      body["description"] = params.description
    if params.attendees:
      body["attendees"] = _attendee_body(params.attendees)

    raw = await event_api.insert_event(calendar_id, body)
  except ProviderError as e:
    return handle_provider_error(
      "create_event",
      e,
      ErrorCategory.EVENT,
      action="create event",
      not_found=f"Calendar not found: {calendar_id}",
    )

  event = CalendarEvent.from_api(raw)
  link = event.link or event.id or "unknown"
  text = f'Event created successfully: "{params.summary}"\nEvent link: {link}'
  return ToolResponse(text=text, data=event.dump())


async def update_event(args: dict[str, Any]) -> ToolResponse:
  params = parse_params(UpdateEventParams, args)
  calendar_id = resolve_calendar_id(params.calendar_id)
  event_id = params.event_id
  present = params.present_fields()
  touches_times = "start" in present or "end" in present

  try:
    time_zone = params.time_zone
    if touches_times and not time_zone:
      time_zone = await resolve_time_zone(calendar_id)

    body: dict[str, Any] = {}
    if "summary" in present:
      body["summary"] = params.summary
    if "description" in present:
      body["description"] = params.description
    if "start" in present:
      body["start"] = {"dateTime": params.start, "timeZone": time_zone}
    if "end" in present:
      body["end"] = {"dateTime": params.end, "timeZone": time_zone}
    if "time_zone" in present:
      # The provider merges nested objects, so a bare zone keeps the times.
      body.setdefault("start", {"timeZone": time_zone})
      body.setdefault("end", {"timeZone": time_zone})
    if "attendees" in present:
      body["attendees"] = _attendee_body(params.attendees)

    raw = await event_api.patch_event(calendar_id, event_id, body)
  except ProviderError as e:
    return handle_provider_error(
      "update_event",
      e,
      ErrorCategory.EVENT,
      action="update event",
      not_found=f"Event or calendar not found: {event_id} in {calendar_id}",
    )

  event = CalendarEvent.from_api(raw)
  link = event.link or event.id or event_id
  text = f'Event updated successfully: "{event.summary}"\nEvent link: {link}'
  return ToolResponse(text=text, data=event.dump())


async def delete_event(args: dict[str, Any]) -> ToolResponse:
  params = parse_params(DeleteEventParams, args)
  calendar_id = resolve_calendar_id(params.calendar_id)
  event_id = params.event_id

  try:
    await event_api.delete_event(calendar_id, event_id)
  except ProviderError as e:
    return handle_provider_error(
      "delete_event",
      e,
      ErrorCategory.EVENT,
      action="delete event",
      not_found=f"Event or calendar not found: {event_id} in {calendar_id}",
    )

  return ToolResponse(
    text=f"Event deleted successfully: {event_id} from calendar '{calendar_id}'",
    data={"calendarId": calendar_id, "eventId": event_id, "deleted": True},
  )
