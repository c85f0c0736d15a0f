"""
Event management tools (5 tools, plus the edit_event alias).
"""

from __future__ import annotations

from typing import Any

from mcp.types import Tool

CALENDAR_ID = {
  "type": "string",
  "description": "Calendar ID, defaults to primary",
}

TIME_ZONE = {
  "type": "string",
  "description": "IANA timezone; defaults to calendar's timezone",
}

MAX_RESULTS = {
  "type": "integer",
  "minimum": 1,
  "maximum": 2500,
  "description": "Maximum number of events to return (max 2500)",
}

ATTENDEES = {
  "type": "array",
  "items": {"type": "string", "format": "email"},
  "description": "Email addresses to invite to the event",
}

UPDATE_EVENT_SCHEMA: dict[str, Any] = {
  "type": "object",
  "properties": {
    "calendarId": CALENDAR_ID,
    "eventId": {
      "type": "string",
      "minLength": 1,
      "description": "ID of the calendar event to update",
    },
    "summary": {"type": "string", "description": "New event title/summary"},
    "description": {
      "type": ["string", "null"],
      "description": "New event description; null clears it",
    },
    "start": {"type": "string", "description": "RFC3339 start datetime"},
    "end": {"type": "string", "description": "RFC3339 end datetime"},
    "timeZone": TIME_ZONE,
    "attendees": {
      **ATTENDEES,
      "type": ["array", "null"],
      "description": "Replacement attendee list; null removes all attendees",
    },
  },
  "required": ["eventId"],
}

event_tools: list[Tool] = [
  Tool(
    name="list_events",
    description="List Google Calendar events from a specific calendar and date range",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "start": {
          "type": "string",
          "description": "RFC3339 start datetime - if omitted, uses current time",
        },
        "end": {
          "type": "string",
          "description": "RFC3339 end datetime - if omitted, uses start + 30 days",
        },
        "maxResults": MAX_RESULTS,
        "timeZone": TIME_ZONE,
      },
    },
  ),
  Tool(
    name="search_events",
    description="Search for Google Calendar events by text query",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "query": {
          "type": "string",
          "minLength": 1,
          "description": "Text to search for in event titles, descriptions, etc.",
        },
        "maxResults": MAX_RESULTS,
        "timeZone": TIME_ZONE,
      },
      "required": ["query"],
    },
  ),
  Tool(
    name="create_event",
    description="Create a new Google Calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "summary": {
          "type": "string",
          "minLength": 1,
          "description": "Event title/summary",
        },
        "description": {"type": "string", "description": "Event description"},
        "start": {"type": "string", "description": "RFC3339 start datetime"},
        "end": {"type": "string", "description": "RFC3339 end datetime (after start)"},
        "timeZone": TIME_ZONE,
        "attendees": ATTENDEES,
      },
      "required": ["summary", "start", "end"],
    },
  ),
  Tool(
    name="update_event",
    description="Update an existing Google Calendar event",
    inputSchema=UPDATE_EVENT_SCHEMA,
  ),
  Tool(
    name="delete_event",
    description="Delete a Google Calendar event",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "eventId": {
          "type": "string",
          "minLength": 1,
          "description": "ID of the calendar event to delete",
        },
      },
      "required": ["eventId"],
    },
  ),
  Tool(
    name="edit_event",
    description="Edit a Google Calendar event (deprecated - use update_event)",
    inputSchema=UPDATE_EVENT_SCHEMA,
  ),
]
