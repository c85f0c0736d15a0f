"""
Google Calendar API client.

The discovery client is synchronous, so every request is executed with
asyncio.to_thread to keep the server's async contract intact.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .provider import ProviderError

log = logging.getLogger("gcal_mcp.client.google")


# Google Calendar API scopes
SCOPES = ["https://www.googleapis.com/auth/calendar"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def _error_message(error: HttpError) -> str:
  reason = getattr(error, "reason", None)
  if reason:
    return str(reason)
  return str(error)


async def _execute(request: Any, action: str) -> Any:
  """Run a prepared API request in a thread, mapping failures to ProviderError."""
  try:
    return await asyncio.to_thread(request.execute)
  except HttpError as e:
    log.error("Failed to %s: %s", action, e)
    raise ProviderError(e.resp.status, _error_message(e)) from e
  except RefreshError as e:
    log.error("Failed to refresh Google credentials while trying to %s: %s", action, e)
    raise ProviderError(401, f"Credential refresh failed: {e}") from e


class GoogleCalendarClient:
  """CalendarProvider backed by the Google Calendar v3 API."""

  def __init__(self, credentials_data: dict[str, Any] | None = None):
    """Initialize with authorized-user credentials data."""
    self.service: Any = None

    if credentials_data:
      self._load_credentials(credentials_data)

  def _load_credentials(self, credentials_data: dict[str, Any]) -> None:
    """Load credentials from authorized-user info.

    Expected keys: ``client_id``, ``client_secret`` and ``refresh_token``;
    ``token`` and ``token_uri`` are optional. An access token is minted on
    the first request when none is supplied.
    """
    info = {"token_uri": TOKEN_URI, **credentials_data}
    if not info.get("refresh_token"):
      raise ValueError("Google credentials must include a refresh_token")

    creds = Credentials.from_authorized_user_info(info, scopes=SCOPES)
    if creds.expired and creds.refresh_token:
      creds.refresh(Request())

    self.service = build("calendar", "v3", credentials=creds, cache_discovery=False)

  def _require_service(self) -> Any:
    if not self.service:
      raise RuntimeError("Not authenticated")
    return self.service

  async def list_calendars(self) -> list[dict[str, Any]]:
    """List visible calendars, skipping hidden and deleted ones."""
    service = self._require_service()
    request = service.calendarList().list(showHidden=False, showDeleted=False)
    result = await _execute(request, "list calendars")
    return result.get("items", [])

  async def get_calendar(self, calendar_id: str) -> dict[str, Any]:
    service = self._require_service()
    request = service.calendars().get(calendarId=calendar_id)
    return await _execute(request, f"get calendar {calendar_id}")

  async def list_events(
    self,
    calendar_id: str,
    *,
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int | None = None,
    time_zone: str | None = None,
  ) -> list[dict[str, Any]]:
    service = self._require_service()
    request = service.events().list(
      calendarId=calendar_id,
      timeMin=time_min,
      timeMax=time_max,
      maxResults=max_results,
      timeZone=time_zone,
      singleEvents=True,
      orderBy="startTime",
    )
    result = await _execute(request, "list events")
    return result.get("items", [])

  async def search_events(
    self,
    calendar_id: str,
    query: str,
    *,
    max_results: int | None = None,
    time_zone: str | None = None,
  ) -> list[dict[str, Any]]:
    service = self._require_service()
    request = service.events().list(
      calendarId=calendar_id,
      q=query,
      maxResults=max_results,
      timeZone=time_zone,
      singleEvents=True,
      orderBy="startTime",
    )
    result = await _execute(request, "search events")
    return result.get("items", [])

  async def insert_event(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
    service = self._require_service()
    request = service.events().insert(calendarId=calendar_id, body=body)
    return await _execute(request, "create event")

  async def patch_event(
    self, calendar_id: str, event_id: str, body: dict[str, Any]
  ) -> dict[str, Any]:
    service = self._require_service()
    request = service.events().patch(calendarId=calendar_id, eventId=event_id, body=body)
    return await _execute(request, f"update event {event_id}")

  async def delete_event(self, calendar_id: str, event_id: str) -> None:
    service = self._require_service()
    request = service.events().delete(calendarId=calendar_id, eventId=event_id)
    await _execute(request, f"delete event {event_id}")

  async def query_freebusy(
    self,
    calendar_ids: list[str],
    time_min: str,
    time_max: str,
    time_zone: str,
  ) -> dict[str, dict[str, Any]]:
    """Run one batched free/busy query; returns the per-calendar map."""
    service = self._require_service()
    body = {
      "timeMin": time_min,
      "timeMax": time_max,
      "timeZone": time_zone,
      "items": [{"id": cid} for cid in calendar_ids],
    }
    request = service.freebusy().query(body=body)
    result = await _execute(request, "query free/busy")
    return result.get("calendars", {})
