"""Shared fixtures: an in-memory CalendarProvider installed in the state store."""

from __future__ import annotations

from typing import Any

import pytest

from gcal_mcp.client.provider import ProviderError
from gcal_mcp.state.store import reset_state, set_client


class FakeProvider:
  """Records every call; returns canned payloads or raises configured errors."""

  def __init__(self) -> None:
    self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
    self.errors: dict[str, ProviderError] = {}
    self.calendars: list[dict[str, Any]] = []
    self.calendar_meta: dict[str, Any] = {"id": "primary", "timeZone": "Europe/Berlin"}
    self.events: list[dict[str, Any]] = []
    self.freebusy: dict[str, dict[str, Any]] = {}
    self.existing_event: dict[str, Any] = {
      "summary": "Existing",
      "start": {"dateTime": "2025-03-01T09:00:00+01:00", "timeZone": "Europe/Berlin"},
      "end": {"dateTime": "2025-03-01T10:00:00+01:00", "timeZone": "Europe/Berlin"},
      "htmlLink": "https://calendar.google.com/event?eid=existing",
    }

  def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
    self.calls.append((name, args, kwargs))
    if name in self.errors:
      raise self.errors[name]

  def call_names(self) -> list[str]:
    return [name for name, _, _ in self.calls]

  def last_call(self, name: str) -> tuple[tuple[Any, ...], dict[str, Any]]:
    for call_name, args, kwargs in reversed(self.calls):
      if call_name == name:
        return args, kwargs
    raise AssertionError(f"{name} was never called")

  async def list_calendars(self) -> list[dict[str, Any]]:
    self._record("list_calendars")
    return self.calendars

  async def get_calendar(self, calendar_id: str) -> dict[str, Any]:
    self._record("get_calendar", calendar_id)
    return self.calendar_meta

  async def list_events(self, calendar_id: str, **kwargs: Any) -> list[dict[str, Any]]:
    self._record("list_events", calendar_id, **kwargs)
    return self.events

  async def search_events(self, calendar_id: str, query: str, **kwargs: Any) -> list[dict[str, Any]]:
    self._record("search_events", calendar_id, query, **kwargs)
    return self.events

  async def insert_event(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
    self._record("insert_event", calendar_id, body)
    return {"id": "evt-new", "htmlLink": "https://calendar.google.com/event?eid=new", **body}

  async def patch_event(self, calendar_id: str, event_id: str, body: dict[str, Any]) -> dict[str, Any]:
    self._record("patch_event", calendar_id, event_id, body)
    return {**self.existing_event, "id": event_id, **body}

  async def delete_event(self, calendar_id: str, event_id: str) -> None:
    self._record("delete_event", calendar_id, event_id)

  async def query_freebusy(
    self, calendar_ids: list[str], time_min: str, time_max: str, time_zone: str
  ) -> dict[str, dict[str, Any]]:
    self._record("query_freebusy", calendar_ids, time_min, time_max, time_zone)
    return self.freebusy


@pytest.fixture
def provider():
  fake = FakeProvider()
  set_client(fake)
  yield fake
  reset_state()


def _make_event(event_id: str, summary: str, start: str, end: str, **extra: Any) -> dict[str, Any]:
  return {
    "id": event_id,
    "summary": summary,
    "start": {"dateTime": start, "timeZone": "Europe/Berlin"},
    "end": {"dateTime": end, "timeZone": "Europe/Berlin"},
    **extra,
  }


@pytest.fixture
def make_event():
  return _make_event

